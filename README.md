# voxkit

Turns triangle models into boolean voxel grids. The package holds the mesh and
model data types, the triangle/box overlap test the voxelizer relies on, and
small camera and material descriptions. It is pure Python and has no
dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Building a model

`voxkit.model.Model` collects meshes. `add_mesh(positions, faces, normals=None,
uvs=None, tangents=None, bitangents=None)` builds a `voxkit.mesh.Mesh` from
per-vertex arrays and a list of faces, adds it and returns it:

```python
from voxkit.model import Model

model = Model()
model.add_mesh(
    positions=[(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)],
    faces=[(0, 1, 2)],
)
triangles = model.get_triangles()
```

Things to know about `add_mesh`:

- Every optional array must have one entry per position, or `ValueError` is
  raised; a face index outside the positions raises `IndexError`.
- Mesh vertices closer than 0.1 to the origin are moved to `(0, 1, 0)`; the
  triangles keep the original positions.
- Tangents and bitangents are stored only when `uvs` is given.
- Faces with other than three corners contribute indices to the mesh but no
  triangle.

`get_triangles()` returns a copy of every `voxkit.mesh.Triangle` added so far.
A `Triangle` holds three `Vertex` objects and offers `min_point()` and
`max_point()`, the component-wise bounds of its positions. `Vertex` carries
`position`, `normal`, `uv`, `tangent` and `bitangent`. `Mesh` has `vertices`,
`indices` and `textures` (a list of `TriangleTexture` with `id`, `type` and
`path`). `voxkit.model.TriangleMaterial` holds `diffuse`, `specular`, `ambient`
and `shininess`.

## Voxelizing

```python
from voxkit.voxelizer import ModelVoxelizer

voxelizer = ModelVoxelizer(resolution=16)
voxelizer.set_model(model)
voxelizer.voxelize_model()

print(voxelizer.grid_size)        # cells along x, y, z
print(voxelizer.voxel_size)       # world size of one cell
print(sum(voxelizer.voxel_grid))  # occupied cells
print(voxelizer.active_voxels)    # occupied cells, centred on the grid
```

The grid covers the model's bounding box padded by one unit on every side. Its
longest axis has `resolution` cells (64 by default) and the other axes are
scaled in proportion. `voxel_grid` is a flat list of booleans indexed
`z * size_x * size_y + y * size_x + x`.

`voxelize_model()` returns `False` when no model is set and `True` otherwise,
and sets `is_voxelized`. The steps are also available one by one:
`setup_bounding_box()` (raises `ValueError` for a missing or empty model),
`triangle_voxelization()`, which returns the grid, and
`generate_active_voxels()`. `world_to_grid(point)` gives the cell containing a
point and `triangle_intersection(triangle, voxel_min)` tests one triangle
against one cell. `set_voxel_resolution()` changes the resolution for the next
run and `clear_resources()` drops the model and all voxel data.

## Triangle/box overlap

`voxkit.overlap.triangle_box_overlap(box_center, box_half_size,
triangle_vertices)` reports whether a triangle, given as three `Vertex` objects
or three points, intersects an axis-aligned box, using the separating axis
theorem. Its parts are public too: `project_triangle(axis, vertices)` and
`project_box(axis, box_center, box_half_size)` return `(min, max)` intervals,
and `overlaps(min1, max1, min2, max2)` tests two closed intervals.

## Camera and materials

`voxkit.camera.Camera` is a dataclass with `rotation` (pitch, yaw in radians),
`move_speed`, `mouse_sensitivity` and `resolution`. It computes
`horizontal_fov()` (a quarter turn), `vertical_fov()` and `aspect_ratio()` from
the resolution, `near_plane()` and `far_plane()`, and z-up movement vectors
from the yaw: `forward_move_direction()`, `right_move_direction()` and
`up_move_direction()`. Set a non-zero `resolution` before asking for the aspect
ratio or vertical field of view.

`voxkit.material.Material(index=None, key="", name=None)` describes a voxel
material with `emission`, `albedo`, `metallic_albedo`, `texture_scale`,
`roughness`, `metallic` and three texture slots. `index()` returns the index as
an unsigned 16-bit value (0xFFFF when none was given) and `key()` the string
key; an index outside 0 to 65535 raises `ValueError`, and copying a material
raises `TypeError`. `MaterialDefinition` is a dataclass in the field order of
the GPU-side material record.

## What it does not do

- It does not read model files; meshes are built from arrays with
  `Model.add_mesh`.
- It draws nothing: there is no window, preview or GPU voxelization, and
  textures are only recorded, never loaded.
- Voxel grids are returned as Python lists; nothing places them into a world or
  saves them to disk.
- There is no command-line tool.
"""Voxelization of triangle models onto a regular occupancy grid."""

import math
from collections import defaultdict
from itertools import product

from voxkit.overlap import triangle_box_overlap

_DEFAULT_RESOLUTION = 64
_PADDING = 1.0


class ModelVoxelizer:
    """Converts a model's triangles into a boolean voxel grid.

    The grid spans the model's bounding box padded by one unit on every
    side. Its longest axis has ``grid_resolution`` cells; the other axes are
    scaled proportionally. Cells are stored flat, indexed
    ``z * size_x * size_y + y * size_x + x``.
    """

    def __init__(self, resolution=_DEFAULT_RESOLUTION):
        self.grid_resolution = int(resolution)
        self.model = None
        self.is_voxelized = False
        self._reset_grid()

    def _reset_grid(self):
        self.grid_size = (0, 0, 0)
        self.voxel_size = (0.0, 0.0, 0.0)
        self.min_bounds = (0.0, 0.0, 0.0)
        self.max_bounds = (0.0, 0.0, 0.0)
        self.voxel_grid = []
        self.active_voxels = []

    def set_voxel_resolution(self, resolution):
        """Set the number of cells along the longest axis of the grid."""
        self.grid_resolution = int(resolution)

    def set_model(self, model):
        """Use ``model`` for the next voxelization."""
        self.model = model

    def _index(self, x, y, z):
        size_x, size_y, _ = self.grid_size
        return z * size_x * size_y + y * size_x + x

    def _cells(self):
        size_x, size_y, size_z = self.grid_size
        for z, y, x in product(range(size_z), range(size_y), range(size_x)):
            yield x, y, z

    def setup_bounding_box(self):
        """Compute the padded bounds, grid size and voxel size from the model."""
        if self.model is None:
            raise ValueError("No model has been set")
        positions = [
            vertex.position for mesh in self.model.meshes for vertex in mesh.vertices
        ]
        if not positions:
            raise ValueError("Model has no vertices")

        lowest = tuple(min(axis) for axis in zip(*positions))
        highest = tuple(max(axis) for axis in zip(*positions))
        self.min_bounds = tuple(c - _PADDING for c in lowest)
        self.max_bounds = tuple(c + _PADDING for c in highest)

        bounds = tuple(hi - lo for lo, hi in zip(self.min_bounds, self.max_bounds))
        max_dim = max(bounds)
        if max_dim < 1e-6:
            max_dim = 1.0

        self.grid_size = tuple(
            math.ceil(extent / max_dim * self.grid_resolution) for extent in bounds
        )
        self.voxel_size = tuple(extent / cells for extent, cells in zip(bounds, self.grid_size))
        size_x, size_y, size_z = self.grid_size
        self.voxel_grid = [False] * (size_x * size_y * size_z)

    def world_to_grid(self, world_position):
        """Return the integer grid cell containing a world-space point."""
        return tuple(
            math.floor((w - lo) / size)
            for w, lo, size in zip(world_position, self.min_bounds, self.voxel_size)
        )

    def triangle_intersection(self, triangle, voxel_min):
        """True when ``triangle`` overlaps the voxel whose minimum corner is ``voxel_min``."""
        half = tuple(size * 0.5 for size in self.voxel_size)
        center = tuple(lo + h for lo, h in zip(voxel_min, half))
        return triangle_box_overlap(center, half, triangle.vertices)

    def triangle_voxelization(self):
        """Mark every voxel touched by a model triangle; return the voxel grid."""
        spatial_grid = defaultdict(list)
        for triangle in self.model.get_triangles():
            min_cell = self.world_to_grid(triangle.min_point())
            max_cell = self.world_to_grid(triangle.max_point())
            for z, y, x in product(
                range(min_cell[2], max_cell[2] + 1),
                range(min_cell[1], max_cell[1] + 1),
                range(min_cell[0], max_cell[0] + 1),
            ):
                spatial_grid[(x, y, z)].append(triangle)

        grid = [False] * len(self.voxel_grid)
        for x, y, z in self._cells():
            voxel_min = tuple(
                lo + i * size for lo, i, size in zip(self.min_bounds, (x, y, z), self.voxel_size)
            )
            candidates = spatial_grid.get(self.world_to_grid(voxel_min), ())
            if any(self.triangle_intersection(tri, voxel_min) for tri in candidates):
                grid[self._index(x, y, z)] = True

        self.voxel_grid = grid
        return grid

    def generate_active_voxels(self):
        """List the occupied cells as positions centred on the grid; marks the model voxelized."""
        grid_center = tuple(
            lo + cells * 0.5 for lo, cells in zip(self.min_bounds, self.grid_size)
        )
        self.active_voxels = [
            tuple(lo + i - c for lo, i, c in zip(self.min_bounds, (x, y, z), grid_center))
            for x, y, z in self._cells()
            if self.voxel_grid[self._index(x, y, z)]
        ]
        self.is_voxelized = True
        return self.active_voxels

    def voxelize_model(self):
        """Voxelize the current model; return False when there is no model."""
        if self.model is None:
            return False
        self.setup_bounding_box()
        self.triangle_voxelization()
        self.generate_active_voxels()
        return True

    def clear_resources(self):
        """Drop the model and all voxel data."""
        self.model = None
        self._reset_grid()
        self.is_voxelized = False
"""A model assembled from meshes, keeping a flat list of its triangles."""

import math
from dataclasses import dataclass

from voxkit.mesh import Mesh, Triangle, Vertex

_ORIGIN_REPLACEMENT = (0.0, 1.0, 0.0)


@dataclass
class TriangleMaterial:
    """Basic Phong material colours."""

    diffuse: tuple = (0.0, 0.0, 0.0)
    specular: tuple = (0.0, 0.0, 0.0)
    ambient: tuple = (0.0, 0.0, 0.0)
    shininess: float = 0.0


def _vec(values, size):
    result = tuple(float(c) for c in values)
    if len(result) < size:
        raise ValueError(f"Expected a vector with at least {size} components")
    return result[:size]


def _check_length(name, values, count):
    if values is not None and len(values) != count:
        raise ValueError(f"{name} must have one entry per position ({count}), got {len(values)}")


class Model:
    """A collection of meshes and every triangular face they contain."""

    def __init__(self):
        self.meshes = []
        self.textures_loaded = []
        self._triangles = []

    def add_mesh(self, positions, faces, normals=None, uvs=None, tangents=None, bitangents=None):
        """Build a mesh from per-vertex arrays and faces, add it and return it.

        Mesh vertices closer than 0.1 to the origin are moved to (0, 1, 0);
        triangles keep the original positions. Tangents and bitangents are
        only used when texture coordinates are given. Faces that are not
        triangles add indices but no triangle.
        """
        positions = [_vec(p, 3) for p in positions]
        count = len(positions)
        for name, values in (("normals", normals), ("uvs", uvs),
                             ("tangents", tangents), ("bitangents", bitangents)):
            _check_length(name, values, count)
        normals = [_vec(n, 3) for n in normals] if normals is not None else None
        uvs = [_vec(t, 2) for t in uvs] if uvs is not None else None
        tangents = [_vec(t, 3) for t in tangents] if tangents is not None else None
        bitangents = [_vec(b, 3) for b in bitangents] if bitangents is not None else None

        vertices = []
        for i, position in enumerate(positions):
            attributes = {
                "position": _ORIGIN_REPLACEMENT if math.hypot(*position) < 0.1 else position,
            }
            if normals is not None:
                attributes["normal"] = normals[i]
            if uvs is not None:
                attributes["uv"] = uvs[i]
                if tangents is not None:
                    attributes["tangent"] = tangents[i]
                if bitangents is not None:
                    attributes["bitangent"] = bitangents[i]
            vertices.append(Vertex(**attributes))

        faces = [tuple(int(i) for i in face) for face in faces]
        for face in faces:
            for index in face:
                if not 0 <= index < count:
                    raise IndexError(f"Face index {index} out of range for {count} vertices")

        indices = [index for face in faces for index in face]

        for face in faces:
            if len(face) != 3:
                continue
            corners = []
            for index in face:
                attributes = {"position": positions[index]}
                if normals is not None:
                    attributes["normal"] = normals[index]
                if uvs is not None:
                    attributes["uv"] = uvs[index]
                corners.append(Vertex(**attributes))
            self._triangles.append(Triangle(tuple(corners)))

        mesh = Mesh(vertices, indices, [])
        self.meshes.append(mesh)
        return mesh

    def get_triangles(self):
        """Return a copy of all triangles added so far."""
        return list(self._triangles)
"""Triangle-mesh data: vertices, triangles, texture references and meshes."""

from dataclasses import dataclass, field

Vec2 = tuple
Vec3 = tuple


@dataclass(frozen=True)
class Vertex:
    """One mesh vertex with its shading attributes."""

    position: Vec3 = (0.0, 0.0, 0.0)
    normal: Vec3 = (0.0, 0.0, 0.0)
    uv: Vec2 = (0.0, 0.0)
    tangent: Vec3 = (0.0, 0.0, 0.0)
    bitangent: Vec3 = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Triangle:
    """Three vertices forming one face."""

    vertices: tuple = (Vertex(), Vertex(), Vertex())

    def __post_init__(self):
        if len(self.vertices) != 3:
            raise ValueError("A triangle needs exactly 3 vertices")
        object.__setattr__(self, "vertices", tuple(self.vertices))

    def min_point(self):
        """Component-wise minimum of the vertex positions."""
        return tuple(min(axis) for axis in zip(*(v.position for v in self.vertices)))

    def max_point(self):
        """Component-wise maximum of the vertex positions."""
        return tuple(max(axis) for axis in zip(*(v.position for v in self.vertices)))


@dataclass
class TriangleTexture:
    """A texture referenced by a mesh material."""

    id: int = 0
    type: str = ""
    path: str = ""


@dataclass
class Mesh:
    """Indexed vertex data plus the textures it uses."""

    vertices: list = field(default_factory=list)
    indices: list = field(default_factory=list)
    textures: list = field(default_factory=list)
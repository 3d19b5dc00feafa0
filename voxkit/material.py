"""Voxel materials and their GPU-side definition layout."""

from dataclasses import dataclass

_UINT16_MASK = 0xFFFF


@dataclass
class MaterialDefinition:
    """Material data in the layout sent to the GPU."""

    emission: tuple = (0.0, 0.0, 0.0)
    texture_scale_x: float = 1.0
    albedo: tuple = (0.0, 0.0, 0.0)
    texture_scale_y: float = 1.0
    metallic_albedo: tuple = (0.0, 0.0, 0.0)
    padding1: float = 0.0
    roughness: float = 0.0
    metallic: float = 0.0
    albedo_texture_id: int = 0
    roughness_texture_id: int = 0
    emission_texture_id: int = 0


class Material:
    """A voxel material, identified by an integer index or a string key.

    Voxels store the index; serialized materials store the key. A material
    created without an index reports index 0xFFFF. Materials cannot be copied.
    """

    def __init__(self, index=None, key="", name=None):
        if index is None:
            self._index = -1
            default_name = ""
        else:
            index = int(index)
            if not 0 <= index <= _UINT16_MASK:
                raise ValueError(f"Material index {index} is outside the 16-bit range")
            self._index = index
            default_name = "UNNAMED"
        self._key = key
        self.name = default_name if name is None else name

        self.emission = (0.0, 0.0, 0.0)
        self.albedo = (1.0, 1.0, 1.0)
        self.metallic_albedo = (1.0, 1.0, 1.0)
        self.texture_scale = (1.0, 1.0)
        self.roughness = 1.0
        self.metallic = 0.0

        self.albedo_texture = None
        self.roughness_texture = None
        self.emission_texture = None

    def index(self):
        """Index of the material in the material array, as an unsigned 16-bit value."""
        return self._index & _UINT16_MASK

    def key(self):
        """String key of the material."""
        return self._key

    def __copy__(self):
        raise TypeError("Material cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("Material cannot be copied")
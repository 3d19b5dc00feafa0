import copy

import pytest

from voxkit.material import Material, MaterialDefinition


def test_index_and_key_round_trip():
    material = Material(12, "stone", "Stone")
    assert material.index() == 12
    assert material.key() == "stone"
    assert material.name == "Stone"


def test_default_name_with_index():
    assert Material(3, "dirt").name == "UNNAMED"


def test_default_constructed_material():
    material = Material()
    assert material.index() == 0xFFFF
    assert material.key() == ""
    assert material.name == ""


def test_largest_index_round_trips():
    assert Material(0xFFFF, "last").index() == 0xFFFF


@pytest.mark.parametrize("index", [-1, 0x10000])
def test_out_of_range_index_raises(index):
    with pytest.raises(ValueError):
        Material(index, "bad")


def test_default_surface_properties():
    material = Material(0, "air")
    assert material.albedo == (1.0, 1.0, 1.0)
    assert material.metallic_albedo == (1.0, 1.0, 1.0)
    assert material.emission == (0.0, 0.0, 0.0)
    assert material.texture_scale == (1.0, 1.0)
    assert material.roughness == 1
    assert material.metallic == 0
    assert material.albedo_texture is None


def test_material_cannot_be_copied():
    material = Material(1, "grass")
    with pytest.raises(TypeError):
        copy.copy(material)
    with pytest.raises(TypeError):
        copy.deepcopy(material)


def test_definition_defaults():
    definition = MaterialDefinition()
    assert definition.texture_scale_x == 1
    assert definition.texture_scale_y == 1
    assert definition.albedo_texture_id == 0
    assert definition.roughness_texture_id == 0
    assert definition.emission_texture_id == 0


def test_definition_fields_round_trip():
    definition = MaterialDefinition(albedo=(0.5, 0.25, 0.75), roughness=0.4, albedo_texture_id=7)
    assert definition.albedo == (0.5, 0.25, 0.75)
    assert definition.roughness == 0.4
    assert definition.albedo_texture_id == 7
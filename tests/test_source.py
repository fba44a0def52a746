import pytest
from gltf_formats.mesh import (
	BlendShape,
	BoneWeight,
	MeshExportSettings,
	MeshWithRenderer,
	SourceMesh
)


def test_bone_weight_from_pairs():
	weight = BoneWeight.from_pairs([(3, 0.75), (1, 0.25)])
	assert weight.bone_indices == (3, 1, 0, 0)
	assert weight.weights == (0.75, 0.25, 0.0, 0.0)
	assert weight == BoneWeight((3, 1, 0, 0), (0.75, 0.25, 0.0, 0.0))
	with pytest.raises(ValueError):
		BoneWeight.from_pairs([(0, 0.2)] * 5)
	with pytest.raises(ValueError):
		BoneWeight((0, 1), (0.5, 0.5))


def test_source_mesh_defaults():
	mesh = SourceMesh.from_arrays('quad', [(0.0, 0.0, 0.0)] * 4, submeshes=[(0, 1, 2)])
	assert mesh.vertex_count == 4
	assert mesh.normals == [(0.0, 0.0, 0.0)] * 4
	assert mesh.uvs == [(0.0, 0.0)] * 4
	assert mesh.get_indices(0) == [0, 1, 2]
	assert mesh.submesh_count == 1
	assert mesh.blend_shape_count == 0
	assert not mesh.has_complete_skin()


def test_source_mesh_validation():
	with pytest.raises(ValueError):
		SourceMesh.from_arrays('bad', [(0.0, 0.0, 0.0)] * 4, normals=[(0.0, 1.0, 0.0)] * 3)
	with pytest.raises(ValueError):
		SourceMesh.from_arrays('bad', [(0.0, 0.0, 0.0)] * 4, blend_shapes=[BlendShape('short', [(0.0, 0.0, 0.0)])])


def test_skin_completeness():
	weights = [BoneWeight()] * 3
	assert SourceMesh.from_arrays('a', [(0.0, 0.0, 0.0)] * 3, bone_weights=weights).has_complete_skin()
	assert not SourceMesh.from_arrays('b', [(0.0, 0.0, 0.0)] * 3, bone_weights=weights[:2]).has_complete_skin()
	assert not SourceMesh.from_arrays('c', [(0.0, 0.0, 0.0)] * 3, bone_weights=[None] + weights[:2]).has_complete_skin()


def test_renderer():
	material = object()
	renderer = MeshWithRenderer(SourceMesh('a'), [material])
	assert renderer.get_material(0) is material
	assert renderer.get_material(1) is None
	assert renderer.get_joint_index(5) == 5
	assert MeshWithRenderer(SourceMesh('a'), joint_map={5: 2}).get_joint_index(5) == 2


def test_settings_from_params():
	settings = MeshExportSettings.from_params({})
	assert not settings.export_tangents
	assert not settings.export_only_blend_shape_position

	settings = MeshExportSettings.from_params({'tangents': True, 'only_blend_shape_position': 1, 'debug': True})
	assert settings.export_tangents
	assert settings.export_only_blend_shape_position

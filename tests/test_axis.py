import pytest
from gltf_formats.mesh.axis import (
	NoInversion,
	ReverseX,
	ReverseZ,
	get_axis_inverter,
	reverse_uv
)


def test_reverse_z():
	assert ReverseZ().invert_vector3((1.0, 2.0, 3.0)) == (1.0, 2.0, -3.0)


def test_reverse_x():
	assert ReverseX().invert_vector3((1.0, 2.0, 3.0)) == (-1.0, 2.0, 3.0)


def test_no_inversion():
	assert NoInversion().invert_vector3((1.0, 2.0, 3.0)) == (1.0, 2.0, 3.0)


def test_get_axis_inverter():
	assert isinstance(get_axis_inverter(), ReverseZ)
	assert isinstance(get_axis_inverter('X'), ReverseX)
	assert isinstance(get_axis_inverter('none'), NoInversion)
	with pytest.raises(ValueError):
		get_axis_inverter('y')


def test_reverse_uv():
	assert reverse_uv((0.25, 0.25)) == (0.25, 0.75)
	assert reverse_uv((1.0, 0.0)) == (1.0, 1.0)

from enum import Enum, IntEnum

# @note: values are the raw numbers the gltf 2.0 json expects


# -------------------------------------------------------------------------------------------------
class BufferTarget(IntEnum):
	ARRAY_BUFFER = 34962 # vertex attributes
	ELEMENT_ARRAY_BUFFER = 34963 # indices


# -------------------------------------------------------------------------------------------------
class ComponentType(IntEnum):
	BYTE = 5120
	UNSIGNED_BYTE = 5121
	SHORT = 5122
	UNSIGNED_SHORT = 5123
	UNSIGNED_INT = 5125
	FLOAT = 5126

	# ---------------------------------------------------------------------------------------------
	def get_format(self):
		return _COMPONENT_FORMATS[self]


_COMPONENT_FORMATS = {
	ComponentType.BYTE: 'b',
	ComponentType.UNSIGNED_BYTE: 'B',
	ComponentType.SHORT: 'h',
	ComponentType.UNSIGNED_SHORT: 'H',
	ComponentType.UNSIGNED_INT: 'I',
	ComponentType.FLOAT: 'f',
}


# -------------------------------------------------------------------------------------------------
class AccessorType(Enum):
	SCALAR = 1
	VEC2 = 2
	VEC3 = 3
	VEC4 = 4

	# ---------------------------------------------------------------------------------------------
	def get_num_components(self):
		return self.value


# -------------------------------------------------------------------------------------------------
class PrimitiveMode(IntEnum):
	POINTS = 0
	LINES = 1
	LINE_LOOP = 2
	LINE_STRIP = 3
	TRIANGLES = 4
	TRIANGLE_STRIP = 5
	TRIANGLE_FAN = 6

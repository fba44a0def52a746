from gltf_formats.utils.writer import BinaryWriter
from gltf_formats.utils.reader import BinaryReader
from gltf_formats.shared.enums import AccessorType, BufferTarget, ComponentType

# accessor handle used in place of a missing attribute
NO_ACCESSOR = -1


# -------------------------------------------------------------------------------------------------
class TypedArray:
    """
    A homogeneous array of scalars or fixed size tuples, tagged with the gltf
    accessor type and component type it should be packed as.
    """

    # ---------------------------------------------------------------------------------------------
    def __init__(self, values, accessor_type, component_type):
        self.values = list(values)
        self.accessor_type = accessor_type
        self.component_type = component_type

    # ---------------------------------------------------------------------------------------------
    @classmethod
    def vec2(cls, values):
        return cls(values, AccessorType.VEC2, ComponentType.FLOAT)

    # ---------------------------------------------------------------------------------------------
    @classmethod
    def vec3(cls, values):
        return cls(values, AccessorType.VEC3, ComponentType.FLOAT)

    # ---------------------------------------------------------------------------------------------
    @classmethod
    def vec4(cls, values):
        return cls(values, AccessorType.VEC4, ComponentType.FLOAT)

    # ---------------------------------------------------------------------------------------------
    @classmethod
    def ushort4(cls, values):
        return cls(values, AccessorType.VEC4, ComponentType.UNSIGNED_SHORT)

    # ---------------------------------------------------------------------------------------------
    @classmethod
    def uint(cls, values):
        return cls(values, AccessorType.SCALAR, ComponentType.UNSIGNED_INT)

    # ---------------------------------------------------------------------------------------------
    def get_format(self):
        return get_element_format(self.accessor_type, self.component_type)

    # ---------------------------------------------------------------------------------------------
    def __len__(self):
        return len(self.values)


# -------------------------------------------------------------------------------------------------
def get_element_format(accessor_type, component_type):
    return F"{accessor_type.get_num_components()}{component_type.get_format()}"


# -------------------------------------------------------------------------------------------------
class GltfBuffer:
    """
    Append-only sink for binary attribute data. Every call to `append` adds
    one bufferView and one accessor, handles are assigned in call order.
    """

    # ---------------------------------------------------------------------------------------------
    def __init__(self):
        self.buffers = []
        self.buffer_views = []
        self.accessors = []

    # ---------------------------------------------------------------------------------------------
    def add_buffer(self):
        self.buffers.append(BinaryWriter())
        return len(self.buffers) - 1

    # ---------------------------------------------------------------------------------------------
    def append(self, buffer_index, array, target=BufferTarget.ARRAY_BUFFER):
        """
        Packs a typed array at the end of a buffer and describes it.

        Args:
        - buffer_index (int): Index of a buffer created with `add_buffer`.
        - array (TypedArray): The values to pack.
        - target (BufferTarget): Vertex attribute or index data.

        Returns:
        - int: The accessor index.
        """
        writer = self.buffers[buffer_index]

        # gltf requires accessor offsets aligned to the component size, 4 covers them all
        writer.pad(4)
        offset = writer.tell()
        length = writer.write_elements(array.values, array.get_format())

        self.buffer_views.append({
            'buffer': buffer_index,
            'byteOffset': offset,
            'byteLength': length,
            'target': int(target),
        })

        accessor = {
            'bufferView': len(self.buffer_views) - 1,
            'byteOffset': 0,
            'componentType': int(array.component_type),
            'count': len(array),
            'type': array.accessor_type.name,
        }
        if array.accessor_type is AccessorType.VEC3 and array.component_type is ComponentType.FLOAT and array.values:
            accessor['min'] = [min(v[i] for v in array.values) for i in range(3)]
            accessor['max'] = [max(v[i] for v in array.values) for i in range(3)]

        self.accessors.append(accessor)
        return len(self.accessors) - 1

    # ---------------------------------------------------------------------------------------------
    def get_bytes(self, buffer_index):
        return self.buffers[buffer_index].stream.getvalue()

    # ---------------------------------------------------------------------------------------------
    def read_accessor(self, accessor_index):
        accessor = self.accessors[accessor_index]
        view = self.buffer_views[accessor['bufferView']]
        fmt = get_element_format(AccessorType[accessor['type']], ComponentType(accessor['componentType']))

        br = BinaryReader(self.get_bytes(view['buffer']))
        br.seek(view['byteOffset'] + accessor['byteOffset'])
        return br.read_elements(accessor['count'], fmt)

    # ---------------------------------------------------------------------------------------------
    def to_dict(self, uris=None):
        buffers = []
        for index in range(len(self.buffers)):
            buffer = {'byteLength': len(self.get_bytes(index))}
            if uris:
                buffer['uri'] = uris[index]
            buffers.append(buffer)

        return {
            'buffers': buffers,
            'bufferViews': list(self.buffer_views),
            'accessors': list(self.accessors),
        }

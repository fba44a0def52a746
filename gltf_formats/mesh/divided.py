from gltf_formats.shared.enums import BufferTarget, PrimitiveMode
from gltf_formats.mesh.axis import reverse_uv
from gltf_formats.mesh.buffer import NO_ACCESSOR, TypedArray
from gltf_formats.mesh.errors import (
    InternalConsistencyError,
    TopologyDiagnostic,
    UnsupportedFeatureError,
    print_warning_message
)

# -------------------------------------------------------------------------------------------------
# exports one mesh as one gltf primitive per submesh.
# the source keeps a single vertex array for the whole model, every primitive gets its own
# compacted copy holding only the vertices its triangles use.

# --- notes ---------------------------------------------------------------------------------------
# - local vertex order is ascending global index order, not triangle order
#   - morph targets rely on this to line up with the primitive without sharing the index map
# - accessors are appended in a fixed order, primitive by primitive:
#   - indices, POSITION, NORMAL, TEXCOORD_0, JOINTS_0, WEIGHTS_0, then each morph target


# -------------------------------------------------------------------------------------------------
class MorphTarget:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, position_deltas, normal_deltas=None):
        self.position_deltas = position_deltas
        self.normal_deltas = normal_deltas
        self.position_accessor = NO_ACCESSOR
        self.normal_accessor = NO_ACCESSOR

    # ---------------------------------------------------------------------------------------------
    def to_dict(self):
        target = {'POSITION': self.position_accessor}
        if self.normal_accessor != NO_ACCESSOR:
            target['NORMAL'] = self.normal_accessor
        return target


# -------------------------------------------------------------------------------------------------
class Primitive:

    # ---------------------------------------------------------------------------------------------
    def __init__(self):
        self.positions = []
        self.normals = []
        self.uvs = []
        self.joints = None
        self.weights = None
        self.indices = []
        self.material = -1
        self.mode = PrimitiveMode.TRIANGLES
        self.targets = []

        self.indices_accessor = NO_ACCESSOR
        self.attributes = {
            'POSITION': NO_ACCESSOR,
            'NORMAL': NO_ACCESSOR,
            'TEXCOORD_0': NO_ACCESSOR,
            'JOINTS_0': NO_ACCESSOR,
            'WEIGHTS_0': NO_ACCESSOR,
        }

    # ---------------------------------------------------------------------------------------------
    @property
    def vertex_count(self):
        return len(self.positions)

    # ---------------------------------------------------------------------------------------------
    def to_dict(self):
        primitive = {
            'attributes': {key: value for key, value in self.attributes.items() if value != NO_ACCESSOR},
            'indices': self.indices_accessor,
            'mode': int(self.mode),
        }
        if self.material >= 0:
            primitive['material'] = self.material
        if self.targets:
            primitive['targets'] = [target.to_dict() for target in self.targets]
        return primitive


# -------------------------------------------------------------------------------------------------
class MeshDescriptor:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, name):
        self.name = name
        self.primitives = []
        self.target_names = []
        self.diagnostics = []

    # ---------------------------------------------------------------------------------------------
    def to_dict(self):
        mesh = {
            'name': self.name,
            'primitives': [primitive.to_dict() for primitive in self.primitives if primitive.vertex_count],
        }
        if self.target_names:
            mesh['extras'] = {'targetNames': list(self.target_names)}
        return mesh


# -------------------------------------------------------------------------------------------------
class BlendShapeCollector:

    # ---------------------------------------------------------------------------------------------
    def __init__(self):
        self.positions = []
        self.normals = []

    # ---------------------------------------------------------------------------------------------
    def push(self, position, normal):
        self.positions.append(position)
        self.normals.append(normal)

    # ---------------------------------------------------------------------------------------------
    def to_gltf(self, gltf, buffer_index, use_normal, vertex_count):
        if len(self.positions) != vertex_count:
            raise InternalConsistencyError(F"Morph target has {len(self.positions)} vertices, primitive has {vertex_count}")

        target = MorphTarget(list(self.positions), list(self.normals) if use_normal else None)
        target.position_accessor = gltf.append(buffer_index, TypedArray.vec3(self.positions), BufferTarget.ARRAY_BUFFER)
        if use_normal:
            target.normal_accessor = gltf.append(buffer_index, TypedArray.vec3(self.normals), BufferTarget.ARRAY_BUFFER)
        return target


# -------------------------------------------------------------------------------------------------
class VertexPartitioner:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, get_joint_index=None):
        # global vertex index -> local vertex index
        self.vertex_index_map = {}

        self.positions = []
        self.normals = []
        self.uvs = []

        self.get_joint_index = get_joint_index
        self.joints = None
        self.weights = None
        if get_joint_index is not None:
            self.joints = []
            self.weights = []

    # ---------------------------------------------------------------------------------------------
    def __len__(self):
        return len(self.positions)

    # ---------------------------------------------------------------------------------------------
    def contains_triangle(self, v0, v1, v2):
        return v0 in self.vertex_index_map and v1 in self.vertex_index_map and v2 in self.vertex_index_map

    # ---------------------------------------------------------------------------------------------
    def push(self, index, position, normal, uv):
        if index in self.vertex_index_map:
            raise InternalConsistencyError(F"Vertex {index} was pushed twice into the same submesh")

        self.vertex_index_map[index] = len(self.positions)
        self.positions.append(position)
        self.normals.append(normal)
        self.uvs.append(uv)

    # ---------------------------------------------------------------------------------------------
    def push_bone_weight(self, bone_weight):
        if self.joints is None:
            raise InternalConsistencyError('Bone weight pushed into a submesh without skinning')
        if len(self.joints) != len(self.positions) - 1:
            raise InternalConsistencyError(F"Bone weight {len(self.joints)} does not follow vertex {len(self.positions) - 1}")

        # unused influences are padded with bone 0, they never reach the joint map
        joints = tuple(self.get_joint_index(index) if weight else 0 for index, weight in zip(bone_weight.bone_indices, bone_weight.weights))
        self.joints.append(joints)
        self.weights.append(bone_weight.weights)

    # ---------------------------------------------------------------------------------------------
    def remap(self, index):
        try:
            return self.vertex_index_map[index]
        except KeyError:
            raise InternalConsistencyError(F"Vertex {index} is not part of this submesh")

    # ---------------------------------------------------------------------------------------------
    def to_primitive(self, gltf, buffer_index, material_index, indices):
        """
        Emits the compacted vertex buffer and the remapped triangle list.

        Args:
        - gltf (GltfBuffer): The shared accessor sink.
        - buffer_index (int): The buffer to append to.
        - material_index (int): Material index or -1.
        - indices (list): Winding corrected triangles, as global vertex indices.

        Returns:
        - Primitive: With accessors assigned and no morph targets yet.
        """
        primitive = Primitive()
        primitive.indices = [self.remap(index) for index in indices]
        primitive.positions = list(self.positions)
        primitive.normals = list(self.normals)
        primitive.uvs = list(self.uvs)
        primitive.material = material_index

        primitive.indices_accessor = gltf.append(buffer_index, TypedArray.uint(primitive.indices), BufferTarget.ELEMENT_ARRAY_BUFFER)
        primitive.attributes['POSITION'] = gltf.append(buffer_index, TypedArray.vec3(self.positions), BufferTarget.ARRAY_BUFFER)
        primitive.attributes['NORMAL'] = gltf.append(buffer_index, TypedArray.vec3(self.normals), BufferTarget.ARRAY_BUFFER)
        primitive.attributes['TEXCOORD_0'] = gltf.append(buffer_index, TypedArray.vec2(self.uvs), BufferTarget.ARRAY_BUFFER)

        if self.joints is not None:
            primitive.joints = list(self.joints)
            primitive.attributes['JOINTS_0'] = gltf.append(buffer_index, TypedArray.ushort4(self.joints), BufferTarget.ARRAY_BUFFER)
        if self.weights is not None:
            primitive.weights = list(self.weights)
            primitive.attributes['WEIGHTS_0'] = gltf.append(buffer_index, TypedArray.vec4(self.weights), BufferTarget.ARRAY_BUFFER)

        return primitive


# -------------------------------------------------------------------------------------------------
def find_material_index(materials, material):
    if material is None:
        return -1
    return next((index for index, m in enumerate(materials) if m is material), -1)


# -------------------------------------------------------------------------------------------------
def get_referenced_vertices(indices, vertex_count):
    """
    Collects the vertices referenced by complete triangles whose three
    indices are all inside the vertex array.
    """
    referenced = set()
    for j in range(0, len(indices) - 2, 3):
        triangle = indices[j:j + 3]
        if all(0 <= index < vertex_count for index in triangle):
            referenced.update(triangle)
    return referenced


# -------------------------------------------------------------------------------------------------
def export_mesh(gltf, buffer_index, renderer, materials, axis_inverter, settings):
    """
    Exports every submesh of a mesh as its own primitive.

    Args:
    - gltf (GltfBuffer): The shared accessor sink.
    - buffer_index (int): The buffer all accessors are appended to.
    - renderer (MeshWithRenderer): The mesh and its renderer's material slots.
    - materials (list): Exported materials, looked up by identity.
    - axis_inverter (AxisInverter): Converts positions, normals and deltas.
    - settings (MeshExportSettings): Export options.

    Returns:
    - MeshDescriptor: One primitive per submesh, in submesh order.
    """
    if settings.export_tangents:
        raise UnsupportedFeatureError('Exporting tangents is not supported')

    mesh = renderer.mesh
    descriptor = MeshDescriptor(mesh.name)

    positions = mesh.positions
    normals = mesh.normals
    uvs = mesh.uvs
    bone_weights = mesh.bone_weights

    get_joint_index = None
    if mesh.has_complete_skin():
        get_joint_index = renderer.get_joint_index

    for i in range(mesh.submesh_count):
        indices = mesh.get_indices(i)

        if len(indices) % 3:
            diagnostic = TopologyDiagnostic(i, len(indices) - len(indices) % 3, indices[-(len(indices) % 3):],
                F"submesh {i} has {len(indices) % 3} trailing indices that do not form a triangle")
            print_warning_message(diagnostic.message)
            descriptor.diagnostics.append(diagnostic)

        # only vertices referenced from this submesh, pushed in ascending global order
        referenced = get_referenced_vertices(indices, mesh.vertex_count)
        buffer = VertexPartitioner(get_joint_index)
        used_indices = []
        for k in range(mesh.vertex_count):
            if k in referenced:
                used_indices.append(k)
                buffer.push(k, axis_inverter.invert_vector3(positions[k]), axis_inverter.invert_vector3(normals[k]), reverse_uv(uvs[k]))
                if get_joint_index is not None:
                    buffer.push_bone_weight(bone_weights[k])

        material_index = find_material_index(materials, renderer.get_material(i))

        # the axis conversion mirrors every vertex, reversing each triangle keeps the faces outward
        flipped = []
        for j in range(0, len(indices) - 2, 3):
            a, b, c = indices[j], indices[j + 1], indices[j + 2]
            if buffer.contains_triangle(a, b, c):
                flipped.extend((c, b, a))
            else:
                diagnostic = TopologyDiagnostic(i, j, (a, b, c))
                print_warning_message(diagnostic.message)
                descriptor.diagnostics.append(diagnostic)

        # gltf accessors cannot be empty, an empty submesh keeps its slot but writes nothing
        if not len(buffer):
            diagnostic = TopologyDiagnostic(i, 0, (), F"submesh {i} has no triangles left, no accessors are written for it")
            print_warning_message(diagnostic.message)
            descriptor.diagnostics.append(diagnostic)
            primitive = Primitive()
            primitive.material = material_index
            descriptor.primitives.append(primitive)
            continue

        primitive = buffer.to_primitive(gltf, buffer_index, material_index, flipped)

        for shape in mesh.blend_shapes:
            blend_shape = BlendShapeCollector()
            for k in used_indices:
                blend_shape.push(
                    axis_inverter.invert_vector3(shape.delta_positions[k]),
                    axis_inverter.invert_vector3(shape.delta_normals[k]))
            primitive.targets.append(blend_shape.to_gltf(gltf, buffer_index, not settings.export_only_blend_shape_position, primitive.vertex_count))

        descriptor.primitives.append(primitive)

    descriptor.target_names = [mesh.get_blend_shape_name(j) for j in range(mesh.blend_shape_count)]
    return descriptor

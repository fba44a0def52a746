from gltf_formats.mesh.errors import MissingJointError


# -------------------------------------------------------------------------------------------------
# source side of the export, a model-wide vertex array shared by every submesh.
# nothing in here is modified by the exporter.


# -------------------------------------------------------------------------------------------------
class BoneWeight:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, bone_indices=(0, 0, 0, 0), weights=(0.0, 0.0, 0.0, 0.0)):
        if len(bone_indices) != 4 or len(weights) != 4:
            raise ValueError('BoneWeight expects exactly four bone indices and four weights')
        self.bone_indices = tuple(int(i) for i in bone_indices)
        self.weights = tuple(float(w) for w in weights)

    # ---------------------------------------------------------------------------------------------
    @classmethod
    def from_pairs(cls, pairs):
        """
        Builds a bone weight from up to four `(bone_index, weight)` pairs,
        padding the unused influences with zero.
        """
        pairs = list(pairs)
        if len(pairs) > 4:
            raise ValueError(F"Expected at most 4 bone influences, got {len(pairs)}")
        pairs += [(0, 0.0)] * (4 - len(pairs))
        return cls([p[0] for p in pairs], [p[1] for p in pairs])

    # ---------------------------------------------------------------------------------------------
    def __eq__(self, other):
        if self.__class__ is other.__class__:
            return self.bone_indices == other.bone_indices and self.weights == other.weights
        return NotImplemented

    # ---------------------------------------------------------------------------------------------
    def __repr__(self):
        return F"BoneWeight({self.bone_indices}, {self.weights})"


# -------------------------------------------------------------------------------------------------
class BlendShape:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, name, delta_positions, delta_normals=None):
        self.name = name
        self.delta_positions = list(delta_positions)
        if delta_normals is None:
            delta_normals = [(0.0, 0.0, 0.0)] * len(self.delta_positions)
        self.delta_normals = list(delta_normals)


# -------------------------------------------------------------------------------------------------
class SourceMesh:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, name=''):
        self.name = name
        self.positions = []
        self.normals = []
        self.uvs = []
        self.bone_weights = None
        self.submeshes = []
        self.blend_shapes = []

    # ---------------------------------------------------------------------------------------------
    @classmethod
    def from_arrays(cls, name, positions, normals=None, uvs=None, submeshes=None, bone_weights=None, blend_shapes=None):
        mesh = cls(name)
        mesh.positions = list(positions)

        # missing normals and uvs are zero filled so every vertex array has the same length
        if normals is None:
            normals = [(0.0, 0.0, 0.0)] * len(mesh.positions)
        if uvs is None:
            uvs = [(0.0, 0.0)] * len(mesh.positions)
        mesh.normals = list(normals)
        mesh.uvs = list(uvs)

        if len(mesh.normals) != len(mesh.positions) or len(mesh.uvs) != len(mesh.positions):
            raise ValueError(F"Mesh '{name}' has mismatched vertex array lengths")

        if bone_weights is not None:
            mesh.bone_weights = list(bone_weights)
        mesh.submeshes = [list(indices) for indices in (submeshes or [])]
        mesh.blend_shapes = list(blend_shapes or [])

        for shape in mesh.blend_shapes:
            if len(shape.delta_positions) != len(mesh.positions) or len(shape.delta_normals) != len(mesh.positions):
                raise ValueError(F"Blend shape '{shape.name}' does not cover all {len(mesh.positions)} vertices")

        return mesh

    # ---------------------------------------------------------------------------------------------
    @property
    def vertex_count(self):
        return len(self.positions)

    # ---------------------------------------------------------------------------------------------
    @property
    def submesh_count(self):
        return len(self.submeshes)

    # ---------------------------------------------------------------------------------------------
    @property
    def blend_shape_count(self):
        return len(self.blend_shapes)

    # ---------------------------------------------------------------------------------------------
    def get_indices(self, submesh_index):
        return self.submeshes[submesh_index]

    # ---------------------------------------------------------------------------------------------
    def get_blend_shape_name(self, index):
        return self.blend_shapes[index].name

    # ---------------------------------------------------------------------------------------------
    def has_complete_skin(self):
        """
        Skinning is all or nothing for a mesh, a single vertex without a bone
        weight disables it for every submesh.
        """
        if self.bone_weights is None:
            return False
        if len(self.bone_weights) != len(self.positions):
            return False
        return all(weight is not None for weight in self.bone_weights)


# -------------------------------------------------------------------------------------------------
class MeshWithRenderer:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, mesh, shared_materials=None, joint_map=None):
        self.mesh = mesh
        self.shared_materials = list(shared_materials or [])
        # bone index -> skin joint index, identity when not given
        self.joint_map = joint_map

    # ---------------------------------------------------------------------------------------------
    def get_joint_index(self, bone_index):
        if self.joint_map is None:
            return bone_index
        try:
            return self.joint_map[bone_index]
        except (KeyError, IndexError):
            raise MissingJointError(F"Bone {bone_index} of mesh '{self.mesh.name}' has no joint in the skin")

    # ---------------------------------------------------------------------------------------------
    def get_material(self, submesh_index):
        if submesh_index < len(self.shared_materials):
            return self.shared_materials[submesh_index]
        return None

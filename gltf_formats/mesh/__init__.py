from . axis import AxisInverter, NoInversion, ReverseX, ReverseZ, get_axis_inverter
from . buffer import NO_ACCESSOR, GltfBuffer, TypedArray
from . divided import (
	BlendShapeCollector,
	MeshDescriptor,
	MorphTarget,
	Primitive,
	VertexPartitioner,
	export_mesh
)
from . errors import InternalConsistencyError, MissingJointError, TopologyDiagnostic, UnsupportedFeatureError
from . settings import MeshExportSettings
from . source import BlendShape, BoneWeight, MeshWithRenderer, SourceMesh

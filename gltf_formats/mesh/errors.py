from colorama import Fore, Style


# -------------------------------------------------------------------------------------------------
def print_warning_message(message):
	print(F"{Fore.YELLOW}WARNING: {message}{Style.RESET_ALL}")


# -------------------------------------------------------------------------------------------------
class TopologyDiagnostic:
	"""
	A triangle that was dropped because it references a vertex outside of the
	set registered for its submesh. Non-fatal, the export keeps going.
	"""

	# ---------------------------------------------------------------------------------------------
	def __init__(self, submesh_index, offset, triangle, message=None):
		self.submesh_index = submesh_index
		self.offset = offset
		self.triangle = tuple(triangle)
		self.message = message or F"triangle not contained in submesh {submesh_index} at [{offset}, {offset + 1}, {offset + 2}] {self.triangle}"

	# ---------------------------------------------------------------------------------------------
	def __repr__(self):
		return F"TopologyDiagnostic({self.submesh_index}, {self.offset}, {self.triangle})"


# -------------------------------------------------------------------------------------------------
class UnsupportedFeatureError(NotImplementedError):
	pass


# -------------------------------------------------------------------------------------------------
class InternalConsistencyError(Exception):
	pass


# -------------------------------------------------------------------------------------------------
class MissingJointError(Exception):
	pass

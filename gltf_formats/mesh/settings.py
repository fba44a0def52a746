# -------------------------------------------------------------------------------------------------
class MeshExportSettings:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, export_tangents=False, export_only_blend_shape_position=False):
        # tangents are not supported, asking for them fails the export
        self.export_tangents = export_tangents
        # drop the normal deltas from morph targets
        self.export_only_blend_shape_position = export_only_blend_shape_position

    # ---------------------------------------------------------------------------------------------
    @classmethod
    def from_params(cls, params={}):
        return cls(
            export_tangents=bool(params.get('tangents', False)),
            export_only_blend_shape_position=bool(params.get('only_blend_shape_position', False)),
        )

    # ---------------------------------------------------------------------------------------------
    def __repr__(self):
        return F"MeshExportSettings(export_tangents={self.export_tangents}, export_only_blend_shape_position={self.export_only_blend_shape_position})"

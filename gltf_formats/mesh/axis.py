# -------------------------------------------------------------------------------------------------
# handedness conversion between the source (left-handed, y-up) and gltf (right-handed, y-up).
# every converted position/normal/delta flips the triangle winding, which the exporter undoes
# by reversing each triangle.


# -------------------------------------------------------------------------------------------------
class AxisInverter:

    # ---------------------------------------------------------------------------------------------
    def invert_vector3(self, v):
        raise NotImplementedError


# -------------------------------------------------------------------------------------------------
class ReverseZ(AxisInverter):

    # ---------------------------------------------------------------------------------------------
    def invert_vector3(self, v):
        return (v[0], v[1], -v[2])


# -------------------------------------------------------------------------------------------------
class ReverseX(AxisInverter):

    # ---------------------------------------------------------------------------------------------
    def invert_vector3(self, v):
        return (-v[0], v[1], v[2])


# -------------------------------------------------------------------------------------------------
class NoInversion(AxisInverter):

    # ---------------------------------------------------------------------------------------------
    def invert_vector3(self, v):
        return (v[0], v[1], v[2])


AXIS_INVERTERS = {
    'z': ReverseZ,
    'x': ReverseX,
    'none': NoInversion,
}


# -------------------------------------------------------------------------------------------------
def get_axis_inverter(name='z'):
    try:
        return AXIS_INVERTERS[name.lower()]()
    except KeyError:
        raise ValueError(F"Unknown axis inversion '{name}', expected one of {list(AXIS_INVERTERS)}")


# -------------------------------------------------------------------------------------------------
def reverse_uv(uv):
    # texture origin is bottom-left in the source, top-left in gltf
    return (uv[0], 1.0 - uv[1])

# Main __init__.py for the types sub-package

from .enums import Capability, LogLevel, ZeroLengthPolicy
from .capability import capability_of, register_element_type
from .traits import VecNum, VecInt, VecUnsigned, VecSigned, VecFloat
from .vector import Vector, Vec1, Vec2, Vec3, Vec4


__all__ = [
    "Capability", "LogLevel", "ZeroLengthPolicy",
    "capability_of", "register_element_type",
    "VecNum", "VecInt", "VecUnsigned", "VecSigned", "VecFloat",
    "Vector", "Vec1", "Vec2", "Vec3", "Vec4",
]

"""pyvecmath: small fixed-arity vectors (Vec1 to Vec4) over any numeric element type.

Operations are gated by what the element type can do: every numeric vector
has ``sum()`` and ``product()``, signed ones ``snake_length()``, floating
point ones ``length()``, ``norm()`` and rounding.
"""

__version__ = "0.1.0"

from .errors import VecMathError, ElementTypeError, ArityError, CapabilityError, ZeroLengthError
from .types import (
    Capability, LogLevel, ZeroLengthPolicy,
    capability_of, register_element_type,
    VecNum, VecInt, VecUnsigned, VecSigned, VecFloat,
    Vector, Vec1, Vec2, Vec3, Vec4,
)
from .settings import Settings, settings, configure_logging
from .builders import vec

__all__ = [
    "__version__",
    "VecMathError", "ElementTypeError", "ArityError", "CapabilityError", "ZeroLengthError",
    "Capability", "LogLevel", "ZeroLengthPolicy",
    "capability_of", "register_element_type",
    "VecNum", "VecInt", "VecUnsigned", "VecSigned", "VecFloat",
    "Vector", "Vec1", "Vec2", "Vec3", "Vec4",
    "Settings", "settings", "configure_logging",
    "vec",
]

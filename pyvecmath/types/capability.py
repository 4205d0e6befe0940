"""
Element type registry.

Maps every supported element type to its ``Capability``. Python's builtin
scalars are registered up front, numpy scalar types are classified from
their position in numpy's type hierarchy, and anything else falls back on
the ``numbers`` ABCs. Host code can add its own types with
``register_element_type``.
"""
import logging
import numbers
import threading
from decimal import Decimal
from fractions import Fraction

import numpy as np

from pyvecmath.errors import ElementTypeError
from .enums import Capability

logger = logging.getLogger(__name__)

_REGISTRY: dict[type, Capability] = {
    bool: Capability.NONE,
    int: Capability.SIGNED_INTEGER,
    float: Capability.FLOATING,
    Fraction: Capability.SIGNED_NUMBER,
    Decimal: Capability.SIGNED_NUMBER,
    complex: Capability.NUM,
}
_REGISTRY_LOCK = threading.Lock()

_EXCLUSIVE = (
    (Capability.SIGNED, Capability.UNSIGNED),
    (Capability.INTEGER, Capability.FLOAT),
)


def validate_capability(capability: Capability) -> Capability:
    """Checks that a capability set is consistent with the lattice."""
    if capability and Capability.NUM not in capability:
        raise ValueError(f"{capability} requires NUM")
    for first, second in _EXCLUSIVE:
        if first in capability and second in capability:
            raise ValueError(f"{first.name} and {second.name} are mutually exclusive")
    return capability


def register_element_type(element_type: type, capability: Capability) -> None:
    """Registers (or re-registers) an element type with the given capability.

    Vector classes already specialized for ``element_type`` keep the
    capability they were built with.
    """
    if not isinstance(element_type, type):
        raise ElementTypeError(f"Element types must be classes, got {element_type!r}")
    validate_capability(Capability(capability))
    with _REGISTRY_LOCK:
        _REGISTRY[element_type] = Capability(capability)
    logger.debug("Registered element type %s as %s", element_type.__name__, capability)


def _numpy_capability(element_type: type) -> Capability:
    if issubclass(element_type, np.bool_):
        return Capability.NONE
    if issubclass(element_type, np.unsignedinteger):
        return Capability.UNSIGNED_INTEGER
    if issubclass(element_type, np.signedinteger):
        return Capability.SIGNED_INTEGER
    if issubclass(element_type, np.floating):
        return Capability.FLOATING
    if issubclass(element_type, np.complexfloating):
        return Capability.NUM
    raise ElementTypeError(f"numpy type {element_type.__name__} is not a numeric element type")


def capability_of(element_type: type) -> Capability:
    """Returns the capability of an element type.

    Raises:
        ElementTypeError: if the type is not a supported element type.
    """
    if not isinstance(element_type, type):
        raise ElementTypeError(f"Element types must be classes, got {element_type!r}")
    capability = _REGISTRY.get(element_type)
    if capability is not None:
        return capability
    if issubclass(element_type, np.generic):
        return _numpy_capability(element_type)
    if issubclass(element_type, numbers.Integral):
        return Capability.SIGNED_INTEGER
    if issubclass(element_type, numbers.Real):
        return Capability.SIGNED_NUMBER
    if issubclass(element_type, numbers.Complex):
        return Capability.NUM
    raise ElementTypeError(f"{element_type.__name__} is not a supported element type")


def is_scalar(value) -> bool:
    """True for values usable as the scalar operand of vector arithmetic."""
    return isinstance(value, (numbers.Number, np.number, np.bool_))

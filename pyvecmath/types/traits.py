"""
Capability mixins for the vector types.

A vector class specialized for an element type is composed from the
mixins whose ``_requires`` capability the element type has, so e.g.
``length()`` only exists on vectors of floating point elements. The mixins
rely on the ``Vector`` interface: ``elements()``, ``item_type``,
``_family``, ``_ops``, ``_rebuild()`` and ``map()``.
"""
import functools
import logging
import operator

from pyvecmath.errors import ZeroLengthError
from pyvecmath.settings import settings
from pyvecmath.utils.helpers import approximately_equal, lerp
from .enums import Capability, ZeroLengthPolicy

logger = logging.getLogger(__name__)


def _check_operand(vector, other, operation: str) -> None:
    if (getattr(other, "_family", None) is not vector._family
            or other.item_type is not vector.item_type):
        raise TypeError(f"{operation}() needs another {type(vector).__name__}, "
                        f"got {type(other).__name__}")


class VecNum:
    """Operations for vectors containing numerical types."""
    __slots__ = ()
    _requires = Capability.NUM

    def sum(self):
        """Calculates the sum of all components of the vector."""
        return functools.reduce(operator.add, self.elements())

    def product(self):
        """Calculates the product of all components of the vector."""
        return functools.reduce(operator.mul, self.elements())

    def dot(self, other):
        """Calculates the dot product with another vector of the same type."""
        _check_operand(self, other, "dot")
        return functools.reduce(operator.add, (a * b for a, b in zip(self.elements(), other.elements())))

    @classmethod
    def zero(cls):
        return cls(*([cls.item_type(0)] * cls.arity))

    @classmethod
    def one(cls):
        return cls(*([cls.item_type(1)] * cls.arity))


class VecInt:
    """Operations for vectors containing integer types."""
    __slots__ = ()
    _requires = Capability.INTEGER

    def div_euc(self, other):
        """Component-wise division rounding towards negative infinity."""
        _check_operand(self, other, "div_euc")
        return self._rebuild(a // b for a, b in zip(self.elements(), other.elements()))


class VecUnsigned:
    """Marker for vectors containing unsigned integer types."""
    __slots__ = ()
    _requires = Capability.UNSIGNED

    def snake_length(self):
        """For unsigned elements the snake length is the plain ``sum()``."""
        return self.sum()


class VecSigned:
    """Operations for vectors containing signed numerical types."""
    __slots__ = ()
    _requires = Capability.SIGNED

    def snake_length(self):
        """Calculates the snake length (also known as 'manhattan distance') of the vector."""
        return functools.reduce(operator.add, (abs(c) for c in self.elements()))

    def __neg__(self):
        return self._rebuild(-c for c in self.elements())


class VecFloat:
    """Operations for vectors containing floating point types."""
    __slots__ = ()
    _requires = Capability.FLOAT

    def length_squared(self):
        """Returns the squared magnitude of the vector."""
        return functools.reduce(operator.add, (c * c for c in self.elements()))

    def length(self):
        """Returns the magnitude (Euclidean length) of the vector."""
        return self._ops.sqrt(self.length_squared())

    def norm(self):
        """
        Returns a vector with identical direction and a length of 1.

        A zero-length vector is handled according to
        ``settings.zero_length_policy``: PROPAGATE divides by zero anyway
        (Python floats raise ``ZeroDivisionError``, numpy floats give NaN),
        ZERO returns the zero vector and RAISE raises ``ZeroLengthError``.
        """
        length = self.length()
        if length == 0:
            policy = settings.zero_length_policy
            if policy is ZeroLengthPolicy.RAISE:
                raise ZeroLengthError(f"Cannot normalize zero-length vector {self!r}")
            if policy is ZeroLengthPolicy.ZERO:
                logger.warning("Normalizing zero-length vector %r, returning zero vector", self)
                return self.zero()
        return self._rebuild(c / length for c in self.elements())

    normalize = norm

    def floor(self):
        """Rounds each element of the vector down to the nearest whole number."""
        return self.map(self._ops.floor)

    def ceil(self):
        """Rounds each element of the vector up to the nearest whole number."""
        return self.map(self._ops.ceil)

    def round(self):
        """Rounds each element to the nearest whole number, half-way cases away from zero."""
        return self.map(self._ops.round)

    __floor__ = floor
    __ceil__ = ceil

    def __round__(self, ndigits=None):
        if ndigits is not None:
            return self.map(lambda c: round(c, ndigits))
        return self.round()

    def lerp(self, other, amount):
        """Linear interpolation towards another vector by amount (0-1)."""
        _check_operand(self, other, "lerp")
        return self._rebuild(lerp(a, b, amount) for a, b in zip(self.elements(), other.elements()))

    def is_close(self, other, tolerance=None) -> bool:
        """Checks whether every component is within ``tolerance`` of ``other``'s."""
        _check_operand(self, other, "is_close")
        if tolerance is None:
            tolerance = settings.approx_tolerance
        return all(approximately_equal(a, b, tolerance) for a, b in zip(self.elements(), other.elements()))


# Most specific first; this is the MRO order of specialized classes.
TRAITS = (VecFloat, VecSigned, VecUnsigned, VecInt, VecNum)


def traits_for(capability: Capability) -> tuple:
    return tuple(trait for trait in TRAITS if trait._requires in capability)


def _gated_methods() -> dict:
    gated: dict[str, list] = {}
    for trait in TRAITS:
        for name in vars(trait):
            if not name.startswith("_"):
                gated.setdefault(name, []).append(trait._requires)
    return gated


GATED_METHODS = _gated_methods()
"""Public trait method name -> capabilities that provide it."""

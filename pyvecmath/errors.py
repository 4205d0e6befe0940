"""Exceptions raised by pyvecmath.

Every exception also derives from the builtin a caller would catch for the
same mistake, so ``except TypeError`` keeps working around vector code.
"""


class VecMathError(Exception):
    """Base class for all pyvecmath errors."""


class ElementTypeError(VecMathError, TypeError):
    """An element type is unsupported, or components mix element types."""


class ArityError(VecMathError, ValueError):
    """The number of components does not match the vector's arity."""


class CapabilityError(VecMathError, AttributeError):
    """An operation needs an element capability the vector does not have."""


class ZeroLengthError(VecMathError, ZeroDivisionError):
    """A zero-length vector was normalized under the ``raise`` policy."""

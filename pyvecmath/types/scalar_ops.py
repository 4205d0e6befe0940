"""Scalar functions used by the floating point vector operations.

Each specialized vector class holds one of these, chosen once for its
element type, so results keep the element type (``float32`` stays
``float32``, ``float`` stays ``float``).
"""
import math

import numpy as np


class ScalarOps:
    """Scalar functions for Python number types, built on ``math``."""

    def __init__(self, element_type: type):
        self.element_type = element_type

    def sqrt(self, value):
        return self.element_type(math.sqrt(value))

    def floor(self, value):
        if not math.isfinite(value):
            return value
        return self.element_type(math.floor(value))

    def ceil(self, value):
        if not math.isfinite(value):
            return value
        return self.element_type(math.ceil(value))

    def round(self, value):
        """Rounds half-way cases away from zero."""
        if not math.isfinite(value):
            return value
        truncated = math.trunc(value)
        if abs(value - truncated) >= 0.5:
            truncated += 1 if value > 0 else -1
        return self.element_type(truncated)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.element_type.__name__})"


class NumpyScalarOps(ScalarOps):
    """Scalar functions for numpy scalar types, built on numpy ufuncs."""

    def sqrt(self, value):
        return self.element_type(np.sqrt(value))

    def floor(self, value):
        return self.element_type(np.floor(value))

    def ceil(self, value):
        return self.element_type(np.ceil(value))

    def round(self, value):
        # np.round rounds half to even
        truncated = np.trunc(value)
        if np.abs(value - truncated) >= 0.5:
            truncated = truncated + np.copysign(1, value)
        return self.element_type(truncated)


def ops_for(element_type: type) -> ScalarOps:
    if issubclass(element_type, np.generic):
        return NumpyScalarOps(element_type)
    return ScalarOps(element_type)

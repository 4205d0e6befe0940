# This file marks pyvecmath.utils as a Python package.

from .helpers import approximately_equal, lerp

__all__ = ["approximately_equal", "lerp"]

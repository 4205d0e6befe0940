"""
Short aliases for vectors of 64-bit numpy element types.

``u`` is ``numpy.uint64``, ``i`` is ``numpy.int64`` and ``f`` is
``numpy.float64``. Plain Python literals are converted on construction,
so ``Vec2f(1, 2.5)`` holds two ``float64`` components.
See ``pyvecmath.defaults`` for the 32-bit variants.
"""
import numpy as np

from pyvecmath.types.vector import Vec1, Vec2, Vec3, Vec4

Vec1u = Vec1.of(np.uint64)
Vec2u = Vec2.of(np.uint64)
Vec3u = Vec3.of(np.uint64)
Vec4u = Vec4.of(np.uint64)

Vec1i = Vec1.of(np.int64)
Vec2i = Vec2.of(np.int64)
Vec3i = Vec3.of(np.int64)
Vec4i = Vec4.of(np.int64)

Vec1f = Vec1.of(np.float64)
Vec2f = Vec2.of(np.float64)
Vec3f = Vec3.of(np.float64)
Vec4f = Vec4.of(np.float64)

__all__ = [
    "Vec1u", "Vec2u", "Vec3u", "Vec4u",
    "Vec1i", "Vec2i", "Vec3i", "Vec4i",
    "Vec1f", "Vec2f", "Vec3f", "Vec4f",
]

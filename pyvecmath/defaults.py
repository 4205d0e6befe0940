"""
Short aliases for vectors of 32-bit numpy element types.

``u`` is ``numpy.uint32``, ``i`` is ``numpy.int32`` and ``f`` is
``numpy.float32``. Plain Python literals are converted on construction,
so ``Vec2f(1, 2.5)`` holds two ``float32`` components.
See ``pyvecmath.large_defaults`` for the 64-bit variants.
"""
import numpy as np

from pyvecmath.types.vector import Vec1, Vec2, Vec3, Vec4

Vec1u = Vec1.of(np.uint32)
Vec2u = Vec2.of(np.uint32)
Vec3u = Vec3.of(np.uint32)
Vec4u = Vec4.of(np.uint32)

Vec1i = Vec1.of(np.int32)
Vec2i = Vec2.of(np.int32)
Vec3i = Vec3.of(np.int32)
Vec4i = Vec4.of(np.int32)

Vec1f = Vec1.of(np.float32)
Vec2f = Vec2.of(np.float32)
Vec3f = Vec3.of(np.float32)
Vec4f = Vec4.of(np.float32)

__all__ = [
    "Vec1u", "Vec2u", "Vec3u", "Vec4u",
    "Vec1i", "Vec2i", "Vec3i", "Vec4i",
    "Vec1f", "Vec2f", "Vec3f", "Vec4f",
]

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import numpy as np
import pytest

from pyvecmath import Vec1, Vec2, Vec3, Vec4
from pyvecmath import defaults, large_defaults


@pytest.mark.parametrize("module,unsigned,signed,floating", [
    (defaults, np.uint32, np.int32, np.float32),
    (large_defaults, np.uint64, np.int64, np.float64),
])
def test_aliases_are_specializations(module, unsigned, signed, floating):
    for arity, family in ((1, Vec1), (2, Vec2), (3, Vec3), (4, Vec4)):
        assert getattr(module, f"Vec{arity}u") is family.of(unsigned)
        assert getattr(module, f"Vec{arity}i") is family.of(signed)
        assert getattr(module, f"Vec{arity}f") is family.of(floating)


def test_aliases_convert_literals():
    v = defaults.Vec3u(1, 2, 3)
    assert all(type(c) is np.uint32 for c in v)
    assert large_defaults.Vec2f(1, 2.5).y == 2.5


def test_integer_division_widens_to_float():
    quotient = defaults.Vec2i(1, 3) / defaults.Vec2i(2, 4)
    assert quotient.item_type is np.float64
    assert quotient == Vec2(np.float64(0.5), np.float64(0.75))


def test_negative_literal_for_unsigned_alias_fails():
    with pytest.raises(OverflowError):
        defaults.Vec2u(-1, 0)

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from pyvecmath import Vec1, Vec2, Vec3, Vec4


def test_repr_lists_named_components():
    assert repr(Vec1(1)) == "Vec1(x=1)"
    assert repr(Vec2(1, 2)) == "Vec2(x=1, y=2)"
    assert repr(Vec3(1.5, -2.0, 0.0)) == "Vec3(x=1.5, y=-2.0, z=0.0)"
    assert repr(Vec4(1, 2, 3, 4)) == "Vec4(x=1, y=2, z=3, w=4)"


def test_str_lists_positional_components():
    assert str(Vec1(1)) == "(1)"
    assert str(Vec2(1, 2)) == "(1, 2)"
    assert str(Vec4(1.5, 2.0, 3.0, 4.0)) == "(1.5, 2.0, 3.0, 4.0)"


def test_format_spec_applies_to_each_component():
    assert format(Vec2(1.0, 2.5), ".2f") == "(1.00, 2.50)"
    assert f"{Vec3(1, 2, 3)}" == "(1, 2, 3)"
    assert f"{Vec3(1, 2, 3):03d}" == "(001, 002, 003)"

"""Convenience constructor picking the vector type from the component count."""
from pyvecmath.errors import ArityError
from pyvecmath.types.capability import is_scalar
from pyvecmath.types.vector import FAMILIES


def vec(*components):
    """
    Builds a vector from its components: ``vec(1, 2)`` is ``Vec2(1, 2)``.

    A single non-scalar argument is treated as an array of components, so
    ``vec([1, 2, 3])`` is ``Vec3.from_array([1, 2, 3])``.
    """
    if len(components) == 1 and not is_scalar(components[0]):
        components = tuple(components[0])
    family = FAMILIES.get(len(components))
    if family is None:
        raise ArityError(f"vec() takes 1 to 4 components, got {len(components)}")
    return family(*components)

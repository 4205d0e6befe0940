"""
Fixed-arity vectors: ``Vec1``, ``Vec2``, ``Vec3`` and ``Vec4``.

All behaviour lives once in ``Vector``; the four dataclasses only declare
their components. Constructing a vector through one of them infers the
element type from the components and returns an instance of the class
specialized for that element type (``Vec2.of(float)``), which carries the
capability mixins from ``traits``.
"""
import dataclasses
import logging
import operator
import threading
from typing import Any, ClassVar, Optional

from pyvecmath.errors import ArityError, CapabilityError, ElementTypeError
from .capability import capability_of, is_scalar
from .enums import Capability
from .scalar_ops import ScalarOps, ops_for
from .traits import GATED_METHODS, traits_for

logger = logging.getLogger(__name__)

_SPECIALIZED: dict[tuple, type] = {}
_SPECIALIZE_LOCK = threading.Lock()


def _specialize(family: type, item_type: type) -> type:
    capability = capability_of(item_type)
    name = f"{family.__name__}[{item_type.__name__}]"
    namespace = {
        "__slots__": (),
        "__module__": family.__module__,
        "__qualname__": name,
        "item_type": item_type,
        "capability": capability,
        "_ops": ops_for(item_type),
    }
    specialized = type(name, traits_for(capability) + (family,), namespace)
    logger.debug("Specialized %s with capability %s", name, capability)
    return specialized


def _restore(family: type, item_type: type, components: tuple):
    return family.of(item_type)(*components)


class Vector:
    """
    Shared implementation of the fixed-arity vector types.

    Vectors are immutable values. Arithmetic (``+ - * /``) works
    component-wise against another vector of the same arity and element
    type, or against a scalar; the element type of the result is whatever
    the scalar arithmetic produces. Compound assignment rebinds the name to
    a new vector.
    """
    __slots__ = ()
    # Keep numpy scalars from swallowing vectors in reflected operators.
    __array_ufunc__ = None

    arity: ClassVar[int] = 0
    item_type: ClassVar[Optional[type]] = None
    capability: ClassVar[Capability] = Capability.NONE
    _fields: ClassVar[tuple] = ()
    _family: ClassVar[Optional[type]] = None
    _ops: ClassVar[Optional[ScalarOps]] = None

    def __new__(cls, *args, **kwargs):
        if cls._family is None:
            raise TypeError("Vector cannot be instantiated directly; use Vec1, Vec2, Vec3 or Vec4")
        components = cls._bind(args, kwargs)
        if cls.item_type is None:
            item_types = {type(c) for c in components}
            if len(item_types) != 1:
                names = ", ".join(sorted(t.__name__ for t in item_types))
                raise ElementTypeError(f"{cls.__name__} components must share one element type, got {names}")
            cls = cls.of(item_types.pop())
        return object.__new__(cls)

    def __post_init__(self):
        for name in self._fields:
            value = getattr(self, name)
            if type(value) is not self.item_type:
                object.__setattr__(self, name, self._coerce(value))

    @classmethod
    def _bind(cls, args: tuple, kwargs: dict) -> tuple:
        if len(args) > cls.arity:
            raise ArityError(f"{cls.__name__} takes {cls.arity} components, got {len(args)}")
        values = dict(zip(cls._fields, args))
        for name, value in kwargs.items():
            if name not in cls._fields:
                raise TypeError(f"{cls.__name__}() got an unexpected keyword argument '{name}'")
            if name in values:
                raise TypeError(f"{cls.__name__}() got multiple values for argument '{name}'")
            values[name] = value
        missing = [name for name in cls._fields if name not in values]
        if missing:
            raise ArityError(f"{cls.__name__} takes {cls.arity} components, missing {', '.join(missing)}")
        return tuple(values[name] for name in cls._fields)

    @classmethod
    def _coerce(cls, value):
        # Only plain int/float literals are converted implicitly.
        if type(value) not in (int, float):
            raise ElementTypeError(f"{type(value).__name__} component does not match element type "
                                   f"{cls.item_type.__name__}; use convert_to()")
        if (type(value) is float and Capability.INTEGER in cls.capability
                and not value.is_integer()):
            raise ElementTypeError(f"Cannot use {value!r} as a {cls.item_type.__name__} component")
        return cls.item_type(value)

    @classmethod
    def of(cls, item_type: type) -> type:
        """Returns this vector type specialized for ``item_type``.

        Specializations are cached, so ``Vec2.of(float) is Vec2.of(float)``.
        """
        family = cls._family
        if family is None:
            raise TypeError("Vector has no arity; use Vec1, Vec2, Vec3 or Vec4")
        key = (family, item_type)
        specialized = _SPECIALIZED.get(key)
        if specialized is None:
            with _SPECIALIZE_LOCK:
                specialized = _SPECIALIZED.get(key)
                if specialized is None:
                    specialized = _specialize(family, item_type)
                    _SPECIALIZED[key] = specialized
        return specialized

    # --- Construction & conversion ---

    @classmethod
    def from_array(cls, values):
        """Creates a vector from any sequence (list, tuple, 1-D numpy array) of length ``arity``."""
        components = tuple(values)
        if len(components) != cls.arity:
            raise ArityError(f"{cls.__name__} takes {cls.arity} components, got {len(components)}")
        return cls(*components)

    @classmethod
    def from_tuple(cls, values: tuple):
        if not isinstance(values, tuple):
            raise TypeError(f"from_tuple() needs a tuple, got {type(values).__name__}")
        return cls.from_array(values)

    @classmethod
    def from_mapping(cls, mapping):
        """Creates a vector from a mapping of component names, e.g. ``{"x": 1, "y": 2}``."""
        missing = [name for name in cls._fields if name not in mapping]
        if missing:
            raise ArityError(f"{cls.__name__} mapping is missing {', '.join(missing)}")
        return cls(*(mapping[name] for name in cls._fields))

    def elements(self) -> tuple:
        """Returns the components in declared order (x, y, z, w)."""
        return tuple(getattr(self, name) for name in self._fields)

    def map(self, func):
        """Applies ``func`` to every component, returning the resulting vector."""
        return self._family(*(func(c) for c in self.elements()))

    def convert_to(self, item_type: type):
        """Converts every component through ``item_type``."""
        return self._family.of(item_type)(*(item_type(c) for c in self.elements()))

    def as_dict(self) -> dict:
        return dataclasses.asdict(self)

    def _rebuild(self, components):
        return type(self)(*components)

    def _derive(self, components):
        return self._family(*components)

    # --- Operators ---

    def _componentwise(self, other, op):
        if isinstance(other, Vector):
            if other._family is not self._family or other.item_type is not self.item_type:
                return NotImplemented
            return self._derive(op(a, b) for a, b in zip(self.elements(), other.elements()))
        if is_scalar(other):
            return self._derive(op(a, other) for a in self.elements())
        return NotImplemented

    def _reflected(self, other, op):
        if is_scalar(other):
            return self._derive(op(other, a) for a in self.elements())
        return NotImplemented

    def __add__(self, other):
        return self._componentwise(other, operator.add)

    def __sub__(self, other):
        return self._componentwise(other, operator.sub)

    def __mul__(self, other):
        return self._componentwise(other, operator.mul)

    def __truediv__(self, other):
        return self._componentwise(other, operator.truediv)

    def __radd__(self, other):
        return self._reflected(other, operator.add)

    def __rsub__(self, other):
        return self._reflected(other, operator.sub)

    def __rmul__(self, other):
        return self._reflected(other, operator.mul)

    def __rtruediv__(self, other):
        return self._reflected(other, operator.truediv)

    # --- Comparison, hashing, iteration ---

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector) or other._family is not self._family:
            return NotImplemented
        return self.elements() == other.elements()

    def __hash__(self) -> int:
        return hash((self._family, self.elements()))

    def __iter__(self):
        return iter(self.elements())

    def __len__(self) -> int:
        return self.arity

    # --- Formatting ---

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._fields)
        return f"{self._family.__name__}({body})"

    def __str__(self) -> str:
        return "(" + ", ".join(str(c) for c in self.elements()) + ")"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return "(" + ", ".join(format(c, format_spec) for c in self.elements()) + ")"

    # --- Serialization & capability errors ---

    def __reduce__(self):
        return _restore, (self._family, self.item_type, self.elements())

    def __getattr__(self, name: str):
        providers = GATED_METHODS.get(name)
        if providers is not None:
            needed = " or ".join(capability.name for capability in providers)
            raise CapabilityError(f"{name}() requires {needed} elements; "
                                  f"{type(self).__name__} elements are {self.capability}")
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")


def _vector_family(cls):
    cls._fields = tuple(field.name for field in dataclasses.fields(cls))
    cls.arity = len(cls._fields)
    cls._family = cls
    return cls


@_vector_family
@dataclasses.dataclass(slots=True, frozen=True, eq=False, repr=False)
class Vec1(Vector):
    """A one component vector."""
    x: Any

    @classmethod
    def from_scalar(cls, value):
        return cls(value)


@_vector_family
@dataclasses.dataclass(slots=True, frozen=True, eq=False, repr=False)
class Vec2(Vector):
    """A two component vector with x and y components."""
    x: Any
    y: Any


@_vector_family
@dataclasses.dataclass(slots=True, frozen=True, eq=False, repr=False)
class Vec3(Vector):
    """A three component vector with x, y and z components."""
    x: Any
    y: Any
    z: Any


@_vector_family
@dataclasses.dataclass(slots=True, frozen=True, eq=False, repr=False)
class Vec4(Vector):
    """A four component vector with x, y, z and w components."""
    x: Any
    y: Any
    z: Any
    w: Any


FAMILIES = {family.arity: family for family in (Vec1, Vec2, Vec3, Vec4)}

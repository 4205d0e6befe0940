from enum import Enum, Flag, IntEnum


class LogLevel(IntEnum): NONE = 0; DEBUG = 1; INFO = 2; WARNING = 3; ERROR = 4


class Capability(Flag):
    """Numeric capabilities of an element type.

    The members form a small lattice: INTEGER, UNSIGNED, SIGNED and FLOAT all
    imply NUM; SIGNED and UNSIGNED exclude each other, as do INTEGER and FLOAT.
    """
    NONE = 0
    NUM = 1
    INTEGER = 2
    UNSIGNED = 4
    SIGNED = 8
    FLOAT = 16

    SIGNED_NUMBER = NUM | SIGNED
    SIGNED_INTEGER = NUM | INTEGER | SIGNED
    UNSIGNED_INTEGER = NUM | INTEGER | UNSIGNED
    FLOATING = NUM | SIGNED | FLOAT


class ZeroLengthPolicy(Enum):
    """What ``norm()`` does with a vector whose length is zero."""
    PROPAGATE = "propagate"  # divide anyway; the element type decides
    ZERO = "zero"
    RAISE = "raise"

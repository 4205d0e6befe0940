def approximately_equal(a, b, tolerance: float = 1e-6) -> bool:
    """Checks if two scalars differ by less than ``tolerance``."""
    return abs(a - b) < tolerance


def lerp(start, end, amount):
    """Interpolates from start (amount 0) to end (amount 1)."""
    return start + (end - start) * amount

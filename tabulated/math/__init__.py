"""Numeric helpers shared by every sampled function."""
from typing import List

TOLERANCE = 1e-10
"""Two abscissae (or ordinates) closer than this are treated as the same value."""


def same(a: float, b: float, tolerance: float = TOLERANCE) -> bool:
    """Test if a and b agree to within an absolute tolerance."""
    return abs(a - b) < tolerance


def interpolate(
    x: float, left_x: float, right_x: float, left_y: float, right_y: float
) -> float:
    """Evaluate the straight line through (left_x, left_y) and (right_x, right_y) at x.

    This is used both for interpolation (left_x <= x <= right_x) and extrapolation (anywhere else).
    A zero-width interval has no well-defined slope, so in that case we simply return left_y.
    """
    if same(left_x, right_x):
        return left_y
    return left_y + (right_y - left_y) * (x - left_x) / (right_x - left_x)


def linspace(start: float, stop: float, count: int) -> List[float]:
    """Return count evenly spaced values from start to stop, inclusive."""
    if count == 1:
        return [start]
    step = (stop - start) / (count - 1)
    return [start + i * step for i in range(count)]

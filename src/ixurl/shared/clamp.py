"""Numeric range clamping shared by every option family."""

from __future__ import annotations

from typing import TypeVar

N = TypeVar("N", int, float)


def clamp(low: N, high: N, value: N) -> N:
    """Saturate value into the closed range [low, high].

    The value is returned unchanged (same type) when it already lies in range.

    :param low: Lower bound
    :param high: Upper bound
    :param value: Value to clamp
    :returns: low, high, or value

    Example:
        >>> clamp(-100, 100, 150)
        100
        >>> clamp(0.0, 1.0, 0.25)
        0.25
    """
    if value < low:
        return low
    if value > high:
        return high
    return value

"""Rendering of numeric option values as query-string text."""

from __future__ import annotations


def format_number(value: int | float) -> str:
    """Render a number the way the rendering service expects it.

    Integral floats drop their fractional part (``100.0`` -> ``"100"``);
    other floats use the shortest round-tripping representation.

    :param value: Number to render
    :returns: Text form of the number
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def format_fraction(value: float) -> str:
    """Render a relative value, always keeping the decimal point.

    ``1.0`` stays ``"1.0"`` so the service reads it as a fraction rather
    than one pixel.

    :param value: Fraction of the source dimension
    :returns: Text form of the float
    """
    return repr(float(value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up.

    :param value: Number to round
    :returns: Rounded integer (2.5 -> 3, -2.5 -> -2)
    """
    return int((value + 0.5) // 1)

"""Shared helpers: clamping, colors, number formatting."""

from ixurl.shared.clamp import clamp
from ixurl.shared.color import Color, to_hex, to_hex_alpha
from ixurl.shared.format import format_fraction, format_number, round_half_up

__all__ = [
    "clamp",
    "Color",
    "to_hex",
    "to_hex_alpha",
    "format_fraction",
    "format_number",
    "round_half_up",
]

"""RGBA color value and its hex encodings.

The rendering service takes colors in two textual forms:

- ``rrggbb``: six lowercase hex digits, no alpha
- ``aarrggbb``: eight hex digits with the alpha byte *first*

Example:
    >>> red = Color.rgb(255, 0, 0)
    >>> to_hex(red)
    'ff0000'
    >>> to_hex_alpha(Color.rgba(255, 0, 128, 0.5))
    '80ff0080'
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ixurl.shared.clamp import clamp


@dataclass(frozen=True)
class Color:
    """Color with red, green, blue in [0, 255] and alpha in [0, 1].

    Channels are clamped at construction; out-of-range input never raises.
    """

    red: float = 0
    green: float = 0
    blue: float = 0
    alpha: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "red", clamp(0, 255, self.red))
        object.__setattr__(self, "green", clamp(0, 255, self.green))
        object.__setattr__(self, "blue", clamp(0, 255, self.blue))
        object.__setattr__(self, "alpha", clamp(0.0, 1.0, self.alpha))

    @classmethod
    def rgb(cls, red: float, green: float, blue: float) -> Color:
        """Create an opaque color.

        :param red: Red channel [0, 255]
        :param green: Green channel [0, 255]
        :param blue: Blue channel [0, 255]
        :returns: Color with alpha 1.0
        """
        return cls(red, green, blue, 1.0)

    @classmethod
    def rgba(cls, red: float, green: float, blue: float, alpha: float) -> Color:
        """Create a color with explicit alpha.

        :param red: Red channel [0, 255]
        :param green: Green channel [0, 255]
        :param blue: Blue channel [0, 255]
        :param alpha: Opacity [0, 1]
        :returns: Color instance
        """
        return cls(red, green, blue, alpha)

    @classmethod
    def transparent(cls) -> Color:
        """Create a fully transparent black."""
        return cls(0, 0, 0, 0.0)

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``rgb``, ``rrggbb`` or ``aarrggbb`` (optional leading ``#``).

        :param value: Hex color string
        :returns: Color instance
        :raises ValueError: If the string is not a valid hex color
        """
        digits = value[1:] if value.startswith("#") else value
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex color '{value}': expected 3, 6 or 8 digits")
        try:
            raw = bytes.fromhex(digits)
        except ValueError as e:
            raise ValueError(f"Invalid hex color '{value}': {e}") from e

        if len(raw) == 4:
            alpha, red, green, blue = raw
            return cls(red, green, blue, alpha / 255.0)
        red, green, blue = raw
        return cls(red, green, blue, 1.0)

    @property
    def is_transparent(self) -> bool:
        """True when alpha is zero."""
        return self.alpha == 0.0


def _channel_bytes(values: list[float]) -> str:
    """Round channels half-up and render each as two lowercase hex digits.

    NaN channels encode as zero.
    """
    channels = np.floor(np.nan_to_num(np.asarray(values, dtype=np.float64), nan=0.0) + 0.5)
    return np.clip(channels, 0, 255).astype(np.uint8).tobytes().hex()


def to_hex(color: Color) -> str:
    """Encode as ``rrggbb`` (alpha dropped).

    :param color: Color to encode
    :returns: Six lowercase hex digits
    """
    return _channel_bytes([color.red, color.green, color.blue])


def to_hex_alpha(color: Color) -> str:
    """Encode as ``aarrggbb``, alpha byte first.

    :param color: Color to encode
    :returns: Eight lowercase hex digits
    """
    return _channel_bytes([color.alpha * 255.0, color.red, color.green, color.blue])

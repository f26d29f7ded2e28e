"""Color and tone adjustment options.

Each numeric adjustment maps to one query key and is clamped into the range
defined in ``ixurl.config.adjustment``:

    bri, con, exp, gam, sat, vib   [-100, 100]
    high                           [-100, 0]
    shad, sharp                    [0, 100]
    hue                            [0, 359]

Example:
    >>> Brightness(150).value
    100
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ixurl.config import ADJUSTMENT_CONFIG
from ixurl.options.base import ClampedValue, encode_options
from ixurl.protocols import QueryPair
from ixurl.shared.format import format_number


class AdjustmentOption:
    """Base class for all adjustment options."""

    def to_query_pairs(self) -> list[QueryPair]:
        raise NotImplementedError


class Brightness(ClampedValue, AdjustmentOption):
    spec = ADJUSTMENT_CONFIG.brightness


class Contrast(ClampedValue, AdjustmentOption):
    spec = ADJUSTMENT_CONFIG.contrast


class Exposure(ClampedValue, AdjustmentOption):
    spec = ADJUSTMENT_CONFIG.exposure


class Gamma(ClampedValue, AdjustmentOption):
    spec = ADJUSTMENT_CONFIG.gamma


class Highlights(ClampedValue, AdjustmentOption):
    spec = ADJUSTMENT_CONFIG.highlights


class HueShift(ClampedValue, AdjustmentOption):
    """Hue rotation in degrees, clamped (not wrapped) into [0, 359]."""

    spec = ADJUSTMENT_CONFIG.hue_shift


class Saturation(ClampedValue, AdjustmentOption):
    spec = ADJUSTMENT_CONFIG.saturation


class Shadows(ClampedValue, AdjustmentOption):
    spec = ADJUSTMENT_CONFIG.shadows


class Sharpen(ClampedValue, AdjustmentOption):
    spec = ADJUSTMENT_CONFIG.sharpen


class Vibrance(ClampedValue, AdjustmentOption):
    spec = ADJUSTMENT_CONFIG.vibrance


@dataclass(frozen=True)
class Invert(AdjustmentOption):
    """Invert all pixel colors."""

    def to_query_pairs(self) -> list[QueryPair]:
        return [("invert", "true")]


@dataclass(frozen=True)
class UnsharpMask(AdjustmentOption):
    """Unsharp mask sharpening, written as ``usm`` and ``usmrad``.

    :param amount: Strength [-100, 100]
    :param radius: Radius in pixels [0, 500]
    """

    amount: float
    radius: float

    def __post_init__(self):
        object.__setattr__(self, "amount", ADJUSTMENT_CONFIG.unsharp_mask.validate(self.amount))
        object.__setattr__(
            self, "radius", ADJUSTMENT_CONFIG.unsharp_radius.validate(self.radius)
        )

    def to_query_pairs(self) -> list[QueryPair]:
        return [
            (ADJUSTMENT_CONFIG.unsharp_mask.key, format_number(self.amount)),
            (ADJUSTMENT_CONFIG.unsharp_radius.key, format_number(self.radius)),
        ]


def encode(options: Sequence[AdjustmentOption]) -> list[QueryPair]:
    """Encode stored adjustment options (newest first) into query pairs.

    :param options: Stored adjustment options
    :returns: Query pairs, newest option first
    """
    return encode_options(options, AdjustmentOption, "adjustment")

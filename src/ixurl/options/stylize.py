"""Stylize effects: duotone, blur, halftone, monochrome, pixelate, sepia."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ixurl.config import STYLIZE_CONFIG
from ixurl.options.base import ClampedValue, encode_options
from ixurl.protocols import QueryPair
from ixurl.shared.color import Color, to_hex, to_hex_alpha
from ixurl.shared.format import round_half_up


class StylizeOption:
    """Base class for all stylize effects."""

    def to_query_pairs(self) -> list[QueryPair]:
        raise NotImplementedError


@dataclass(frozen=True)
class Duotone(StylizeOption):
    """Map shadows to ``color_a`` and highlights to ``color_b``.

    Writes ``duotone=<hex a>,<hex b>`` (alpha channels ignored) and
    ``duotone-alpha`` as a whole percentage.

    :param color_a: Shadow color
    :param color_b: Highlight color
    :param alpha: Blend with the original image [0, 1]

    Example:
        >>> Duotone(Color.rgb(255, 0, 0), Color.rgb(0, 255, 0), 0.2).to_query_pairs()
        [('duotone', 'ff0000,00ff00'), ('duotone-alpha', '20')]
    """

    color_a: Color
    color_b: Color
    alpha: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "alpha", STYLIZE_CONFIG.duotone_alpha.validate(self.alpha))

    def to_query_pairs(self) -> list[QueryPair]:
        return [
            ("duotone", f"{to_hex(self.color_a)},{to_hex(self.color_b)}"),
            (STYLIZE_CONFIG.duotone_alpha.key, str(round_half_up(self.alpha * 100))),
        ]


class GaussianBlur(ClampedValue, StylizeOption):
    spec = STYLIZE_CONFIG.blur


Blur = GaussianBlur


class Halftone(ClampedValue, StylizeOption):
    spec = STYLIZE_CONFIG.halftone


@dataclass(frozen=True)
class Monochrome(StylizeOption):
    """Tint the image with a single color; alpha sets the intensity."""

    color: Color

    def to_query_pairs(self) -> list[QueryPair]:
        return [("mono", to_hex_alpha(self.color))]


class Pixelate(ClampedValue, StylizeOption):
    spec = STYLIZE_CONFIG.pixelate


class Sepia(ClampedValue, StylizeOption):
    spec = STYLIZE_CONFIG.sepia


def encode(options: Sequence[StylizeOption]) -> list[QueryPair]:
    """Encode stored stylize options (newest first) into query pairs.

    :param options: Stored stylize options
    :returns: Query pairs, newest option first
    """
    return encode_options(options, StylizeOption, "stylize")

"""Text overlay options.

Several options share a query key and are merged by the query assembler:

- AlignHorizontally and AlignVertically both write ``txtalign``
  (``txtalign=left,top``)
- FontFamily, Bold and Italic all write ``txtfont`` (``txtfont=serif,bold``)

A free-form Typeface is base64 encoded and written to ``txtfont64`` instead.
"""

from __future__ import annotations

import base64
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from ixurl.config import TEXT_CONFIG
from ixurl.options.base import ClampedValue, encode_options
from ixurl.protocols import QueryPair
from ixurl.shared.color import Color, to_hex_alpha
from ixurl.shared.format import format_number


class TextOption:
    """Base class for all text overlay options."""

    def to_query_pairs(self) -> list[QueryPair]:
        raise NotImplementedError


@dataclass(frozen=True)
class Text(TextOption):
    """Overlay text; percent-encoding happens when the query is assembled."""

    content: str

    def to_query_pairs(self) -> list[QueryPair]:
        return [("txt", self.content)]


# ============================================================================
# Layout
# ============================================================================


class HorizontalAlignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAlignment(str, Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class AlignHorizontally(TextOption):
    alignment: HorizontalAlignment

    def __post_init__(self):
        object.__setattr__(self, "alignment", HorizontalAlignment(self.alignment))

    def to_query_pairs(self) -> list[QueryPair]:
        return [("txtalign", self.alignment.value)]


@dataclass(frozen=True)
class AlignVertically(TextOption):
    alignment: VerticalAlignment

    def __post_init__(self):
        object.__setattr__(self, "alignment", VerticalAlignment(self.alignment))

    def to_query_pairs(self) -> list[QueryPair]:
        return [("txtalign", self.alignment.value)]


class ClipMode(str, Enum):
    """Where to cut text that does not fit its box."""

    START = "start"
    MIDDLE = "middle"
    END = "end"
    ELLIPSIS = "ellipsis"


@dataclass(frozen=True)
class Clip(TextOption):
    mode: ClipMode

    def __post_init__(self):
        object.__setattr__(self, "mode", ClipMode(self.mode))

    def to_query_pairs(self) -> list[QueryPair]:
        return [("txtclip", self.mode.value)]


class Padding(ClampedValue, TextOption):
    spec = TEXT_CONFIG.padding


class TextWidth(ClampedValue, TextOption):
    """Text box width; longer text wraps."""

    spec = TEXT_CONFIG.width


# ============================================================================
# Appearance
# ============================================================================


@dataclass(frozen=True)
class TextColor(TextOption):
    color: Color

    def to_query_pairs(self) -> list[QueryPair]:
        return [("txtclr", to_hex_alpha(self.color))]


class GenericFont(str, Enum):
    """CSS generic font families."""

    SERIF = "serif"
    SANS_SERIF = "sans-serif"
    MONOSPACE = "monospace"
    CURSIVE = "cursive"
    FANTASY = "fantasy"


@dataclass(frozen=True)
class FontFamily(TextOption):
    family: GenericFont

    def __post_init__(self):
        object.__setattr__(self, "family", GenericFont(self.family))

    def to_query_pairs(self) -> list[QueryPair]:
        return [("txtfont", self.family.value)]


@dataclass(frozen=True)
class Typeface(TextOption):
    """Named typeface, e.g. ``"Avenir Next Demi,Bold"``.

    Example:
        >>> Typeface("Futura").to_query_pairs()
        [('txtfont64', 'RnV0dXJh')]
    """

    name: str

    def to_query_pairs(self) -> list[QueryPair]:
        encoded = base64.b64encode(self.name.encode("utf-8")).decode("ascii")
        return [("txtfont64", encoded)]


@dataclass(frozen=True)
class Bold(TextOption):
    def to_query_pairs(self) -> list[QueryPair]:
        return [("txtfont", "bold")]


@dataclass(frozen=True)
class Italic(TextOption):
    def to_query_pairs(self) -> list[QueryPair]:
        return [("txtfont", "italic")]


class FontSize(ClampedValue, TextOption):
    spec = TEXT_CONFIG.font_size


class LigatureLevel(Enum):
    REQUIRED = 0
    COMMON = 1
    ALL = 2


@dataclass(frozen=True)
class Ligatures(TextOption):
    level: LigatureLevel

    def __post_init__(self):
        object.__setattr__(self, "level", LigatureLevel(self.level))

    def to_query_pairs(self) -> list[QueryPair]:
        return [("txtlig", str(self.level.value))]


@dataclass(frozen=True)
class Outline(TextOption):
    """Stroke around the glyphs, written as ``txtline`` and ``txtlineclr``."""

    width: float
    color: Color

    def __post_init__(self):
        object.__setattr__(self, "width", TEXT_CONFIG.outline_width.validate(self.width))

    def to_query_pairs(self) -> list[QueryPair]:
        return [
            (TEXT_CONFIG.outline_width.key, format_number(self.width)),
            ("txtlineclr", to_hex_alpha(self.color)),
        ]


class Shadow(ClampedValue, TextOption):
    spec = TEXT_CONFIG.shadow


def encode(options: Sequence[TextOption]) -> list[QueryPair]:
    """Encode stored text options (newest first) into query pairs.

    :param options: Stored text options
    :returns: Query pairs, newest option first
    """
    return encode_options(options, TextOption, "text")

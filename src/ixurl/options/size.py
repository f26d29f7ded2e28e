"""Size, crop and fit options.

Example:
    >>> from ixurl.options.size import Crop, CropMode, Fit, FitMode, Width
    >>> encode((Crop(CropMode.FACES), Fit(FitMode.CROP), Width(300)))
    [('crop', 'faces'), ('fit', 'crop'), ('w', '300')]
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from ixurl.config import SIZE_CONFIG
from ixurl.options.base import ClampedValue, encode_options
from ixurl.protocols import QueryPair
from ixurl.shared.color import Color, to_hex
from ixurl.shared.format import format_fraction, format_number


class SizeOption:
    """Base class for all size, crop and fit options."""

    def to_query_pairs(self) -> list[QueryPair]:
        raise NotImplementedError


# ============================================================================
# Dimensions
# ============================================================================


class Width(ClampedValue, SizeOption):
    """Output width in pixels."""

    spec = SIZE_CONFIG.width


class Height(ClampedValue, SizeOption):
    """Output height in pixels."""

    spec = SIZE_CONFIG.height


class RelativeWidth(ClampedValue, SizeOption):
    """Output width as a fraction of the source width."""

    spec = SIZE_CONFIG.relative_width

    def to_query_pairs(self) -> list[QueryPair]:
        return [(self.spec.key, format_fraction(self.value))]


class RelativeHeight(ClampedValue, SizeOption):
    """Output height as a fraction of the source height."""

    spec = SIZE_CONFIG.relative_height

    def to_query_pairs(self) -> list[QueryPair]:
        return [(self.spec.key, format_fraction(self.value))]


class MaxWidth(ClampedValue, SizeOption):
    spec = SIZE_CONFIG.max_width


class MaxHeight(ClampedValue, SizeOption):
    spec = SIZE_CONFIG.max_height


class MinWidth(ClampedValue, SizeOption):
    spec = SIZE_CONFIG.min_width


class MinHeight(ClampedValue, SizeOption):
    spec = SIZE_CONFIG.min_height


# ============================================================================
# Crop
# ============================================================================


class CropMode(str, Enum):
    """Which part of the image to keep when cropping."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    FACES = "faces"
    EDGES = "edges"
    ENTROPY = "entropy"


@dataclass(frozen=True)
class Crop(SizeOption):
    """Crop mode; several modes combine into one comma-joined ``crop`` value."""

    mode: CropMode

    def __post_init__(self):
        object.__setattr__(self, "mode", CropMode(self.mode))

    def to_query_pairs(self) -> list[QueryPair]:
        return [("crop", self.mode.value)]


@dataclass(frozen=True)
class FocalPointCrop(SizeOption):
    """Crop around a focal point.

    Emits ``fp-x``, ``fp-y`` and ``fp-z`` only; no ``crop`` key is written.

    :param x: Horizontal position [0, 1]
    :param y: Vertical position [0, 1]
    :param zoom: Zoom factor [1, 100]
    """

    x: float = 0.5
    y: float = 0.5
    zoom: float = 1

    def __post_init__(self):
        object.__setattr__(self, "x", SIZE_CONFIG.focal_x.validate(self.x))
        object.__setattr__(self, "y", SIZE_CONFIG.focal_y.validate(self.y))
        object.__setattr__(self, "zoom", SIZE_CONFIG.focal_zoom.validate(self.zoom))

    def to_query_pairs(self) -> list[QueryPair]:
        return [
            (SIZE_CONFIG.focal_x.key, format_number(self.x)),
            (SIZE_CONFIG.focal_y.key, format_number(self.y)),
            (SIZE_CONFIG.focal_zoom.key, format_number(self.zoom)),
        ]


# ============================================================================
# Fit
# ============================================================================


class FitMode(str, Enum):
    """How the image is resized into the requested box."""

    CLAMP = "clamp"
    CLIP = "clip"
    CROP = "crop"
    FACEAREA = "facearea"
    FILL = "fill"
    FILLMAX = "fillmax"
    MAX = "max"
    MIN = "min"
    SCALE = "scale"


@dataclass(frozen=True)
class Fit(SizeOption):
    """Plain fit mode with no extra parameters."""

    mode: FitMode

    def __post_init__(self):
        object.__setattr__(self, "mode", FitMode(self.mode))

    def to_query_pairs(self) -> list[QueryPair]:
        return [("fit", self.mode.value)]


@dataclass(frozen=True)
class FaceAreaFit(SizeOption):
    """Fit to a detected face.

    :param index: Which face to use (1-based); omitted when None
    :param padding: Padding around the face as a multiple of its size; omitted when None
    """

    index: int | None = None
    padding: float | None = None

    def to_query_pairs(self) -> list[QueryPair]:
        pairs = [("fit", FitMode.FACEAREA.value)]
        if self.index is not None:
            pairs.append(("faceindex", format_number(self.index)))
        if self.padding is not None:
            pairs.append(("facepad", format_number(self.padding)))
        return pairs


def _fill_pairs(mode: FitMode, color: Color | None) -> list[QueryPair]:
    pairs = [("fit", mode.value)]
    if color is None:
        pairs.append(("fill", "blur"))
    elif not color.is_transparent:
        pairs.append(("fill", "solid"))
        pairs.append(("fill-color", to_hex(color)))
    return pairs


@dataclass(frozen=True)
class Fill(SizeOption):
    """Fit inside the box and fill the remainder.

    No color fills with a blurred copy of the image; a fully transparent
    color leaves the fill to the service default.
    """

    color: Color | None = None

    def to_query_pairs(self) -> list[QueryPair]:
        return _fill_pairs(FitMode.FILL, self.color)


@dataclass(frozen=True)
class FillMax(SizeOption):
    """Like Fill, but never upscales the source."""

    color: Color | None = None

    def to_query_pairs(self) -> list[QueryPair]:
        return _fill_pairs(FitMode.FILLMAX, self.color)


# ============================================================================
# Aspect ratio and source rectangle
# ============================================================================


@dataclass(frozen=True)
class AspectRatio(SizeOption):
    """Output aspect ratio, written as ``W:H``."""

    width: float
    height: float

    def to_query_pairs(self) -> list[QueryPair]:
        return [("ar", f"{format_number(self.width)}:{format_number(self.height)}")]


class HorizontalAnchor(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAnchor(str, Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


def _rect_coordinate(value: int | float | Enum) -> str:
    # int -> pixels, float -> fraction of the source, Enum -> named anchor
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, float):
        return format_fraction(value)
    return format_number(value)


@dataclass(frozen=True)
class SourceRectangle(SizeOption):
    """Region of the source image to use before any other operation.

    Integer fields are pixels, float fields are fractions of the source
    dimension. ``x`` may also be a HorizontalAnchor and ``y`` a VerticalAnchor.
    """

    x: int | float | HorizontalAnchor
    y: int | float | VerticalAnchor
    width: int | float
    height: int | float

    def to_query_pairs(self) -> list[QueryPair]:
        parts = [self.x, self.y, self.width, self.height]
        return [("rect", ",".join(_rect_coordinate(p) for p in parts))]


def encode(options: Sequence[SizeOption]) -> list[QueryPair]:
    """Encode stored size options (newest first) into query pairs.

    :param options: Stored size options
    :returns: Query pairs, newest option first
    """
    return encode_options(options, SizeOption, "size")

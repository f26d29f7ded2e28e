"""Rotation, flip and orientation options."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np

from ixurl.options.base import encode_options
from ixurl.protocols import QueryPair
from ixurl.shared.format import format_number


class RotationOption:
    """Base class for all rotation options."""

    def to_query_pairs(self) -> list[QueryPair]:
        raise NotImplementedError


@dataclass(frozen=True)
class Rotate(RotationOption):
    """Rotate by an angle in degrees, normalized into [0, 360).

    Example:
        >>> Rotate(-90).degrees
        270
    """

    degrees: float

    def __post_init__(self):
        object.__setattr__(self, "degrees", self.degrees % 360)

    @classmethod
    def from_radians(cls, radians: float) -> Rotate:
        """Create rotation from an angle in radians.

        :param radians: Rotation angle in radians
        :returns: Rotate with the angle converted to degrees
        """
        return cls(float(np.degrees(radians)))

    def to_query_pairs(self) -> list[QueryPair]:
        return [("rot", format_number(self.degrees))]


@dataclass(frozen=True)
class FlipVertical(RotationOption):
    def to_query_pairs(self) -> list[QueryPair]:
        return [("flip", "v")]


@dataclass(frozen=True)
class FlipHorizontal(RotationOption):
    def to_query_pairs(self) -> list[QueryPair]:
        return [("flip", "h")]


class Orientation(Enum):
    """Exif orientation codes for each compass direction."""

    NORTH = 1
    EAST = 6
    SOUTH = 3
    WEST = 8


@dataclass(frozen=True)
class Orient(RotationOption):
    """Force an Exif orientation."""

    orientation: Orientation

    def __post_init__(self):
        object.__setattr__(self, "orientation", Orientation(self.orientation))

    def to_query_pairs(self) -> list[QueryPair]:
        return [("or", str(self.orientation.value))]


def encode(options: Sequence[RotationOption]) -> list[QueryPair]:
    """Encode stored rotation options (newest first) into query pairs.

    Flip values are concatenated into a single ``flip`` pair (``hv``, not
    ``h,v``) placed where the most recent flip sits.

    :param options: Stored rotation options
    :returns: Query pairs, newest option first
    """
    pairs = encode_options(options, RotationOption, "rotation")
    flips = "".join(value for key, value in pairs if key == "flip")

    merged: list[QueryPair] = []
    for key, value in pairs:
        if key != "flip":
            merged.append((key, value))
        elif flips:
            merged.append(("flip", flips))
            flips = ""
    return merged

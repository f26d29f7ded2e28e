"""Device pixel ratio option."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ixurl.options.base import encode_options
from ixurl.protocols import QueryPair
from ixurl.shared.format import format_number


class PixelDensityOption:
    """Base class for pixel density options."""

    def to_query_pairs(self) -> list[QueryPair]:
        raise NotImplementedError


@dataclass(frozen=True)
class Dpr(PixelDensityOption):
    """Device pixel ratio multiplier for the requested dimensions.

    Applying several ratios yields a comma-joined ``dpr`` value.
    """

    ratio: int

    def to_query_pairs(self) -> list[QueryPair]:
        return [("dpr", format_number(self.ratio))]


def encode(options: Sequence[PixelDensityOption]) -> list[QueryPair]:
    """Encode stored pixel density options (newest first) into query pairs.

    :param options: Stored pixel density options
    :returns: Query pairs, newest option first
    """
    return encode_options(options, PixelDensityOption, "pixel_density")

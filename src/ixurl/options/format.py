"""Output format options: quality, lossless and file type."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from ixurl.options.base import encode_options
from ixurl.protocols import QueryPair
from ixurl.shared.format import format_number


class FormatOption:
    """Base class for output format options."""

    def to_query_pairs(self) -> list[QueryPair]:
        raise NotImplementedError


@dataclass(frozen=True)
class Quality(FormatOption):
    """Output quality for lossy formats.

    The service accepts 0-100. The value is passed through unclamped.
    """

    value: int

    def to_query_pairs(self) -> list[QueryPair]:
        return [("q", format_number(self.value))]


@dataclass(frozen=True)
class Lossless(FormatOption):
    """Request lossless compression where the output format supports it."""

    enabled: bool = True

    def to_query_pairs(self) -> list[QueryPair]:
        return [("lossless", "1" if self.enabled else "0")]


class FileType(str, Enum):
    AVIF = "avif"
    GIF = "gif"
    JP2 = "jp2"
    JPG = "jpg"
    JSON = "json"
    JXR = "jxr"
    PJPG = "pjpg"
    PNG = "png"
    PNG8 = "png8"
    PNG32 = "png32"
    WEBP = "webp"


@dataclass(frozen=True)
class OutputFormat(FormatOption):
    """Force the output file type."""

    file_type: FileType

    def __post_init__(self):
        object.__setattr__(self, "file_type", FileType(self.file_type))

    def to_query_pairs(self) -> list[QueryPair]:
        return [("fm", self.file_type.value)]


def encode(options: Sequence[FormatOption]) -> list[QueryPair]:
    """Encode stored format options (newest first) into query pairs.

    :param options: Stored format options
    :returns: Query pairs, newest option first
    """
    return encode_options(options, FormatOption, "format")

"""Automatic optimization options.

Unlike every other family, automatic options always encode to exactly one
``auto`` pair. With nothing applied the value is empty (``auto=``).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ixurl.options.base import encode_options
from ixurl.protocols import QueryPair


class AutomaticOption:
    """Base class for automatic optimization keywords."""

    keyword: str

    def to_query_pairs(self) -> list[QueryPair]:
        return [("auto", self.keyword)]


@dataclass(frozen=True)
class Compress(AutomaticOption):
    keyword = "compress"


@dataclass(frozen=True)
class Enhance(AutomaticOption):
    keyword = "enhance"


@dataclass(frozen=True)
class FileFormat(AutomaticOption):
    """Let the service pick the best output format for the client."""

    keyword = "format"


@dataclass(frozen=True)
class RedEyeRemoval(AutomaticOption):
    keyword = "redeye"


def encode(options: Sequence[AutomaticOption]) -> list[QueryPair]:
    """Encode stored automatic options (newest first) as a single ``auto`` pair.

    :param options: Stored automatic options, possibly empty
    :returns: One-element list ``[("auto", "kw1,kw2,...")]``
    """
    pairs = encode_options(options, AutomaticOption, "automatic")
    return [("auto", ",".join(value for _, value in pairs))]

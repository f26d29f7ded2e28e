"""
Protocol definitions for ixurl option interfaces.

Every option variant, whatever its family, knows how to turn itself into
ordered query pairs. Family encoders rely only on this interface.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

QueryPair = tuple[str, str]


@runtime_checkable
class QueryOption(Protocol):
    """Protocol for a single transformation option."""

    def to_query_pairs(self) -> list[QueryPair]:
        """
        Encode the option as query pairs.

        :returns: Ordered (name, value) pairs; names may repeat across options
        """
        ...

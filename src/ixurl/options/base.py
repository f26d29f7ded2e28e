"""Shared encoder plumbing for option families."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from ixurl.config.operations import OperationSpec
from ixurl.protocols import QueryOption, QueryPair
from ixurl.shared.format import format_number


def encode_options(
    options: Sequence[QueryOption], family: type, family_name: str
) -> list[QueryPair]:
    """Encode a family's stored options, most recently applied first.

    The stored order is kept in the output: later options render before
    earlier ones.

    :param options: Stored options, most recently applied first
    :param family: Base class every option must derive from
    :param family_name: Family name used in error messages
    :returns: Concatenated query pairs
    :raises TypeError: If an option belongs to another family
    """
    pairs: list[QueryPair] = []
    for option in options:
        if not isinstance(option, family):
            raise TypeError(
                f"{family_name}: expected {family.__name__}, got {type(option).__name__}"
            )
        pairs.extend(option.to_query_pairs())
    return pairs


@dataclass(frozen=True)
class ClampedValue:
    """Single numeric option clamped against a class-level OperationSpec.

    Subclasses set ``spec`` and mix in their family base class.
    """

    value: float

    spec: ClassVar[OperationSpec]

    def __post_init__(self):
        object.__setattr__(self, "value", self.spec.validate(self.value))

    def to_query_pairs(self) -> list[QueryPair]:
        return [(self.spec.key, format_number(self.value))]

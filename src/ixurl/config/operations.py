"""Operation specifications for query parameters.

This module defines the OperationSpec dataclass that specifies the query
key, valid range and default of a numeric option parameter.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass

from ixurl.shared.clamp import clamp


@dataclass(frozen=True)
class OperationSpec:
    """Specification for a numeric option parameter.

    Attributes:
        name: Option name (e.g., "brightness", "blur")
        key: Query parameter name emitted by the option (e.g., "bri")
        min_value: Minimum allowed value
        max_value: Maximum allowed value
        default: Value the rendering service assumes when the key is absent
        description: Human-readable description
    """

    name: str
    key: str
    min_value: float
    max_value: float
    default: float
    description: str = ""

    def validate(self, value: float) -> float:
        """Validate and clamp value to allowed range.

        Any real number is accepted, including numpy scalars; integral input
        comes back as ``int`` and everything else as ``float``.

        :param value: Value to validate
        :returns: Clamped value within [min_value, max_value]
        :raises ValueError: If value is not a number
        """
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise ValueError(f"{self.name}: expected number, got {type(value).__name__}")

        value = int(value) if isinstance(value, numbers.Integral) else float(value)
        return clamp(self.min_value, self.max_value, value)

    def __repr__(self) -> str:
        return (
            f"OperationSpec({self.name}, key={self.key}, "
            f"range=[{self.min_value}, {self.max_value}], "
            f"default={self.default})"
        )

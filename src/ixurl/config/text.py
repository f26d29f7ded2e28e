"""Text overlay configuration."""

from __future__ import annotations

from dataclasses import dataclass

from ixurl.config.operations import OperationSpec
from ixurl.config.size import MAX_DIMENSION


@dataclass(frozen=True)
class TextConfig:
    """Ranges for numeric text overlay parameters."""

    font_size: OperationSpec = OperationSpec(
        name="font_size",
        key="txtsize",
        min_value=0,
        max_value=1000,
        default=12,
        description="Font size in pixels",
    )

    outline_width: OperationSpec = OperationSpec(
        name="outline_width",
        key="txtline",
        min_value=0,
        max_value=100,
        default=0,
        description="Outline stroke width in pixels",
    )

    padding: OperationSpec = OperationSpec(
        name="padding",
        key="txtpad",
        min_value=0,
        max_value=1000,
        default=10,
        description="Padding around the text box in pixels",
    )

    shadow: OperationSpec = OperationSpec(
        name="shadow",
        key="txtshad",
        min_value=0,
        max_value=10,
        default=0,
        description="Drop shadow strength",
    )

    width: OperationSpec = OperationSpec(
        name="width",
        key="txtwidth",
        min_value=0,
        max_value=MAX_DIMENSION,
        default=0,
        description="Text box width in pixels; 0 disables wrapping",
    )

    def get_spec(self, name: str) -> OperationSpec:
        """Get text parameter spec by name.

        :param name: Parameter name
        :return: OperationSpec for the parameter
        :raises AttributeError: If parameter not found
        """
        return getattr(self, name)

    def get_all_specs(self) -> dict[str, OperationSpec]:
        """Get all text parameter specs as a dictionary.

        :return: Dictionary mapping parameter names to specs
        """
        return {
            "font_size": self.font_size,
            "outline_width": self.outline_width,
            "padding": self.padding,
            "shadow": self.shadow,
            "width": self.width,
        }

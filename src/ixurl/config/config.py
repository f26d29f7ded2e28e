"""Unified ixurl configuration.

This module provides a top-level configuration dataclass that contains
all family-specific parameter configurations as sub-attributes.
"""

from __future__ import annotations

from dataclasses import dataclass

from ixurl.config.adjustment import AdjustmentConfig
from ixurl.config.operations import OperationSpec
from ixurl.config.size import SizeConfig
from ixurl.config.stylize import StylizeConfig
from ixurl.config.text import TextConfig


@dataclass(frozen=True)
class IxConfig:
    """Top-level configuration containing all family configurations.

    Provides hierarchical access to all parameter specifications:
        CONFIG.size.width
        CONFIG.adjustment.brightness
        CONFIG.stylize.blur
        CONFIG.text.shadow

    Attributes:
        size: Size, crop and focal-point parameter specifications
        adjustment: Adjustment parameter specifications
        stylize: Stylize effect specifications
        text: Text overlay parameter specifications
    """

    size: SizeConfig = SizeConfig()
    adjustment: AdjustmentConfig = AdjustmentConfig()
    stylize: StylizeConfig = StylizeConfig()
    text: TextConfig = TextConfig()

    def get_all_specs(self) -> dict[str, dict[str, OperationSpec]]:
        """Get all parameter specs organized by family.

        :return: Nested dictionary of all specifications
        """
        return {
            "size": self.size.get_all_specs(),
            "adjustment": self.adjustment.get_all_specs(),
            "stylize": self.stylize.get_all_specs(),
            "text": self.text.get_all_specs(),
        }


# Main singleton instance
CONFIG = IxConfig()

SIZE_CONFIG = CONFIG.size
ADJUSTMENT_CONFIG = CONFIG.adjustment
STYLIZE_CONFIG = CONFIG.stylize
TEXT_CONFIG = CONFIG.text

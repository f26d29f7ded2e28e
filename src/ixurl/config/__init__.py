"""Parameter range configuration for all option families.

Usage:
    from ixurl.config import CONFIG
    CONFIG.adjustment.brightness.key  # "bri"
    CONFIG.stylize.blur.max_value  # 2000

    from ixurl.config import ADJUSTMENT_CONFIG
    ADJUSTMENT_CONFIG.brightness.validate(150)  # 100
"""

from ixurl.config.adjustment import AdjustmentConfig
from ixurl.config.config import (
    ADJUSTMENT_CONFIG,
    CONFIG,
    SIZE_CONFIG,
    STYLIZE_CONFIG,
    TEXT_CONFIG,
    IxConfig,
)
from ixurl.config.operations import OperationSpec
from ixurl.config.size import MAX_DIMENSION, SizeConfig
from ixurl.config.stylize import StylizeConfig
from ixurl.config.text import TextConfig

__all__ = [
    "OperationSpec",
    "IxConfig",
    "SizeConfig",
    "AdjustmentConfig",
    "StylizeConfig",
    "TextConfig",
    "MAX_DIMENSION",
    "CONFIG",
    "SIZE_CONFIG",
    "ADJUSTMENT_CONFIG",
    "STYLIZE_CONFIG",
    "TEXT_CONFIG",
]

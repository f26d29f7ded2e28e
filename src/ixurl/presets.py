"""Preset library of common option bundles.

Presets are plain tuples of options and may mix families; apply them with
``ImageUrl.apply(*preset)``.
"""

from __future__ import annotations

import logging

from ixurl.options import (
    Compress,
    Contrast,
    Crop,
    CropMode,
    Dpr,
    Enhance,
    FileFormat,
    Fit,
    FitMode,
    GaussianBlur,
    Height,
    Quality,
    RedEyeRemoval,
    Saturation,
    Sepia,
    Sharpen,
    Vibrance,
    Width,
)

logger = logging.getLogger(__name__)

# ============================================================================
# Size presets
# ============================================================================

THUMBNAIL = (Width(150), Height(150), Fit(FitMode.CROP), Crop(CropMode.ENTROPY))

AVATAR = (Width(128), Height(128), Fit(FitMode.CROP), Crop(CropMode.FACES))

RETINA = (Dpr(2),)

# ============================================================================
# Delivery presets
# ============================================================================

WEB_OPTIMIZED = (Compress(), FileFormat(), Quality(75))

ENHANCED = (Enhance(), RedEyeRemoval(), Sharpen(10))

# ============================================================================
# Look presets
# ============================================================================

VINTAGE = (Sepia(60), Contrast(-10), Vibrance(-20))

NOIR = (Saturation(-100), Contrast(30))

SOFT_FOCUS = (GaussianBlur(20), Contrast(-5))

PRESETS = {
    "thumbnail": THUMBNAIL,
    "avatar": AVATAR,
    "retina": RETINA,
    "web_optimized": WEB_OPTIMIZED,
    "enhanced": ENHANCED,
    "vintage": VINTAGE,
    "noir": NOIR,
    "soft_focus": SOFT_FOCUS,
}


def get_preset(name: str) -> tuple:
    """Get preset by name.

    :param name: Preset name (case-insensitive)
    :returns: Tuple of options
    :raises KeyError: If preset not found
    """
    name_lower = name.lower()
    if name_lower not in PRESETS:
        available = ", ".join(PRESETS.keys())
        raise KeyError(f"Unknown preset '{name}'. Available: {available}")
    logger.debug("[Presets] Using preset '%s'", name_lower)
    return PRESETS[name_lower]

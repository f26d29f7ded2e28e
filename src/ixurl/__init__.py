"""
ixurl - Image transformation URL builder

Typed, immutable builder for image-rendering service URLs. Start from a base
image URL, accumulate options from any family, and render a URL whose query
string uses the service's parameter names and encodings.

Families (rendered in this order):
- Size: w, h, max-w, min-h, crop, fp-x/y/z, fit, fill, ar, rect
- Rotation: rot, flip, or
- Adjustment: bri, con, exp, gam, high, hue, sat, shad, sharp, vib, invert, usm
- Automatic: auto (always present)
- Stylize: duotone, blur, htn, mono, px, sepia
- Text: txt, txtalign, txtclip, txtclr, txtfont, txtfont64, txtsize, ...
- Format: q, lossless, fm
- Pixel density: dpr

Out-of-range numbers are clamped, never rejected.

Example:
    >>> from ixurl import Color, ImageUrl
    >>> from ixurl.options import Duotone, Fit, FitMode, Width
    >>>
    >>> url = (ImageUrl.parse("https://assets.example.com/photo.jpg")
    ...     .size(Width(640), Fit(FitMode.CROP))
    ...     .stylize(Duotone(Color.rgb(255, 0, 0), Color.rgb(0, 255, 0), 0.2)))
    >>> str(url)
    'https://assets.example.com/photo.jpg?fit=crop&w=640&auto=&duotone=ff0000,00ff00&duotone-alpha=20'

Example - Presets:
    >>> from ixurl.presets import AVATAR, RETINA
    >>> ImageUrl.parse("https://assets.example.com/me.jpg").apply(*AVATAR, *RETINA)
"""

__version__ = "0.1.0"

from ixurl.config import CONFIG, OperationSpec
from ixurl.image import RENDER_ORDER, Family, ImageUrl, family_of
from ixurl.presets import PRESETS, get_preset
from ixurl.protocols import QueryOption, QueryPair
from ixurl.query import group_pairs, to_query_string
from ixurl.shared import Color, clamp, to_hex, to_hex_alpha
from ixurl.tag import ImageTag

__all__ = [
    # Version
    "__version__",
    # Builder
    "ImageUrl",
    "Family",
    "RENDER_ORDER",
    "family_of",
    "ImageTag",
    # Query assembly
    "QueryPair",
    "QueryOption",
    "group_pairs",
    "to_query_string",
    # Colors and clamping
    "Color",
    "clamp",
    "to_hex",
    "to_hex_alpha",
    # Configuration
    "CONFIG",
    "OperationSpec",
    # Presets
    "PRESETS",
    "get_preset",
]

"""Transformation options, one module per family.

Each family module defines a base class, its option variants and an
``encode(options)`` function turning stored options into query pairs.
"""

from ixurl.options.adjustment import (
    AdjustmentOption,
    Brightness,
    Contrast,
    Exposure,
    Gamma,
    Highlights,
    HueShift,
    Invert,
    Saturation,
    Shadows,
    Sharpen,
    UnsharpMask,
    Vibrance,
)
from ixurl.options.automatic import (
    AutomaticOption,
    Compress,
    Enhance,
    FileFormat,
    RedEyeRemoval,
)
from ixurl.options.format import FileType, FormatOption, Lossless, OutputFormat, Quality
from ixurl.options.pixel_density import Dpr, PixelDensityOption
from ixurl.options.rotation import (
    FlipHorizontal,
    FlipVertical,
    Orient,
    Orientation,
    Rotate,
    RotationOption,
)
from ixurl.options.size import (
    AspectRatio,
    Crop,
    CropMode,
    FaceAreaFit,
    Fill,
    FillMax,
    Fit,
    FitMode,
    FocalPointCrop,
    Height,
    HorizontalAnchor,
    MaxHeight,
    MaxWidth,
    MinHeight,
    MinWidth,
    RelativeHeight,
    RelativeWidth,
    SizeOption,
    SourceRectangle,
    VerticalAnchor,
    Width,
)
from ixurl.options.stylize import (
    Blur,
    Duotone,
    GaussianBlur,
    Halftone,
    Monochrome,
    Pixelate,
    Sepia,
    StylizeOption,
)
from ixurl.options.text import (
    AlignHorizontally,
    AlignVertically,
    Bold,
    Clip,
    ClipMode,
    FontFamily,
    FontSize,
    GenericFont,
    HorizontalAlignment,
    Italic,
    LigatureLevel,
    Ligatures,
    Outline,
    Padding,
    Shadow,
    Text,
    TextColor,
    TextOption,
    TextWidth,
    Typeface,
    VerticalAlignment,
)

__all__ = [
    # Family base classes
    "SizeOption",
    "RotationOption",
    "AdjustmentOption",
    "AutomaticOption",
    "StylizeOption",
    "TextOption",
    "FormatOption",
    "PixelDensityOption",
    # Size
    "Width",
    "Height",
    "RelativeWidth",
    "RelativeHeight",
    "MaxWidth",
    "MaxHeight",
    "MinWidth",
    "MinHeight",
    "Crop",
    "CropMode",
    "FocalPointCrop",
    "Fit",
    "FitMode",
    "FaceAreaFit",
    "Fill",
    "FillMax",
    "AspectRatio",
    "SourceRectangle",
    "HorizontalAnchor",
    "VerticalAnchor",
    # Rotation
    "Rotate",
    "FlipVertical",
    "FlipHorizontal",
    "Orient",
    "Orientation",
    # Adjustment
    "Brightness",
    "Contrast",
    "Exposure",
    "Gamma",
    "Highlights",
    "HueShift",
    "Saturation",
    "Shadows",
    "Sharpen",
    "Vibrance",
    "Invert",
    "UnsharpMask",
    # Automatic
    "Compress",
    "Enhance",
    "FileFormat",
    "RedEyeRemoval",
    # Stylize
    "Duotone",
    "GaussianBlur",
    "Blur",
    "Halftone",
    "Monochrome",
    "Pixelate",
    "Sepia",
    # Text
    "Text",
    "AlignHorizontally",
    "AlignVertically",
    "HorizontalAlignment",
    "VerticalAlignment",
    "Clip",
    "ClipMode",
    "TextColor",
    "FontFamily",
    "GenericFont",
    "Typeface",
    "Bold",
    "Italic",
    "FontSize",
    "Ligatures",
    "LigatureLevel",
    "Outline",
    "Padding",
    "Shadow",
    "TextWidth",
    # Format
    "Quality",
    "Lossless",
    "OutputFormat",
    "FileType",
    # Pixel density
    "Dpr",
]

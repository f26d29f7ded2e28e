"""
Example: image URL building usage.

Demonstrates how to use ixurl for:
- Resizing and cropping
- Color adjustments and stylize effects
- Text overlays
- Presets and image tags

Every builder call returns a new ImageUrl, so intermediate values can be
reused as starting points.
"""

import logging

from ixurl import Color, ImageUrl
from ixurl.options import (
    AlignHorizontally,
    AlignVertically,
    Brightness,
    Compress,
    Contrast,
    Crop,
    CropMode,
    Duotone,
    FileFormat,
    Fill,
    Fit,
    FitMode,
    FocalPointCrop,
    FontSize,
    Height,
    HorizontalAlignment,
    Rotate,
    Shadow,
    Text,
    TextColor,
    Typeface,
    VerticalAlignment,
    Width,
)
from ixurl.presets import get_preset

# Configure logging to see rendered URLs
logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

SOURCE = "https://assets.example.com/photos/harbor.jpg?v=3"


def example_1_resize_and_crop():
    """Example 1: Resize with a face-aware crop."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: Resize and Crop")
    print("=" * 70)

    image = ImageUrl.parse(SOURCE)
    print(f"Base (query stripped): {image}")

    cropped = image.size(Width(640), Height(360), Fit(FitMode.CROP), Crop(CropMode.FACES))
    print(f"Face crop:   {cropped}")

    focal = image.size(Width(640), Height(360), Fit(FitMode.CROP), FocalPointCrop(0.3, 0.6, 2))
    print(f"Focal point: {focal}")

    letterbox = image.size(Width(640), Height(640), Fill(Color.rgb(20, 20, 20)))
    print(f"Letterbox:   {letterbox}")


def example_2_adjust_and_stylize():
    """Example 2: Tone adjustments and a duotone effect."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: Adjust and Stylize")
    print("=" * 70)

    base = ImageUrl.parse(SOURCE).size(Width(800))

    # 150 is clamped to 100
    bright = base.adjust(Brightness(150), Contrast(15))
    print(f"Adjusted: {bright}")

    duotone = base.stylize(Duotone(Color.from_hex("#1b2a49"), Color.from_hex("#f2c14e"), 0.8))
    print(f"Duotone:  {duotone}")

    rotated = base.rotation(Rotate(-90))
    print(f"Rotated:  {rotated}")


def example_3_text_overlay():
    """Example 3: Caption rendered onto the image."""
    print("\n" + "=" * 70)
    print("EXAMPLE 3: Text Overlay")
    print("=" * 70)

    captioned = (
        ImageUrl.parse(SOURCE)
        .size(Width(1200))
        .text(
            Text("Harbor at dawn"),
            Typeface("Avenir Next Demi,Bold"),
            FontSize(48),
            TextColor(Color.rgba(255, 255, 255, 0.9)),
            AlignHorizontally(HorizontalAlignment.CENTER),
            AlignVertically(VerticalAlignment.BOTTOM),
            Shadow(5),
        )
    )
    print(f"Captioned: {captioned}")


def example_4_presets_and_tags():
    """Example 4: Presets, automatic optimization and image tags."""
    print("\n" + "=" * 70)
    print("EXAMPLE 4: Presets and Image Tags")
    print("=" * 70)

    avatar = ImageUrl.parse(SOURCE).apply(*get_preset("avatar"), *get_preset("retina"))
    optimized = avatar.automatic(Compress(), FileFormat())
    print(f"Avatar: {optimized}")

    tag = optimized.to_image_tag(("alt", "Profile photo"), loading="lazy")
    print(f"Tag:    {tag.to_html()}")


def main():
    """Run all examples."""
    print("\n" + "=" * 70)
    print("IXURL URL BUILDING EXAMPLES")
    print("=" * 70)

    example_1_resize_and_crop()
    example_2_adjust_and_stylize()
    example_3_text_overlay()
    example_4_presets_and_tags()

    print("\n" + "=" * 70)
    print("ALL EXAMPLES COMPLETED")
    print("=" * 70)


if __name__ == "__main__":
    main()

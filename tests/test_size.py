"""Tests for size, crop and fit options."""

import numpy as np
import pytest

from ixurl.options import Brightness
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
    SourceRectangle,
    VerticalAnchor,
    Width,
    encode,
)
from ixurl.shared.color import Color


class TestDimensions:
    """Test absolute and relative dimensions."""

    @pytest.mark.parametrize(
        "option, expected",
        [
            (Width(200), [("w", "200")]),
            (Height(100), [("h", "100")]),
            (MaxWidth(800), [("max-w", "800")]),
            (MaxHeight(600), [("max-h", "600")]),
            (MinWidth(50), [("min-w", "50")]),
            (MinHeight(40), [("min-h", "40")]),
        ],
    )
    def test_keys(self, option, expected):
        """Each dimension writes its own key."""
        assert option.to_query_pairs() == expected

    def test_absolute_clamped(self):
        """Absolute dimensions clamp to [0, 8192]."""
        assert Width(-10).value == 0
        assert Height(10000).value == 8192

    def test_numpy_dimensions(self):
        """Sizes computed with numpy are accepted and rendered as integers."""
        assert Width(np.int64(200)).to_query_pairs() == [("w", "200")]
        assert Height(np.float64(9000.0)).to_query_pairs() == [("h", "8192")]

    def test_relative_share_keys(self):
        """Relative dimensions reuse w and h with fractional values."""
        assert RelativeWidth(0.5).to_query_pairs() == [("w", "0.5")]
        assert RelativeHeight(0.25).to_query_pairs() == [("h", "0.25")]

    def test_relative_keeps_decimal_point(self):
        """A full relative width stays distinguishable from one pixel."""
        assert RelativeWidth(1.0).to_query_pairs() == [("w", "1.0")]

    def test_relative_clamped(self):
        """Relative dimensions clamp to [0, 1]."""
        assert RelativeWidth(2).value == 1.0
        assert RelativeHeight(-0.5).value == 0.0


class TestCrop:
    """Test crop modes and focal point crops."""

    @pytest.mark.parametrize("mode", list(CropMode))
    def test_modes(self, mode):
        """Each crop mode writes its name to crop."""
        assert Crop(mode).to_query_pairs() == [("crop", mode.value)]

    def test_mode_from_string(self):
        """Modes can be given by value."""
        assert Crop("faces").mode is CropMode.FACES

    def test_several_modes_newest_first(self):
        """Stored and encoded newest first."""
        stored = (Crop(CropMode.LEFT), Crop(CropMode.TOP))
        assert encode(stored) == [("crop", "left"), ("crop", "top")]

    def test_focal_point(self):
        """Focal point writes fp-x, fp-y, fp-z and no crop key."""
        pairs = FocalPointCrop(0.3, 0.7, 2).to_query_pairs()
        assert pairs == [("fp-x", "0.3"), ("fp-y", "0.7"), ("fp-z", "2")]
        assert "crop" not in dict(pairs)

    def test_focal_point_clamped(self):
        """Coordinates clamp to [0, 1], zoom to [1, 100]."""
        point = FocalPointCrop(1.5, -1, 200)
        assert (point.x, point.y, point.zoom) == (1.0, 0.0, 100)


class TestFit:
    """Test fit modes."""

    @pytest.mark.parametrize("mode", list(FitMode))
    def test_plain_modes(self, mode):
        """Each fit mode writes its name to fit."""
        assert Fit(mode).to_query_pairs() == [("fit", mode.value)]

    def test_facearea_without_options(self):
        """Face area fit alone writes only fit."""
        assert FaceAreaFit().to_query_pairs() == [("fit", "facearea")]

    def test_facearea_with_options(self):
        """Index and padding add faceindex and facepad."""
        assert FaceAreaFit(index=2, padding=1.5).to_query_pairs() == [
            ("fit", "facearea"),
            ("faceindex", "2"),
            ("facepad", "1.5"),
        ]

    def test_fill_without_color_blurs(self):
        """No color defaults to a blurred fill."""
        assert Fill().to_query_pairs() == [("fit", "fill"), ("fill", "blur")]

    def test_fill_with_color(self):
        """A visible color writes a solid fill color."""
        assert Fill(Color.rgb(255, 0, 0)).to_query_pairs() == [
            ("fit", "fill"),
            ("fill", "solid"),
            ("fill-color", "ff0000"),
        ]

    def test_fill_with_transparent_color(self):
        """A fully transparent color adds no fill parameters."""
        assert Fill(Color.transparent()).to_query_pairs() == [("fit", "fill")]

    def test_fillmax_variants(self):
        """FillMax follows the same rules with fit=fillmax."""
        assert FillMax().to_query_pairs() == [("fit", "fillmax"), ("fill", "blur")]
        assert FillMax(Color.rgba(0, 0, 255, 0.0)).to_query_pairs() == [("fit", "fillmax")]
        assert FillMax(Color.rgb(0, 0, 255)).to_query_pairs()[-1] == ("fill-color", "0000ff")


class TestAspectRatioAndRect:
    """Test aspect ratio and source rectangle grammars."""

    def test_aspect_ratio(self):
        """Aspect ratio is W:H."""
        assert AspectRatio(16, 9).to_query_pairs() == [("ar", "16:9")]
        assert AspectRatio(1.5, 1).to_query_pairs() == [("ar", "1.5:1")]

    def test_rect_pixels(self):
        """Integer coordinates are pixels."""
        rect = SourceRectangle(10, 20, 300, 200)
        assert rect.to_query_pairs() == [("rect", "10,20,300,200")]

    def test_rect_relative(self):
        """Float coordinates are fractions."""
        rect = SourceRectangle(0.25, 0, 0.5, 100)
        assert rect.to_query_pairs() == [("rect", "0.25,0,0.5,100")]

    def test_rect_anchors(self):
        """Named anchors render by name."""
        rect = SourceRectangle(HorizontalAnchor.CENTER, VerticalAnchor.BOTTOM, 0.5, 0.5)
        assert rect.to_query_pairs() == [("rect", "center,bottom,0.5,0.5")]


class TestEncode:
    """Test family encoding."""

    def test_empty(self):
        """No options, no pairs."""
        assert encode(()) == []

    def test_newest_first(self):
        """Options render newest first; multi-pair options keep their internal order."""
        stored = (Fill(), Width(100))
        assert encode(stored) == [("fit", "fill"), ("fill", "blur"), ("w", "100")]

    def test_wrong_family(self):
        """Options of another family are rejected."""
        with pytest.raises(TypeError, match="size"):
            encode((Brightness(10),))

"""Tests for text overlay options."""

import base64

import pytest

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
    TextWidth,
    Typeface,
    VerticalAlignment,
    encode,
)
from ixurl.shared.color import Color


class TestContentAndLayout:
    """Test text content, alignment and clipping."""

    def test_text_raw(self):
        """Text is stored raw; escaping happens in the query layer."""
        assert Text("Hello, World & Co").to_query_pairs() == [("txt", "Hello, World & Co")]

    def test_alignment_axes_share_key(self):
        """Both alignment axes write txtalign."""
        assert AlignHorizontally(HorizontalAlignment.LEFT).to_query_pairs() == [
            ("txtalign", "left")
        ]
        assert AlignVertically(VerticalAlignment.BOTTOM).to_query_pairs() == [
            ("txtalign", "bottom")
        ]

    def test_alignment_from_string(self):
        """Alignments can be given by value."""
        assert AlignVertically("middle").alignment is VerticalAlignment.MIDDLE

    def test_alignment_rejects_other_axis(self):
        """A vertical value is not a horizontal alignment."""
        with pytest.raises(ValueError):
            AlignHorizontally("top")

    @pytest.mark.parametrize("mode", list(ClipMode))
    def test_clip(self, mode):
        """Clip modes write txtclip."""
        assert Clip(mode).to_query_pairs() == [("txtclip", mode.value)]

    def test_padding_and_width(self):
        """Padding and width write their keys."""
        assert Padding(20).to_query_pairs() == [("txtpad", "20")]
        assert TextWidth(300).to_query_pairs() == [("txtwidth", "300")]
        assert TextWidth(-5).value == 0


class TestFonts:
    """Test font keywords, typefaces and styles."""

    @pytest.mark.parametrize(
        "family, value",
        [
            (GenericFont.SERIF, "serif"),
            (GenericFont.SANS_SERIF, "sans-serif"),
            (GenericFont.MONOSPACE, "monospace"),
            (GenericFont.CURSIVE, "cursive"),
            (GenericFont.FANTASY, "fantasy"),
        ],
    )
    def test_generic_families(self, family, value):
        """CSS keywords write txtfont."""
        assert FontFamily(family).to_query_pairs() == [("txtfont", value)]

    def test_typeface_base64(self):
        """Free-form typefaces are base64 encoded into txtfont64."""
        assert Typeface("Futura").to_query_pairs() == [("txtfont64", "RnV0dXJh")]

    def test_typeface_with_comma(self):
        """Commas in the name survive encoding."""
        name = "Avenir Next Demi,Bold"
        expected = base64.b64encode(name.encode("utf-8")).decode("ascii")
        assert Typeface(name).to_query_pairs() == [("txtfont64", expected)]

    def test_styles_share_txtfont(self):
        """Bold and italic write txtfont."""
        assert Bold().to_query_pairs() == [("txtfont", "bold")]
        assert Italic().to_query_pairs() == [("txtfont", "italic")]

    def test_font_size_clamped(self):
        """Font size clamps to [0, 1000]."""
        assert FontSize(24).to_query_pairs() == [("txtsize", "24")]
        assert FontSize(2000).value == 1000

    @pytest.mark.parametrize(
        "level, code",
        [(LigatureLevel.REQUIRED, "0"), (LigatureLevel.COMMON, "1"), (LigatureLevel.ALL, "2")],
    )
    def test_ligatures(self, level, code):
        """Ligature levels write numeric codes."""
        assert Ligatures(level).to_query_pairs() == [("txtlig", code)]


class TestAppearance:
    """Test color, outline and shadow."""

    def test_color_hex_alpha(self):
        """Text color uses the alpha-first encoding."""
        color = Color.rgba(255, 255, 255, 0.5)
        assert TextColor(color).to_query_pairs() == [("txtclr", "80ffffff")]

    def test_outline(self):
        """Outline writes width and color."""
        assert Outline(2, Color.rgb(0, 0, 0)).to_query_pairs() == [
            ("txtline", "2"),
            ("txtlineclr", "ff000000"),
        ]

    @pytest.mark.parametrize("value, expected", [(5, "5"), (15, "10"), (-1, "0")])
    def test_shadow_clamped(self, value, expected):
        """Shadow clamps to [0, 10]."""
        assert Shadow(value).to_query_pairs() == [("txtshad", expected)]


class TestEncode:
    """Test family encoding."""

    def test_keyword_and_style_collide(self):
        """A font keyword and a style both produce txtfont pairs."""
        stored = (Bold(), FontFamily(GenericFont.SERIF))
        assert encode(stored) == [("txtfont", "bold"), ("txtfont", "serif")]

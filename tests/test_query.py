"""Tests for grouping and serializing query pairs."""

from ixurl.query import group_pairs, to_query_string


class TestGroupPairs:
    """Test same-name grouping."""

    def test_groups_and_preserves_first_occurrence(self):
        """Repeated names are comma-joined at their first position."""
        pairs = [("crop", "top"), ("crop", "left"), ("w", "100")]
        assert group_pairs(pairs) == [("crop", "top,left"), ("w", "100")]

    def test_interleaved_names(self):
        """Later values join the earlier entry even after other names."""
        pairs = [("a", "1"), ("b", "2"), ("a", "3"), ("c", "4"), ("b", "5")]
        assert group_pairs(pairs) == [("a", "1,3"), ("b", "2,5"), ("c", "4")]

    def test_unique_names_untouched(self):
        """Pairs with distinct names pass through in order."""
        pairs = [("w", "1"), ("h", "2")]
        assert group_pairs(pairs) == pairs

    def test_empty(self):
        """No pairs, no output."""
        assert group_pairs([]) == []

    def test_empty_value_kept(self):
        """An empty value still produces its name."""
        assert group_pairs([("auto", "")]) == [("auto", "")]


class TestToQueryString:
    """Test percent-encoding of the grouped query."""

    def test_joins_with_ampersand(self):
        """Entries are name=value joined by &."""
        assert to_query_string([("w", "200"), ("h", "100")]) == "w=200&h=100"

    def test_commas_and_colons_literal(self):
        """Grouped commas and aspect-ratio colons are not escaped."""
        query = to_query_string([("crop", "top"), ("crop", "left"), ("ar", "16:9")])
        assert query == "crop=top,left&ar=16:9"

    def test_spaces_and_reserved_characters(self):
        """Spaces become %20; & and = inside values are escaped."""
        query = to_query_string([("txt", "Fish & Chips = Tea")])
        assert query == "txt=Fish%20%26%20Chips%20%3D%20Tea"

    def test_unicode(self):
        """Non-ASCII text is UTF-8 percent-encoded."""
        assert to_query_string([("txt", "é")]) == "txt=%C3%A9"

    def test_empty_value(self):
        """Empty values keep their equals sign."""
        assert to_query_string([("auto", "")]) == "auto="


class TestQueryOptionProtocol:
    """Test that options from every family satisfy QueryOption."""

    def test_options_are_query_options(self):
        """Every family's options expose to_query_pairs."""
        from ixurl.options import Compress, Dpr, Invert, Quality, Rotate, Sepia, Text, Width
        from ixurl.protocols import QueryOption

        for option in (Width(1), Rotate(1), Invert(), Compress(), Sepia(1), Text("a"),
                       Quality(1), Dpr(1)):
            assert isinstance(option, QueryOption)

    def test_plain_objects_are_not(self):
        """Objects without to_query_pairs do not satisfy the protocol."""
        from ixurl.protocols import QueryOption

        assert not isinstance("w=1", QueryOption)

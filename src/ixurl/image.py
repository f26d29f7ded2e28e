"""Immutable image URL builder.

An ImageUrl holds a base URL (query and fragment stripped) plus one tuple of
options per family. Every builder call returns a new ImageUrl; nothing is
modified in place, so references can be shared and extended freely.

Example:
    >>> from ixurl import ImageUrl
    >>> from ixurl.options import Brightness, Height, Width
    >>>
    >>> url = (ImageUrl.parse("https://example.com/img.jpg?old=1#frag")
    ...     .size(Width(200), Height(200))
    ...     .adjust(Brightness(150)))
    >>> url.to_url()
    'https://example.com/img.jpg?h=200&w=200&bri=100&auto='
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any
from urllib.parse import SplitResult, urlsplit, urlunsplit

from ixurl.options import adjustment, automatic, pixel_density, rotation, size, stylize, text
from ixurl.options import format as output_format
from ixurl.protocols import QueryPair
from ixurl.query import group_pairs, to_query_string
from ixurl.tag import ImageTag

logger = logging.getLogger(__name__)


class Family(Enum):
    """Option families, declared in the order they are rendered."""

    SIZE = "size"
    ROTATION = "rotation"
    ADJUSTMENT = "adjustment"
    AUTOMATIC = "automatic"
    STYLIZE = "stylize"
    TEXT = "text"
    FORMAT = "format"
    PIXEL_DENSITY = "pixel_density"

    @property
    def field_name(self) -> str:
        """Name of the ImageUrl field storing this family's options."""
        return f"{self.value}_options"


# Family -> (base class every option must derive from, encoder)
_FAMILIES: dict[Family, tuple[type, Callable[[Sequence[Any]], list[QueryPair]]]] = {
    Family.SIZE: (size.SizeOption, size.encode),
    Family.ROTATION: (rotation.RotationOption, rotation.encode),
    Family.ADJUSTMENT: (adjustment.AdjustmentOption, adjustment.encode),
    Family.AUTOMATIC: (automatic.AutomaticOption, automatic.encode),
    Family.STYLIZE: (stylize.StylizeOption, stylize.encode),
    Family.TEXT: (text.TextOption, text.encode),
    Family.FORMAT: (output_format.FormatOption, output_format.encode),
    Family.PIXEL_DENSITY: (pixel_density.PixelDensityOption, pixel_density.encode),
}

RENDER_ORDER: tuple[Family, ...] = tuple(Family)


def family_of(option: Any) -> Family:
    """Find the family an option belongs to.

    :param option: Option instance
    :returns: Family whose base class the option derives from
    :raises TypeError: If the object is not an option of any family
    """
    for family, (base, _) in _FAMILIES.items():
        if isinstance(option, base):
            return family
    raise TypeError(f"Not an image option: {type(option).__name__}")


@dataclass(frozen=True)
class ImageUrl:
    """Base image URL plus accumulated transformation options.

    Option tuples are stored newest first and rendered in that order, so
    within a family the most recently applied option comes first.
    """

    base: SplitResult
    size_options: tuple[size.SizeOption, ...] = ()
    rotation_options: tuple[rotation.RotationOption, ...] = ()
    adjustment_options: tuple[adjustment.AdjustmentOption, ...] = ()
    automatic_options: tuple[automatic.AutomaticOption, ...] = ()
    stylize_options: tuple[stylize.StylizeOption, ...] = ()
    text_options: tuple[text.TextOption, ...] = ()
    format_options: tuple[output_format.FormatOption, ...] = ()
    pixel_density_options: tuple[pixel_density.PixelDensityOption, ...] = ()

    def __post_init__(self):
        if self.base.query or self.base.fragment:
            object.__setattr__(self, "base", self.base._replace(query="", fragment=""))

    @classmethod
    def parse(cls, url: str) -> ImageUrl:
        """Create an ImageUrl from a URL string.

        Any query string or fragment in the input is discarded.

        :param url: Absolute image URL (scheme and host required)
        :returns: ImageUrl with no options applied
        :raises ValueError: If the URL cannot be parsed or has no scheme or host
        """
        try:
            parts = urlsplit(url)
            # Accessing port validates it
            parts.port
        except ValueError as e:
            raise ValueError(f"Invalid image URL '{url}': {e}") from e

        if not parts.scheme or not parts.netloc:
            raise ValueError(f"Invalid image URL '{url}': scheme and host are required")

        if parts.query or parts.fragment:
            logger.debug("[ImageUrl] Discarding query/fragment from %s", url)
        return cls(base=parts)

    # ========================================================================
    # Accumulation
    # ========================================================================

    def options(self, family: Family) -> tuple[Any, ...]:
        """Stored options of one family, most recently applied first.

        :param family: Option family
        :returns: Tuple of options
        """
        return getattr(self, family.field_name)

    def add(self, family: Family, option: Any) -> ImageUrl:
        """Prepend one option to a family.

        :param family: Option family
        :param option: Option instance of that family
        :returns: New ImageUrl; self is unchanged
        :raises TypeError: If the option does not belong to the family
        """
        base, _ = _FAMILIES[family]
        if not isinstance(option, base):
            raise TypeError(
                f"{family.value}: expected {base.__name__}, got {type(option).__name__}"
            )
        return replace(self, **{family.field_name: (option,) + self.options(family)})

    def add_many(self, family: Family, options: Iterable[Any]) -> ImageUrl:
        """Add options one at a time, left to right.

        The last option of the batch ends up first in the stored tuple.

        :param family: Option family
        :param options: Options of that family
        :returns: New ImageUrl
        """
        result = self
        for option in options:
            result = result.add(family, option)
        return result

    def apply(self, *options: Any) -> ImageUrl:
        """Add options of any family, routing each by its type.

        :param options: Option instances from any family
        :returns: New ImageUrl
        :raises TypeError: If an argument is not an option

        Example:
            >>> from ixurl.presets import THUMBNAIL
            >>> thumb = ImageUrl.parse("https://example.com/a.png").apply(*THUMBNAIL)
        """
        result = self
        for option in options:
            result = result.add(family_of(option), option)
        return result

    def size(self, *options: size.SizeOption) -> ImageUrl:
        return self.add_many(Family.SIZE, options)

    def rotation(self, *options: rotation.RotationOption) -> ImageUrl:
        return self.add_many(Family.ROTATION, options)

    def adjust(self, *options: adjustment.AdjustmentOption) -> ImageUrl:
        return self.add_many(Family.ADJUSTMENT, options)

    def automatic(self, *options: automatic.AutomaticOption) -> ImageUrl:
        return self.add_many(Family.AUTOMATIC, options)

    def stylize(self, *options: stylize.StylizeOption) -> ImageUrl:
        return self.add_many(Family.STYLIZE, options)

    def text(self, *options: text.TextOption) -> ImageUrl:
        return self.add_many(Family.TEXT, options)

    def format(self, *options: output_format.FormatOption) -> ImageUrl:
        return self.add_many(Family.FORMAT, options)

    def pixel_density(self, *options: pixel_density.PixelDensityOption) -> ImageUrl:
        return self.add_many(Family.PIXEL_DENSITY, options)

    # ========================================================================
    # Rendering
    # ========================================================================

    def _encode_families(self) -> list[QueryPair]:
        pairs: list[QueryPair] = []
        for family in RENDER_ORDER:
            _, encoder = _FAMILIES[family]
            pairs.extend(encoder(self.options(family)))
        return pairs

    def to_query_pairs(self) -> list[QueryPair]:
        """Grouped query pairs in render order, before percent-encoding.

        :returns: Pairs with unique names
        """
        return group_pairs(self._encode_families())

    def to_url(self) -> str:
        """Render the final URL.

        Families are rendered as size, rotation, adjustment, automatic,
        stylize, text, format, pixel density. The automatic family always
        contributes an ``auto`` parameter, so the query is never absent.

        :returns: URL string
        """
        query = to_query_string(self._encode_families())
        url = urlunsplit(self.base._replace(query=query))
        logger.debug("[ImageUrl] Rendered %s", url)
        return url

    def to_image_tag(self, *attributes: tuple[str, str], **kw_attributes: str) -> ImageTag:
        """Describe an ``<img>`` element whose source is this URL.

        Caller attributes are passed through untouched; a caller-supplied
        ``src`` is not deduplicated against the generated one.

        :param attributes: (name, value) attribute pairs
        :param kw_attributes: Additional attributes as keywords
        :returns: ImageTag
        """
        passthrough = tuple(attributes) + tuple(kw_attributes.items())
        return ImageTag(src=self.to_url(), passthrough=passthrough)

    def __str__(self) -> str:
        return self.to_url()

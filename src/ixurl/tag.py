"""Embeddable ``<img>`` element description."""

from __future__ import annotations

import html
from dataclasses import dataclass


@dataclass(frozen=True)
class ImageTag:
    """An image element: generated source URL plus caller attributes.

    Caller attributes are kept verbatim and in order. They are not checked
    against ``src``; passing another ``src`` yields two of them.

    Example:
        >>> ImageTag("https://example.com/a.png?auto=", (("alt", "A & B"),)).to_html()
        '<img src="https://example.com/a.png?auto=" alt="A &amp; B" />'
    """

    src: str
    passthrough: tuple[tuple[str, str], ...] = ()

    @property
    def attributes(self) -> list[tuple[str, str]]:
        """All attributes, ``src`` first."""
        return [("src", self.src), *self.passthrough]

    def to_html(self) -> str:
        """Render as an HTML string with escaped attribute values.

        :returns: Self-closing ``<img>`` element
        """
        parts = ["<img"]
        for name, value in self.attributes:
            parts.append(f'{name}="{html.escape(str(value), quote=True)}"')
        parts.append("/>")
        return " ".join(parts)

    def __str__(self) -> str:
        return self.to_html()

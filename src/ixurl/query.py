"""Query assembly: grouping same-named pairs and serializing them.

Example:
    >>> group_pairs([("crop", "top"), ("crop", "left"), ("w", "100")])
    [('crop', 'top,left'), ('w', '100')]
    >>> to_query_string([("txt", "Hello world"), ("crop", "top,left")])
    'txt=Hello%20world&crop=top,left'
"""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import quote, urlencode

from ixurl.protocols import QueryPair

# Commas join grouped values; colons separate aspect ratio terms
SAFE_CHARS = ",:"


def group_pairs(pairs: Iterable[QueryPair]) -> list[QueryPair]:
    """Merge pairs that share a name.

    Distinct names keep the order of their first occurrence; each name's
    values are comma-joined in the order they were encountered.

    :param pairs: (name, value) pairs, names may repeat
    :returns: Pairs with unique names
    """
    grouped: dict[str, list[str]] = {}
    for name, value in pairs:
        grouped.setdefault(name, []).append(value)
    return [(name, ",".join(values)) for name, values in grouped.items()]


def to_query_string(pairs: Iterable[QueryPair]) -> str:
    """Group pairs and percent-encode them as a URL query string.

    Spaces become ``%20`` rather than ``+``.

    :param pairs: (name, value) pairs, names may repeat
    :returns: ``name=value`` entries joined by ``&``
    """
    return urlencode(group_pairs(pairs), safe=SAFE_CHARS, quote_via=quote)

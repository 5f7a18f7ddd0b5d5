"""Utilities for working with strings."""

from __future__ import annotations

__all__ = [
    "split",
]


def split(text: str, *, sep: str = ":") -> tuple[str | None, str]:
    """Split a compact identifier string on its first separator.

    :param text: A string that might contain a separator
    :param sep: The separator
    :returns: A pair of the prefix and the reference. The prefix is ``None``
        when the string has no separator at all. Note that a leading separator
        gives the empty string as the prefix, which is not the same as no prefix.

    >>> split("foaf:Person")
    ('foaf', 'Person')
    >>> split("Person")
    (None, 'Person')
    >>> split(":Person")
    ('', 'Person')
    >>> split("a:b:c")
    ('a', 'b:c')
    """
    prefix, delimiter, reference = text.partition(sep)
    if not delimiter:
        return None, text
    return prefix, reference

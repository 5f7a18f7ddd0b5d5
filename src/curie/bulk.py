"""Bulk processing utilities."""

from typing import Any, Iterable, Sequence, Tuple

from .api import PrefixMapping

__all__ = [
    "stream_expand",
    "stream_shrink",
]


def stream_shrink(
    mapping: PrefixMapping, records: Iterable[Sequence[Any]], idx: int
) -> Iterable[Tuple[Any, ...]]:
    """Compress the full identifier in the given position of each record."""
    for record in records:
        yield *record[:idx], mapping.compress(record[idx]), *record[idx + 1 :]


def stream_expand(
    mapping: PrefixMapping, records: Iterable[Sequence[Any]], idx: int
) -> Iterable[Tuple[Any, ...]]:
    """Expand the compact identifier in the given position of each record.

    :param mapping: A prefix registry
    :param records: An iterable of records, such as rows from a CSV file
    :param idx: The position in each record holding a compact identifier
    :yields: Tuples with the compact identifier in position ``idx`` expanded
    :raises curie.ExpansionError: if any compact identifier can't be expanded
    """
    for record in records:
        yield *record[:idx], mapping.expand_string(record[idx]), *record[idx + 1 :]

# -*- coding: utf-8 -*-

"""Expansion and contraction of compact URIs (CURIEs) with a prefix registry."""

from .api import (
    RESERVED_PREFIX,
    CompressionError,
    Curie,
    CURIEError,
    ExpansionError,
    InvalidPrefixError,
    MissingDefaultError,
    NoMappingFoundError,
    PrefixMapping,
    ReservedPrefixError,
    load_prefix_map,
)
from .bulk import stream_expand, stream_shrink
from .version import get_version

__all__ = [
    "PrefixMapping",
    "Curie",
    "RESERVED_PREFIX",
    "load_prefix_map",
    "get_version",
    # errors
    "CURIEError",
    "ReservedPrefixError",
    "ExpansionError",
    "InvalidPrefixError",
    "MissingDefaultError",
    "CompressionError",
    "NoMappingFoundError",
    # bulk
    "stream_expand",
    "stream_shrink",
]

"""Version information for :mod:`curie`."""

__all__ = [
    "VERSION",
    "get_version",
]

VERSION = "0.5.0"


def get_version() -> str:
    """Get the :mod:`curie` version string."""
    return VERSION

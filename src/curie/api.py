"""Data structures and algorithms for :mod:`curie`."""

from __future__ import annotations

import logging
from collections.abc import ItemsView, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pytrie import StringTrie
from typing_extensions import Self

from .utils import split

__all__ = [
    "CURIEError",
    "CompressionError",
    "Curie",
    "ExpansionError",
    "InvalidPrefixError",
    "MissingDefaultError",
    "NoMappingFoundError",
    "PrefixMapping",
    "RESERVED_PREFIX",
    "ReservedPrefixError",
    "load_prefix_map",
]

logger = logging.getLogger(__name__)

#: The prefix name that can never be registered in a :class:`PrefixMapping`
RESERVED_PREFIX = "_"


class CURIEError(ValueError):
    """The base class for errors raised by :mod:`curie`."""


class ReservedPrefixError(CURIEError):
    """An error raised when trying to register the reserved prefix."""

    def __init__(self, prefix: str) -> None:
        """Initialize the error."""
        self.prefix = prefix

    def __str__(self) -> str:
        return f"the prefix `{self.prefix}` is reserved and can not be registered"


class ExpansionError(CURIEError):
    """An error raised on expansion."""


class InvalidPrefixError(ExpansionError):
    """An error raised on expansion if the prefix can't be looked up."""

    def __init__(self, prefix: str) -> None:
        """Initialize the error."""
        self.prefix = prefix

    def __str__(self) -> str:
        return f"no base is registered for the prefix `{self.prefix}`"


class MissingDefaultError(ExpansionError):
    """An error raised on expansion of an unprefixed reference when no default base is set."""

    def __init__(self, reference: str) -> None:
        """Initialize the error."""
        self.reference = reference

    def __str__(self) -> str:
        return f"can not expand `{self.reference}` since no default base is set"


class CompressionError(CURIEError):
    """An error raised on compression."""


class NoMappingFoundError(CompressionError):
    """An error raised on compression if no base can be matched."""

    def __init__(self, identifier: str) -> None:
        """Initialize the error."""
        self.identifier = identifier

    def __str__(self) -> str:
        return f"no registered base nor the default base is a prefix of `{self.identifier}`"


class Curie(BaseModel):
    """A compact identifier, made of an optional prefix and a reference.

    A missing prefix means that the default base should be used for expansion.
    This is different from the empty string prefix, which is looked up like
    any other prefix.

    A compact identifier can be constructed several ways:

    >>> Curie(prefix="foaf", reference="Person")
    Curie(prefix='foaf', reference='Person')

    >>> Curie(reference="Person")
    Curie(prefix=None, reference='Person')

    >>> Curie.from_string("foaf:Person")
    Curie(prefix='foaf', reference='Person')

    >>> Curie.from_string(":Person")
    Curie(prefix='', reference='Person')

    It can be formatted in its canonical form with :func:`str` or
    the ``curie`` attribute:

    >>> str(Curie(prefix="foaf", reference="Person"))
    'foaf:Person'
    >>> Curie(reference="Person").curie
    'Person'

    Instances are frozen, so they can be hashed and put in sets.
    """

    prefix: str | None = Field(
        default=None,
        description="The prefix used in a compact URI (CURIE). If missing, the default base applies.",
    )
    reference: str = Field(..., description="The local part of a compact URI (CURIE).")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    def _parse_from_string(cls, values: str | dict[str, Any]) -> dict[str, Any]:  # noqa:N805
        if isinstance(values, str):
            prefix, reference = split(values)
            return {"prefix": prefix, "reference": reference}
        return values

    def __str__(self) -> str:
        return self.curie

    def __hash__(self) -> int:
        return hash((self.prefix, self.reference))

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Curie)
            and self.prefix == other.prefix
            and self.reference == other.reference
        )

    def __lt__(self, other: Any) -> bool:
        """Sort unprefixed identifiers first, then lexically by prefix and reference."""
        if not isinstance(other, Curie):
            return NotImplemented
        return self._sort_key < other._sort_key

    @property
    def _sort_key(self) -> tuple[bool, str, str]:
        return self.prefix is not None, self.prefix or "", self.reference

    @property
    def curie(self) -> str:
        """Get the canonical string form.

        >>> Curie(prefix="", reference="Person").curie
        ':Person'
        """
        return self.format()

    def format(self, sep: str = ":") -> str:
        """Format the compact identifier using the given separator.

        :param sep: The separator placed between the prefix and the reference
        :returns: The prefix, separator, and reference, or only the reference
            if there's no prefix

        >>> Curie(prefix="foaf", reference="Person").format("|")
        'foaf|Person'
        """
        if self.prefix is None:
            return self.reference
        return f"{self.prefix}{sep}{self.reference}"

    @classmethod
    def from_string(cls, text: str, *, sep: str = ":") -> Self:
        """Parse a string by splitting on its first separator.

        :param text: A string representation of a compact URI (CURIE)
        :param sep: The separator
        :returns: A compact identifier. If there's no separator, the prefix is missing.

        >>> Curie.from_string("Person")
        Curie(prefix=None, reference='Person')
        """
        prefix, reference = split(text, sep=sep)
        return cls(prefix=prefix, reference=reference)


class PrefixMapping:
    """A registry of prefixes and their bases, with an optional default base.

    .. code-block::

        >>> mapping = PrefixMapping()
        >>> mapping.add_prefix("foaf", "http://xmlns.com/foaf/0.1/")
        >>> mapping.expand_string("foaf:Person")
        'http://xmlns.com/foaf/0.1/Person'
        >>> mapping.shrink("http://xmlns.com/foaf/0.1/Person")
        Curie(prefix='foaf', reference='Person')

    Registries are plain mutable objects. Sharing one between threads requires
    external locking.
    """

    #: The separator between prefixes and references
    delimiter: str

    def __init__(self, default: str | None = None, *, delimiter: str = ":") -> None:
        """Instantiate a registry.

        :param default:
            The base used for references without a prefix. If you plan to set it
            later, use :meth:`set_default`.
        :param delimiter:
            The delimiter used for CURIEs. Defaults to a colon.
        """
        self.delimiter = delimiter
        self._default = default
        self._mapping: dict[str, str] = {}
        self._trie: StringTrie | None = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(default={self._default!r}, prefixes={self._mapping!r})"

    def __len__(self) -> int:
        return len(self._mapping)

    def __contains__(self, prefix: Any) -> bool:
        return prefix in self._mapping

    @classmethod
    def from_prefix_map(
        cls, prefix_map: Mapping[str, str], default: str | None = None, **kwargs: Any
    ) -> Self:
        """Get a registry from a simple prefix map.

        :param prefix_map:
            A mapping whose keys are prefixes and whose values are the bases
            that get prepended to references during expansion
        :param default:
            The base used for references without a prefix
        :param kwargs:
            Keyword arguments to pass to the constructor
        :returns: A registry
        :raises ReservedPrefixError: if the prefix map contains the reserved prefix

        >>> mapping = PrefixMapping.from_prefix_map(
        ...     {
        ...         "foaf": "http://xmlns.com/foaf/0.1/",
        ...         "rdfs": "http://www.w3.org/2000/01/rdf-schema#",
        ...     },
        ...     default="http://example.com/",
        ... )
        >>> mapping.expand_string("rdfs:label")
        'http://www.w3.org/2000/01/rdf-schema#label'
        >>> mapping.expand_string("Person")
        'http://example.com/Person'
        """
        if RESERVED_PREFIX in prefix_map:
            raise ReservedPrefixError(RESERVED_PREFIX)
        rv = cls(default, **kwargs)
        for prefix, base in prefix_map.items():
            rv.add_prefix(prefix, base)
        return rv

    @property
    def default(self) -> str | None:
        """Get the default base, if set."""
        return self._default

    @property
    def trie(self) -> StringTrie:
        """Get a trie from bases to prefixes, used for longest-prefix matching."""
        if self._trie is None:
            reverse: dict[str, str] = {}
            for prefix, base in self._mapping.items():
                reverse.setdefault(base, prefix)
            self._trie = StringTrie(reverse)
        return self._trie

    def set_default(self, base: str | None) -> None:
        """Replace the default base. Passing ``None`` clears it."""
        if self._default is not None:
            logger.debug("replacing default base %s with %s", self._default, base)
        self._default = base

    def add_prefix(self, prefix: str, base: str) -> None:
        """Register a base for the prefix, overwriting any existing one.

        :param prefix: The prefix, e.g., ``foaf``. The empty string is a valid prefix.
        :param base: The base, e.g., ``http://xmlns.com/foaf/0.1/``
        :raises ReservedPrefixError: if the prefix is reserved. The registry is left unchanged.
        """
        if prefix == RESERVED_PREFIX:
            raise ReservedPrefixError(prefix)
        existing = self._mapping.get(prefix)
        if existing is not None and existing != base:
            logger.debug("[%s] overwriting base %s with %s", prefix, existing, base)
        self._mapping[prefix] = base
        self._trie = None

    def remove_prefix(self, prefix: str) -> None:
        """Remove the prefix, if it's registered."""
        if self._mapping.pop(prefix, None) is not None:
            logger.debug("[%s] removed prefix", prefix)
            self._trie = None

    def mappings(self) -> ItemsView[str, str]:
        """Get a view over the registered pairs of prefixes and bases.

        The view can be iterated several times and reflects later changes to
        the registry. It does not include the default base.
        """
        return self._mapping.items()

    def get_prefixes(self) -> set[str]:
        """Get the set of registered prefixes."""
        return set(self._mapping)

    def get_prefix_value(self, prefix: str) -> str | None:
        """Get the base registered for the prefix, if it exists."""
        return self._mapping.get(prefix)

    def get_prefix_for_value(self, base: str) -> str | None:
        """Get the first prefix registered for exactly the given base, if it exists.

        >>> mapping = PrefixMapping.from_prefix_map({"foaf": "http://xmlns.com/foaf/0.1/"})
        >>> mapping.get_prefix_for_value("http://xmlns.com/foaf/0.1/")
        'foaf'
        >>> mapping.get_prefix_for_value("http://xmlns.com/foaf/0.1/Person") is None
        True
        """
        return next((prefix for prefix, value in self._mapping.items() if value == base), None)

    def expand_string(self, text: str) -> str:
        """Expand a string by splitting it on its first delimiter.

        :param text: A string representing a compact URI (CURIE), with or without a prefix
        :returns: The base concatenated with the reference
        :raises InvalidPrefixError: if the prefix (including the empty prefix) is not registered
        :raises MissingDefaultError: if there's no delimiter and there's no default base

        >>> mapping = PrefixMapping(default="http://example.com/")
        >>> mapping.expand_string("Person")
        'http://example.com/Person'

        An empty prefix is looked up like any other prefix, and doesn't fall back
        to the default base:

        >>> mapping.expand_string(":Person")
        Traceback (most recent call last):
        ...
        curie.api.InvalidPrefixError: no base is registered for the prefix ``
        """
        return self.expand_structured(Curie.from_string(text, sep=self.delimiter))

    def expand_structured(self, curie: Curie) -> str:
        """Expand a pre-parsed compact identifier.

        :param curie: A compact identifier
        :returns: The base concatenated with the reference
        :raises InvalidPrefixError: if the prefix is not registered
        :raises MissingDefaultError: if the prefix is missing and there's no default base
        """
        if curie.prefix is None:
            if self._default is None:
                raise MissingDefaultError(curie.reference)
            return self._default + curie.reference
        base = self._mapping.get(curie.prefix)
        if base is None:
            raise InvalidPrefixError(curie.prefix)
        return base + curie.reference

    def shrink(self, identifier: str, *, longest: bool = False) -> Curie:
        """Shrink a full identifier into a compact identifier.

        :param identifier: A full identifier, e.g., a URI
        :param longest:
            If false (default), the first registered base, in registration order,
            that is a prefix of the identifier gets used. If true, the longest
            registered base that is a prefix of the identifier gets used.
        :returns: A compact identifier. If the default base matches, it has no prefix.
        :raises NoMappingFoundError: if neither the default base nor any registered base matches

        The default base is always checked first:

        >>> mapping = PrefixMapping(default="http://example.com/")
        >>> mapping.add_prefix("ex", "http://example.com/ns#")
        >>> mapping.shrink("http://example.com/ns#Person")
        Curie(prefix=None, reference='ns#Person')

        When bases overlap, the first match is used unless ``longest`` is set:

        >>> mapping = PrefixMapping()
        >>> mapping.add_prefix("obo", "http://purl.obolibrary.org/obo/")
        >>> mapping.add_prefix("GO", "http://purl.obolibrary.org/obo/GO_")
        >>> mapping.shrink("http://purl.obolibrary.org/obo/GO_0032571")
        Curie(prefix='obo', reference='GO_0032571')
        >>> mapping.shrink("http://purl.obolibrary.org/obo/GO_0032571", longest=True)
        Curie(prefix='GO', reference='0032571')
        """
        if self._default is not None and identifier.startswith(self._default):
            return Curie(reference=identifier[len(self._default) :])
        if longest:
            try:
                base, prefix = self.trie.longest_prefix_item(identifier)
            except KeyError:
                raise NoMappingFoundError(identifier) from None
            return Curie(prefix=prefix, reference=identifier[len(base) :])
        for prefix, base in self._mapping.items():
            if identifier.startswith(base):
                return Curie(prefix=prefix, reference=identifier[len(base) :])
        raise NoMappingFoundError(identifier)

    def compress(self, identifier: str, *, longest: bool = False) -> str:
        """Shrink a full identifier and format it as a string with this registry's delimiter.

        >>> mapping = PrefixMapping.from_prefix_map({"foaf": "http://xmlns.com/foaf/0.1/"})
        >>> mapping.compress("http://xmlns.com/foaf/0.1/Person")
        'foaf:Person'
        """
        return self.shrink(identifier, longest=longest).format(self.delimiter)


def load_prefix_map(
    prefix_map: Mapping[str, str], default: str | None = None, **kwargs: Any
) -> PrefixMapping:
    """Get a registry from a simple prefix map.

    This is a wrapper around :meth:`PrefixMapping.from_prefix_map`.
    """
    return PrefixMapping.from_prefix_map(prefix_map, default=default, **kwargs)

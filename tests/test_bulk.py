"""Test bulk processing utilities."""

import unittest

from curie import (
    InvalidPrefixError,
    NoMappingFoundError,
    PrefixMapping,
    stream_expand,
    stream_shrink,
)

FOAF = "http://xmlns.com/foaf/0.1/"


class TestStream(unittest.TestCase):
    """Test streaming over records."""

    def setUp(self) -> None:
        """Set up a registry."""
        self.mapping = PrefixMapping.from_prefix_map({"foaf": FOAF}, default="http://example.com/")

    def test_expand(self) -> None:
        """Test expanding a column."""
        rows = [("1", "foaf:Person", "x"), ("2", "Thing", "y")]
        self.assertEqual(
            [
                ("1", "http://xmlns.com/foaf/0.1/Person", "x"),
                ("2", "http://example.com/Thing", "y"),
            ],
            list(stream_expand(self.mapping, rows, 1)),
        )
        with self.assertRaises(InvalidPrefixError):
            list(stream_expand(self.mapping, [("rdfs:label",)], 0))

    def test_shrink(self) -> None:
        """Test compressing a column."""
        rows = [
            ["http://xmlns.com/foaf/0.1/Person", "x"],
            ["http://example.com/Thing", "y"],
        ]
        self.assertEqual(
            [("foaf:Person", "x"), ("Thing", "y")],
            list(stream_shrink(self.mapping, rows, 0)),
        )
        with self.assertRaises(NoMappingFoundError):
            list(stream_shrink(self.mapping, [("http://example.org/nope",)], 0))

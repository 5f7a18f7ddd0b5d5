"""Trivial version test."""

import unittest

import curie
from curie.version import VERSION, get_version


class TestVersion(unittest.TestCase):
    """Trivially test a version."""

    def test_version_type(self) -> None:
        """Test the version is a string."""
        self.assertIsInstance(get_version(), str)
        self.assertEqual(VERSION, curie.get_version())

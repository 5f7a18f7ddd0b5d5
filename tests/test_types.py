"""Test the compact identifier type."""

import unittest

from pydantic import BaseModel, ValidationError

from curie import Curie


class WrappedCurie(BaseModel):
    """A model wrapping a compact identifier."""

    curie: Curie


class TestCurie(unittest.TestCase):
    """Test compact identifiers."""

    def test_from_string(self) -> None:
        """Test parsing compact identifiers."""
        self.assertEqual(Curie(prefix="foaf", reference="Person"), Curie.from_string("foaf:Person"))
        self.assertEqual(Curie(prefix=None, reference="Person"), Curie.from_string("Person"))
        self.assertEqual(Curie(prefix="", reference="Person"), Curie.from_string(":Person"))
        self.assertEqual(Curie(prefix="a1", reference="b2:c3"), Curie.from_string("a1:b2:c3"))
        self.assertEqual(Curie(prefix="p1", reference=""), Curie.from_string("p1:"))
        self.assertEqual(Curie(prefix="p1", reference="x"), Curie.from_string("p1|x", sep="|"))

    def test_empty_prefix_is_not_missing(self) -> None:
        """Test the empty prefix and a missing prefix are different."""
        self.assertNotEqual(Curie(prefix="", reference="Person"), Curie(reference="Person"))

    def test_format(self) -> None:
        """Test formatting compact identifiers."""
        self.assertEqual("foaf:Person", str(Curie(prefix="foaf", reference="Person")))
        self.assertEqual("Person", str(Curie(reference="Person")))
        self.assertEqual(":Person", Curie(prefix="", reference="Person").curie)
        self.assertEqual("foaf/Person", Curie(prefix="foaf", reference="Person").format("/"))
        self.assertEqual("Person", Curie(reference="Person").format("/"))

    def test_string_round_trip(self) -> None:
        """Test the canonical form parses back to the same compact identifier."""
        for curie in [
            Curie(prefix="foaf", reference="Person"),
            Curie(prefix="", reference="Person"),
            Curie(reference="Person"),
        ]:
            with self.subTest(curie=curie.curie):
                self.assertEqual(curie, Curie.from_string(str(curie)))

    def test_frozen(self) -> None:
        """Test compact identifiers can't be changed."""
        curie = Curie(prefix="foaf", reference="Person")
        with self.assertRaises(ValidationError):
            curie.reference = "Agent"  # type:ignore[misc]

    def test_set_membership(self) -> None:
        """Test membership in sets."""
        collection = {
            Curie.from_string("foaf:Person"),
            Curie.from_string("Person"),
        }
        self.assertIn(Curie(prefix="foaf", reference="Person"), collection)
        self.assertIn(Curie(reference="Person"), collection)
        self.assertNotIn(Curie(prefix="", reference="Person"), collection)
        self.assertNotIn(Curie(prefix="foaf", reference="Agent"), collection)

    def test_compare_other_type(self) -> None:
        """Test ordering against other types raises a type error."""
        with self.assertRaises(TypeError):
            Curie(reference="a") < "a"  # noqa:B015
        with self.assertRaises(TypeError):
            sorted([Curie(reference="a"), "a"])

    def test_sort(self) -> None:
        """Test sorting puts unprefixed identifiers first."""
        start = [
            Curie.from_string("foaf:Person"),
            Curie.from_string("Person"),
            Curie.from_string(":Person"),
            Curie.from_string("foaf:Agent"),
        ]
        expected = [
            Curie.from_string("Person"),
            Curie.from_string(":Person"),
            Curie.from_string("foaf:Agent"),
            Curie.from_string("foaf:Person"),
        ]
        self.assertEqual(expected, sorted(start))

    def test_wrapped(self) -> None:
        """Test validating a compact identifier from a string inside another model."""
        model = WrappedCurie.model_validate({"curie": "foaf:Person"})
        self.assertEqual(Curie(prefix="foaf", reference="Person"), model.curie)

        model = WrappedCurie.model_validate({"curie": "Person"})
        self.assertIsNone(model.curie.prefix)

        model = WrappedCurie.model_validate({"curie": {"prefix": "foaf", "reference": "Person"}})
        self.assertEqual("foaf:Person", model.curie.curie)

        with self.assertRaises(ValidationError):
            WrappedCurie.model_validate({"curie": {"prefix": "foaf"}})

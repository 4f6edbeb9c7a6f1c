"""
Unit tests for direct field access.
"""

import pytest

from pojo_kit.utilities.backing_store import BackingStore, candidate_fields, to_snake_case
from pojo_kit.utilities.errors import ReflectiveAccessFailure
from tests.fixtures.pojos import Circle, FrozenQuote, LegacyBean, Point, Product, Registered, Vault


class TestCandidateFields:
    """Test cases for field name candidates."""

    def test_snake_case(self):
        """Test camel-case names are converted."""
        assert to_snake_case("firstName") == "first_name"
        assert to_snake_case("name") == "name"

    def test_candidates_order(self):
        """Test the public name comes first, then private and mangled forms."""
        candidates = candidate_fields(Vault, "secret")
        assert candidates[:3] == ["secret", "_secret", "_Vault__secret"]

    def test_camel_case_candidates(self):
        """Test snake-case variants follow the literal name."""
        candidates = candidate_fields(LegacyBean, "firstName")
        assert candidates.index("firstName") < candidates.index("first_name")
        assert "_first_name" in candidates


class TestBackingStore:
    """Test cases for BackingStore."""

    def test_private_field(self):
        """Test a property backed by an underscore field."""
        product = Product("widget", "10")
        store = BackingStore(Product)

        assert store.locate(product, "name") == "_name"
        store.write(product, "name", "gadget")
        assert product.name == "gadget"
        assert store.read(product, "price") == "10"

    def test_frozen_dataclass(self):
        """Test writes bypass frozen dataclass assignment."""
        quote = FrozenQuote("BTC", 1.0, 2.0)
        BackingStore(FrozenQuote).write(quote, "bid", 3.5)
        assert quote.get_bid() == 3.5

    def test_slots(self):
        """Test slot members count as storage."""
        point = Point(1, 2)
        store = BackingStore(Point)

        assert store.locate(point, "x") == "_x"
        store.write(point, "y", 9)
        assert point.y == 9

    def test_name_mangled_field(self):
        """Test double-underscore fields are found through mangling."""
        vault = Vault()
        BackingStore(Vault).write(vault, "secret", "hidden")
        assert vault.get_secret() == "hidden"

    def test_missing_field(self):
        """Test a derived property with no storage raises."""
        store = BackingStore(Circle)
        circle = Circle(2.0)

        with pytest.raises(ReflectiveAccessFailure) as exc_info:
            store.locate(circle, "area")
        assert exc_info.value.member == "area"
        assert "Circle" in str(exc_info.value)

    def test_registered_field(self):
        """Test an explicit field name is used as given."""
        record = Registered()
        store = BackingStore(Registered)

        store.write(record, "value", 5, field_name="_v")
        assert record.value() == 5
        assert store.read(record, "value", field_name="_v") == 5

    def test_registered_field_on_slots_must_exist(self):
        """Test an explicit field on a slotted class must be a slot."""
        with pytest.raises(ReflectiveAccessFailure):
            BackingStore(Point).locate(Point(), "x", field_name="_z")

"""Unit tests for the in-memory Catalog."""

import pytest

from shelfpos.domain.exceptions import EntityNotFoundError, ValidationError
from shelfpos.domain.model.catalog import Catalog
from shelfpos.domain.model.item import Item
from shelfpos.domain.model.value_objects import Money


def _catalog() -> Catalog:
    return Catalog([
        Item("P1", "Rice 1kg", "Grocery", 10, Money.of("55.00")),
        Item("P2", "Brown Rice 2kg", "Grocery", 4, Money.of("130.00")),
        Item("S1", "Bath Soap", "Toiletries", 20, Money.of("25.50")),
    ])


class TestCatalogLookup:

    def test_get_by_id(self):
        assert _catalog().get("S1").name == "Bath Soap"

    def test_get_unknown_returns_none(self):
        assert _catalog().get("nope") is None

    def test_find_by_id_any_case(self):
        assert _catalog().find("p2").id == "P2"

    def test_find_by_full_name_any_case(self):
        assert _catalog().find("rice 1KG").id == "P1"

    def test_search_matches_name_fragment(self):
        assert [i.id for i in _catalog().search("rice")] == ["P1", "P2"]

    def test_categories_keep_first_seen_order(self):
        assert _catalog().categories() == ["Grocery", "Toiletries"]

    def test_in_category_ignores_case(self):
        assert [i.id for i in _catalog().in_category("toiletries")] == ["S1"]


class TestCatalogMutation:

    def test_duplicate_id_rejected(self):
        catalog = _catalog()
        with pytest.raises(ValidationError, match="already exists"):
            catalog.add(Item("P1", "Other", "Misc", 1, Money.of("1")))
        assert len(catalog) == 3

    def test_update_keeps_fields_left_out(self):
        catalog = _catalog()
        item = catalog.update("P1", price=Money.of("60.00"))
        assert item.price == Money.of("60.00")
        assert item.name == "Rice 1kg"
        assert item.quantity == 10

    def test_update_rejects_negative_stock(self):
        with pytest.raises(ValidationError):
            _catalog().update("P1", quantity=-5)

    def test_update_unknown_rejected(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            _catalog().update("X9", name="Ghost")

    def test_remove(self):
        catalog = _catalog()
        catalog.remove("P2")
        assert catalog.get("P2") is None
        assert len(catalog) == 2

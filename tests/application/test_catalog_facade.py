"""Integration tests for the catalog facade.

Uses the in-memory registries directly — they have no side effects.
"""

import logging

import pytest

from patterns.application.catalog_facade import CatalogFacade
from patterns.domain.exceptions import ValidationError
from patterns.domain.model.value_objects import Money
from patterns.infrastructure.persistence.in_memory_registry import InMemoryRegistry

FACADE_LOGGER = "patterns.application.catalog_facade"


def _setup() -> tuple[CatalogFacade, InMemoryRegistry, InMemoryRegistry, InMemoryRegistry]:
    items, bundles, discounts = InMemoryRegistry(), InMemoryRegistry(), InMemoryRegistry()
    return CatalogFacade(items, bundles, discounts), items, bundles, discounts


class TestAddProduct:

    def test_registers_product(self):
        facade, items, _, _ = _setup()
        item = facade.add_product("Widget", "A", "10")
        assert items.find("A") is item
        assert item.price == Money.of("10")

    def test_listing_keeps_insertion_order_with_duplicates(self):
        facade, _, _, _ = _setup()
        facade.add_product("Widget", "A", "10")
        facade.add_product("Gadget", "B", 5)
        facade.add_product("Widget v2", "A", "12")

        lines = facade.list_products()
        assert [(l.code, l.name, l.price) for l in lines] == [
            ("A", "Widget", "$10.00"),
            ("B", "Gadget", "$5.00"),
            ("A", "Widget v2", "$12.00"),
        ]

    def test_invalid_price_rejected(self):
        facade, items, _, _ = _setup()
        with pytest.raises(ValidationError, match="Invalid money amount"):
            facade.add_product("Widget", "A", "cheap")
        assert len(items) == 0


class TestAddBundle:

    def test_skips_unknown_codes(self, caplog):
        facade, _, bundles, _ = _setup()
        item = facade.add_product("Widget", "A", "10")

        with caplog.at_level(logging.WARNING, logger=FACADE_LOGGER):
            bundle = facade.add_bundle("Combo", "B1", ["A", "Z"])

        assert bundle.children == (item,)
        assert bundle.price == Money.of("10")
        assert bundles.find("B1") is bundle
        assert len(caplog.records) == 1
        assert "Z" in caplog.records[0].getMessage()

    def test_registered_even_without_children(self, caplog):
        facade, _, bundles, _ = _setup()
        with caplog.at_level(logging.WARNING, logger=FACADE_LOGGER):
            bundle = facade.add_bundle("Empty", "B1", ["X", "Y"])

        assert bundles.find("B1") is bundle
        assert bundle.price == Money.zero()
        assert len(caplog.records) == 2

    def test_only_products_are_valid_children(self, caplog):
        facade, _, _, _ = _setup()
        facade.add_bundle("Inner", "B1", [])
        with caplog.at_level(logging.WARNING, logger=FACADE_LOGGER):
            outer = facade.add_bundle("Outer", "B2", ["B1"])
        assert outer.children == ()
        assert "B1" in caplog.text

    def test_listing(self):
        facade, _, _, _ = _setup()
        facade.add_product("Widget", "A", "10")
        facade.add_product("Gadget", "B", "5")
        facade.add_bundle("Combo", "B1", ["A", "B"])

        [line] = facade.list_bundles()
        assert line.code == "B1"
        assert line.name == "Combo"
        assert line.item_count == 2
        assert line.price == "$15.00"
        assert line.details.startswith("Bundle: Combo\n")


class TestAddDiscount:

    def test_discounted_price(self):
        facade, _, _, discounts = _setup()
        facade.add_product("Widget", "A", "100")

        adapter = facade.add_discount("Sale", 20, "A")

        assert adapter is not None
        assert adapter.price == Money.of("80")
        assert discounts.find("A") is adapter

    def test_over_hundred_percent_preserved(self):
        facade, _, _, _ = _setup()
        facade.add_product("Widget", "A", "100")
        adapter = facade.add_discount("Over", 150, "A")
        assert adapter.price == Money.of("-50")
        assert str(adapter.price) == "-$50.00"

    def test_over_hundred_percent_on_free_product_lists_unsigned_zero(self):
        facade, _, _, _ = _setup()
        facade.add_product("Free", "F", "0")
        facade.add_discount("Over", 150, "F")

        [line] = facade.list_discounts()
        assert line.price == "$0.00"

    def test_unknown_product_registers_nothing(self, caplog):
        facade, _, _, discounts = _setup()
        with caplog.at_level(logging.WARNING, logger=FACADE_LOGGER):
            result = facade.add_discount("Sale", 20, "A")

        assert result is None
        assert len(discounts) == 0
        assert "No product found with code A" in caplog.text

    def test_removed_product_cannot_be_discounted(self, caplog):
        facade, _, _, _ = _setup()
        facade.add_product("Widget", "A", "100")
        facade.remove_product("A")

        with caplog.at_level(logging.WARNING, logger=FACADE_LOGGER):
            result = facade.add_discount("Sale", 20, "A")

        assert result is None
        assert facade.list_discounts() == []
        assert len(caplog.records) == 1
        assert "discount not added" in caplog.text

    def test_invalid_rate_rejected(self):
        facade, _, _, _ = _setup()
        facade.add_product("Widget", "A", "100")
        with pytest.raises(ValidationError, match="Invalid percentage"):
            facade.add_discount("Sale", "half", "A")

    def test_listing(self):
        facade, _, _, _ = _setup()
        facade.add_product("Widget", "A", "100")
        facade.add_discount("Sale", "20", "A")

        [line] = facade.list_discounts()
        assert line.code == "A"
        assert line.offer_name == "Sale"
        assert line.discount == "20%"
        assert line.price == "$80.00"
        assert line.details == "Special Offer: Sale (Discount: 20%) - product code: A"


class TestRemoveProduct:

    def test_removes_all_matches(self):
        facade, items, _, _ = _setup()
        first = facade.add_product("Widget", "A", "10")
        facade.add_product("Widget v2", "A", "12")

        assert facade.remove_product("A") is first
        assert items.find("A") is None
        assert facade.list_products() == []

    def test_missing_logs_warning(self, caplog):
        facade, _, _, _ = _setup()
        with caplog.at_level(logging.WARNING, logger=FACADE_LOGGER):
            assert facade.remove_product("Z") is None
        assert "nothing removed" in caplog.text

    def test_existing_bundles_and_offers_keep_their_products(self):
        facade, _, _, _ = _setup()
        facade.add_product("Widget", "A", "10")
        bundle = facade.add_bundle("Combo", "B1", ["A"])
        offer = facade.add_discount("Sale", 50, "A")

        facade.remove_product("A")

        assert bundle.price == Money.of("10")
        assert offer.price == Money.of("5")


class TestEmptyListings:

    def test_all_listings_empty(self):
        facade, _, _, _ = _setup()
        assert facade.list_products() == []
        assert facade.list_bundles() == []
        assert facade.list_discounts() == []

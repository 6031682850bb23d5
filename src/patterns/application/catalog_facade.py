"""Application service: the catalog facade.

One object coordinates the three registries (products, bundles and
discounts). The shell talks only to this class.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from patterns.application.dto import BundleLineDTO, DiscountLineDTO, ProductLineDTO
from patterns.domain.model.catalog import (
    Bundle,
    CatalogItem,
    DiscountedItemAdapter,
    SpecialOffer,
)
from patterns.domain.model.value_objects import Money, Percentage
from patterns.domain.repository.component_registry import ComponentRegistry

logger = logging.getLogger(__name__)


class CatalogFacade:

    def __init__(
        self,
        items: ComponentRegistry[CatalogItem],
        bundles: ComponentRegistry[Bundle],
        discounts: ComponentRegistry[DiscountedItemAdapter],
    ) -> None:
        self._items = items
        self._bundles = bundles
        self._discounts = discounts

    # --- Commands -------------------------------------------------------------

    def add_product(
        self, name: str, code: str, price: str | float | int | Decimal
    ) -> CatalogItem:
        """Register a new product. Duplicate codes are accepted."""
        item = CatalogItem(code=code, name=name, price=Money.of(price))
        self._items.add(item)
        logger.debug("Added product %s (%s) at %s", code, name, item.price)
        return item

    def add_bundle(self, name: str, code: str, child_codes: Iterable[str]) -> Bundle:
        """Create a bundle from existing product codes.

        Unknown codes are logged and skipped; the bundle is registered
        even when none of the codes resolve.
        """
        bundle = Bundle(code=code, name=name)
        for child_code in child_codes:
            item = self._items.find(child_code)
            if item is None:
                logger.warning(
                    "No product found with code %s; skipped in bundle %s",
                    child_code,
                    code,
                )
                continue
            bundle.add(item)

        self._bundles.add(bundle)
        logger.debug(
            "Added bundle %s (%s) with %d item(s)", code, name, len(bundle.children)
        )
        return bundle

    def add_discount(
        self, offer: str, percent: str | float | int | Decimal, code: str
    ) -> DiscountedItemAdapter | None:
        """Put a special offer on an existing product.

        Returns None, registering nothing, when the product is unknown.
        """
        discount = Percentage.of(percent)
        item = self._items.find(code)
        if item is None:
            logger.warning("No product found with code %s; discount not added", code)
            return None

        adapter = DiscountedItemAdapter(SpecialOffer(offer, discount, item))
        self._discounts.add(adapter)
        logger.debug("Added offer %s of %s on product %s", offer, discount, code)
        return adapter

    def remove_product(self, code: str) -> CatalogItem | None:
        """Remove every product with this code.

        Bundles and offers already built keep their own references.
        """
        removed = self._items.remove(code)
        if removed is None:
            logger.warning("No product found with code %s; nothing removed", code)
        else:
            logger.debug("Removed product %s", code)
        return removed

    # --- Queries --------------------------------------------------------------

    def list_products(self) -> list[ProductLineDTO]:
        return [
            ProductLineDTO(code=item.code, name=item.name, price=str(item.price))
            for item in self._items.list_all()
        ]

    def list_bundles(self) -> list[BundleLineDTO]:
        return [
            BundleLineDTO(
                code=bundle.code,
                name=bundle.name,
                item_count=len(bundle.children),
                price=str(bundle.price),
                details=bundle.display(),
            )
            for bundle in self._bundles.list_all()
        ]

    def list_discounts(self) -> list[DiscountLineDTO]:
        return [
            DiscountLineDTO(
                code=adapter.code,
                offer_name=adapter.offer.offer_name,
                discount=str(adapter.offer.discount),
                price=str(adapter.price),
                details=adapter.display(),
            )
            for adapter in self._discounts.list_all()
        ]

"""Catalog components.

Products, bundles and discounted products all share one read contract
(code, price, display) so callers never need to know which one they hold.
Bundles are the composite: their price is always derived from children.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from patterns.domain.model.value_objects import Money, Percentage


class CatalogComponent(ABC):
    """Anything that can be listed and priced in the catalog."""

    @property
    @abstractmethod
    def code(self) -> str:
        """Lookup key of the component."""

    @property
    @abstractmethod
    def price(self) -> Money:
        """Current price, computed on every access where derived."""

    @abstractmethod
    def display(self) -> str:
        """Human-readable summary; may span several lines."""


class CatalogItem(CatalogComponent):
    """A single sellable product (the composite leaf).

    Never mutated after creation.
    """

    def __init__(self, code: str, name: str, price: Money) -> None:
        self._code = code
        self._name = name
        self._price = price

    @property
    def code(self) -> str:
        return self._code

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> Money:
        return self._price

    def display(self) -> str:
        return f"Product: {self._name} (Price: {self._price})"

    def __repr__(self) -> str:
        return f"CatalogItem(code={self._code!r}, name={self._name!r}, price={self._price})"


class Bundle(CatalogComponent):
    """A named group of components sold together."""

    def __init__(self, code: str, name: str) -> None:
        self._code = code
        self._name = name
        self._children: list[CatalogComponent] = []

    @property
    def code(self) -> str:
        return self._code

    @property
    def name(self) -> str:
        return self._name

    @property
    def children(self) -> tuple[CatalogComponent, ...]:
        return tuple(self._children)

    @property
    def price(self) -> Money:
        total = Money.zero()
        for child in self._children:
            total = total + child.price
        return total

    def add(self, child: CatalogComponent) -> None:
        """Append a child. Duplicates are kept."""
        self._children.append(child)

    def display(self) -> str:
        lines = [f"Bundle: {self._name}"]
        for child in self._children:
            lines.extend(f"  {line}" for line in child.display().splitlines())
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Bundle(code={self._code!r}, name={self._name!r}, children={len(self._children)})"


@dataclass(frozen=True)
class SpecialOffer:
    """A named percentage discount on one existing product.

    Holds a reference to the product, not a copy: the discounted price
    is recomputed from the product on every call.
    """

    offer_name: str
    discount: Percentage
    item: CatalogItem

    def details(self) -> str:
        return (
            f"Special Offer: {self.offer_name} (Discount: {self.discount}) "
            f"- product code: {self.item.code}"
        )

    def discounted_price(self) -> Money:
        return self.item.price * self.discount.remaining_factor


class DiscountedItemAdapter(CatalogComponent):
    """Exposes a SpecialOffer through the catalog component contract."""

    def __init__(self, offer: SpecialOffer) -> None:
        self._offer = offer

    @property
    def offer(self) -> SpecialOffer:
        return self._offer

    @property
    def code(self) -> str:
        return self._offer.item.code

    @property
    def price(self) -> Money:
        return self._offer.discounted_price()

    def display(self) -> str:
        return self._offer.details()

    def __repr__(self) -> str:
        return f"DiscountedItemAdapter({self._offer!r})"

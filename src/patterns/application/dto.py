"""Data Transfer Objects — plain containers that cross layer boundaries.

Listings hand these to the CLI so it never touches catalog components
directly. Prices are pre-formatted, e.g. "$15.00".
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductLineDTO:
    code: str
    name: str
    price: str


@dataclass(frozen=True)
class BundleLineDTO:
    code: str
    name: str
    item_count: int
    price: str
    details: str  # multi-line, one indented line per child


@dataclass(frozen=True)
class DiscountLineDTO:
    code: str
    offer_name: str
    discount: str  # e.g. "20%"
    price: str
    details: str

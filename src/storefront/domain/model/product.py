"""Product record as exposed by the catalog.

The catalog is read-only to this system: products are borrowed,
copied by value into order lines, and never mutated here.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money

DEAL_TAG = "deal"


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    id: str
    name: str
    brand: str
    price: Money
    category: str | None = None
    image: str | None = None
    tag: str | None = None  # e.g. "deal", "new"
    rating: int | None = None
    stock_tag: str | None = None  # e.g. "low"

    @property
    def is_deal(self) -> bool:
        return self.tag == DEAL_TAG

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match against name or brand."""
        needle = query.lower()
        return needle in self.name.lower() or needle in self.brand.lower()

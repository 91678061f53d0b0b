"""Abstract catalog lookup.

Defined in the domain layer so the domain never depends on
infrastructure. How the catalog is populated is not our concern;
implementations only need to answer lookups in catalog order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in catalog order."""

    def list(
        self,
        category: str | None = None,
        tag: str | None = None,
        query: str | None = None,
    ) -> list[Product]:
        """Return products matching every given filter, in catalog order."""
        products = self.list_all()
        if category:
            products = [p for p in products if p.category == category]
        if tag:
            products = [p for p in products if p.tag == tag]
        if query:
            products = [p for p in products if p.matches(query)]
        return products

    def list_categories(self) -> list[str]:
        """Distinct categories in the order they first appear."""
        seen: dict[str, None] = {}
        for p in self.list_all():
            if p.category:
                seen.setdefault(p.category, None)
        return list(seen)

"""Application services: catalog queries (list, show, categories)."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import DEAL_TAG, Product
from storefront.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        category: str | None = None,
        tag: str | None = None,
        query: str | None = None,
    ) -> list[Product]:
        return self._product_repo.list(category=category, tag=tag, query=query)

    def deals(self) -> list[Product]:
        return self._product_repo.list(tag=DEAL_TAG)


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product '{product_id}' not found")
        return product


class ListCategoriesHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[str]:
        return self._product_repo.list_categories()

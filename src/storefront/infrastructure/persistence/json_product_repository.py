"""JSON-file-backed catalog.

Read-only: the file is seeded outside this system and this repository
never writes to it.
"""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.exceptions import StorageError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        if not self._file_path.exists():
            return {}
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot read catalog {self._file_path.name}: {exc}") from exc
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                brand=item.get("brand", ""),
                price=Money.of(item["price"]),
                category=item.get("category"),
                image=item.get("image"),
                tag=item.get("tag"),
                rating=item.get("rating"),
                stock_tag=item.get("stock_tag"),
            )
            for item in raw
        }

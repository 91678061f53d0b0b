"""Tests for the read-only JSON catalog."""

import json
from decimal import Decimal

import pytest

from storefront.domain.exceptions import StorageError
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


@pytest.fixture
def catalog(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(
        json.dumps(
            [
                {"id": "p1", "name": "Trek", "brand": "TREK", "price": "600.50",
                 "category": "mountain", "tag": "deal", "rating": 5},
                {"id": "p2", "name": "Haro", "brand": "HARO", "price": 1050,
                 "category": "bmx", "stock_tag": "low"},
            ]
        )
    )
    return JsonProductRepository(path)


class TestJsonProductRepository:

    def test_get_by_id(self, catalog):
        product = catalog.get_by_id("p1")
        assert product.name == "Trek"
        assert product.price.amount == Decimal("600.50")
        assert product.is_deal

    def test_numeric_prices_are_accepted(self, catalog):
        assert catalog.get_by_id("p2").price.amount == Decimal("1050")

    def test_missing_product(self, catalog):
        assert catalog.get_by_id("nope") is None

    def test_list_keeps_file_order(self, catalog):
        assert [p.id for p in catalog.list_all()] == ["p1", "p2"]

    def test_filters(self, catalog):
        assert [p.id for p in catalog.list(category="bmx")] == ["p2"]
        assert [p.id for p in catalog.list(query="tre")] == ["p1"]

    def test_missing_file_is_empty_catalog(self, tmp_path):
        assert JsonProductRepository(tmp_path / "absent.json").list_all() == []

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text("[{")
        with pytest.raises(StorageError):
            JsonProductRepository(path).list_all()

    def test_bundled_seed_catalog_loads(self):
        from storefront.infrastructure.config import DEFAULT_DATA_DIR

        products = JsonProductRepository(DEFAULT_DATA_DIR / "products.json").list_all()
        assert products
        assert any(p.is_deal for p in products)

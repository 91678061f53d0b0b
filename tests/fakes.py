"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in memory. No file I/O, no side effects.
"""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.exceptions import ConflictError
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.identity import PasswordHasher


def make_product(
    id: str = "p1",
    name: str = "Widget",
    brand: str = "ACME",
    price: str = "100.00",
    tag: str | None = None,
    category: str | None = None,
) -> Product:
    return Product(
        id=id,
        name=name,
        brand=brand,
        price=Money(Decimal(price)),
        tag=tag,
        category=category,
    )


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: list[Order] = []

    def add(self, order: Order) -> None:
        self._store.append(order)

    def get_by_id(self, order_id: str, owner_id: str) -> Order | None:
        for order in self._store:
            if order.id == order_id and order.owner_id == owner_id:
                return order
        return None

    def list_by_owner(self, owner_id: str) -> list[Order]:
        orders = [o for o in reversed(self._store) if o.owner_id == owner_id]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def __len__(self) -> int:
        return len(self._store)


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def replace(self, product: Product) -> None:
        """Simulate the catalog changing underneath existing orders."""
        self._store[product.id] = product


class FakeUserRepository(UserRepository):

    def __init__(self) -> None:
        self._store: dict[str, User] = {}

    def get_by_id(self, user_id: str) -> User | None:
        return self._store.get(user_id)

    def get_by_email(self, email: str) -> User | None:
        for user in self._store.values():
            if user.has_email(email):
                return user
        return None

    def add(self, user: User) -> None:
        if self.get_by_email(user.email) is not None:
            raise ConflictError("Email already registered")
        self._store[user.id] = user


class FakePasswordHasher(PasswordHasher):

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed:{password}"

"""Abstract repository for Order aggregate.

Retrieval is always scoped to an owner: an order that exists but
belongs to someone else is indistinguishable from a missing one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> None:
        """Durably append a new order. Must serialize with other writers."""

    @abstractmethod
    def get_by_id(self, order_id: str, owner_id: str) -> Order | None:
        """Return the order if it exists and is owned by *owner_id*."""

    @abstractmethod
    def list_by_owner(self, owner_id: str) -> list[Order]:
        """Return the owner's orders, newest first."""

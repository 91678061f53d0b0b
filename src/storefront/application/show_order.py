"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, owner_id: str) -> OrderDTO:
        # Someone else's order reports as missing, never as forbidden
        order = self._order_repo.get_by_id(order_id, owner_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")
        return order_to_dto(order)

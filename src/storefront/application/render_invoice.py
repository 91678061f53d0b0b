"""Application service: Render Invoice use case.

Reads the stored order (owner-scoped) and hands it to the renderer;
nothing is re-priced or looked up in the catalog.
"""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.invoice_renderer import InvoiceDocument, InvoiceRenderer


class RenderInvoiceHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        renderer: InvoiceRenderer | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._renderer = renderer or InvoiceRenderer()

    def handle(self, order_id: str, owner_id: str) -> InvoiceDocument:
        order = self._order_repo.get_by_id(order_id, owner_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")
        return self._renderer.render(order)

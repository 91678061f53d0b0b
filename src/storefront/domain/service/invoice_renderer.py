"""Domain service: Invoice Renderer.

Builds an invoice from a stored Order alone: no re-pricing and no
catalog lookups, so the same order always yields the same document.
How the document is laid out on paper is left to the caller;
``InvoiceDocument.to_lines()`` gives a plain-text rendering.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.order import Order

DEAL_MARKER = "-25%"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class InvoiceHeader:
    title: str
    order_id: str
    created_at: str
    customer_name: str | None


@dataclass(frozen=True)
class InvoiceRow:
    name: str
    brand: str
    quantity: int
    unit_price: str
    line_total: str
    marker: str | None = None


@dataclass(frozen=True)
class InvoiceAdjustment:
    label: str
    amount: str


@dataclass(frozen=True)
class InvoiceDocument:
    header: InvoiceHeader
    rows: tuple[InvoiceRow, ...]
    discount: InvoiceAdjustment | None
    shipping: InvoiceAdjustment | None
    total: str

    def to_lines(self) -> list[str]:
        lines = [
            self.header.title,
            f"Order: {self.header.order_id}",
            f"Date: {self.header.created_at}",
        ]
        if self.header.customer_name:
            lines.append(f"Customer: {self.header.customer_name}")
        lines.append("")
        lines.append("Items")
        for row in self.rows:
            lines.append(f"  {row.name} ({row.brand}) x{row.quantity}")
            detail = f"    Unit: {row.unit_price}   Line: {row.line_total}"
            if row.marker:
                detail += f"   ({row.marker})"
            lines.append(detail)
        lines.append("")
        for adjustment in (self.discount, self.shipping):
            if adjustment is not None:
                lines.append(f"{adjustment.label}: {adjustment.amount}")
        lines.append(f"Total: {self.total}")
        return lines

    def to_text(self) -> str:
        return "\n".join(self.to_lines()) + "\n"


class InvoiceRenderer:

    def __init__(self, title: str = "Storefront - Invoice") -> None:
        self._title = title

    def render(self, order: Order) -> InvoiceDocument:
        header = InvoiceHeader(
            title=self._title,
            order_id=order.id,
            created_at=order.created_at.strftime(TIMESTAMP_FORMAT),
            customer_name=order.customer_name,
        )
        rows = tuple(
            InvoiceRow(
                name=line.name,
                brand=line.brand,
                quantity=line.quantity.value,
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
                marker=DEAL_MARKER if line.is_deal else None,
            )
            for line in order.items
        )

        discount = None
        if order.discount is not None:
            discount = InvoiceAdjustment(
                label=f"Discount ({order.discount.code})",
                amount=f"-{order.discount.amount}",
            )

        shipping = None
        if not order.shipping.is_zero:
            shipping = InvoiceAdjustment(label="Shipping", amount=str(order.shipping))

        return InvoiceDocument(
            header=header,
            rows=rows,
            discount=discount,
            shipping=shipping,
            total=str(order.total),
        )

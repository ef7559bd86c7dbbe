"""Invoice Mapper — pure transforms between invoice contracts and the Invoice record."""

from datetime import datetime

from order_service.modules.invoices.contracts import InvoiceResponse
from order_service.modules.invoices.models import Invoice
from order_service.modules.invoices.transitions import INVOICE_TRANSITIONS
from order_service.modules.orders import OrderResponse


def to_record(order: OrderResponse, *, created_at: datetime) -> Invoice:
    """Snapshot the billable parts of an order contract into a new invoice."""
    return Invoice(
        order_id=order.id,
        email=order.email,
        amount=order.amount,
        status=INVOICE_TRANSITIONS.initial,
        created_at=created_at,
    )


def to_response(invoice: Invoice) -> InvoiceResponse:
    return InvoiceResponse(
        id=invoice.id,
        order_id=invoice.order_id,
        email=invoice.email,
        amount=invoice.amount,
        status=invoice.status,
        created_at=invoice.created_at,
        updated_at=invoice.updated_at,
    )

"""Invoices module — public surface.

Depends on the orders module only through OrderLookup (satisfied by OrderEngine).
"""

from sqlalchemy.ext.asyncio import AsyncSession

from order_service.core.domain_types import InvoiceOperation, InvoiceStatus
from order_service.modules.invoices.contracts import (
    INVOICE_SORT_KEYS, InvoiceCreate, InvoiceResponse,
)
from order_service.modules.invoices.engine import InvoiceEngine, OrderLookup
from order_service.modules.invoices.repository import (
    SqlAlchemyInvoiceRepository as _SqlAlchemyInvoiceRepository,
)
from order_service.modules.orders import build_order_engine

__all__ = [
    "INVOICE_SORT_KEYS",
    "InvoiceCreate",
    "InvoiceEngine",
    "InvoiceOperation",
    "InvoiceResponse",
    "InvoiceStatus",
    "OrderLookup",
    "build_invoice_engine",
]


def build_invoice_engine(
    session: AsyncSession, orders: OrderLookup | None = None,
) -> InvoiceEngine:
    """Wire an InvoiceEngine; defaults to an OrderEngine sharing the same DB session."""
    return InvoiceEngine(
        _SqlAlchemyInvoiceRepository(session),
        orders=orders if orders is not None else build_order_engine(session),
    )

"""Invoice Contracts — request/response shapes for modules/invoices."""

from datetime import datetime

from pydantic import Field

from order_service.core.contracts import ContractModel, Money
from order_service.core.domain_types import InvoiceStatus

INVOICE_SORT_KEYS = frozenset({
    "id", "orderId", "amount", "status", "createdAt", "updatedAt",
})


class InvoiceCreate(ContractModel):
    order_id: int = Field(gt=0)


class InvoiceResponse(ContractModel):
    id: int | None = None
    order_id: int
    email: str
    amount: Money
    status: InvoiceStatus
    created_at: datetime
    updated_at: datetime | None = None

"""Invoice Routes — HTTP boundary for the invoices module."""

from fastapi import APIRouter, Depends, Query, status

from order_service.api.dependencies import get_invoice_engine, invoice_page_request
from order_service.core.errors import ResourceNotFoundError
from order_service.core.pagination import Page, PageRequest
from order_service.modules.invoices import (
    InvoiceCreate, InvoiceEngine, InvoiceOperation, InvoiceResponse, InvoiceStatus,
)

router = APIRouter(prefix="/api/v1/invoice", tags=["invoice"])


@router.post(
    "", response_model=InvoiceResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_invoice(
    body: InvoiceCreate, engine: InvoiceEngine = Depends(get_invoice_engine),
):
    """Issue an invoice for a confirmed, shipped or delivered order."""
    return await engine.create(body)


@router.get("", response_model=Page[InvoiceResponse])
async def list_invoices(
    page_request: PageRequest = Depends(invoice_page_request),
    status_filter: InvoiceStatus | None = Query(None, alias="status"),
    engine: InvoiceEngine = Depends(get_invoice_engine),
):
    return await engine.find_all(page_request, status=status_filter)


@router.get("/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice(
    invoice_id: int, engine: InvoiceEngine = Depends(get_invoice_engine),
):
    invoice = await engine.find_by_id(invoice_id)
    if invoice is None:
        raise ResourceNotFoundError("Invoice", invoice_id)
    return invoice


@router.patch("/{invoice_id}/{operation}", response_model=InvoiceResponse)
async def transition_invoice(
    invoice_id: int,
    operation: InvoiceOperation,
    engine: InvoiceEngine = Depends(get_invoice_engine),
):
    return await engine.transition(invoice_id, operation)

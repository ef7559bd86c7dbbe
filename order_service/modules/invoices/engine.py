"""Invoice Engine — invoice lifecycle, collaborating with the orders module through its engine.

Invariants:
    - An invoice is issued only for an existing order in CONFIRMED, SHIPPED or DELIVERED
    - An order has at most one non-void invoice
    - Order data is read only through OrderLookup -> OrderResponse; this module never
      sees the Order record or its repository
    - Transition semantics match the order engine: NotFound, InvalidTransitionError
      naming the current status, and a lost race judged again against the status
      that won (InvalidTransitionError if no longer allowed, else ConcurrencyError)

Design Decisions:
    - OrderLookup is declared HERE, by the consumer, and covers only find_by_id:
      tests substitute a tiny fake instead of a whole OrderEngine
    - Cross-module call is an in-process await with no timeout of its own
"""

import logging
from typing import Protocol

from order_service.core.clock import Clock, utc_now
from order_service.core.domain_types import (
    InvoiceId, InvoiceOperation, InvoiceStatus, OrderStatus,
)
from order_service.core.errors import (
    BusinessRuleViolation, ConcurrencyError, InvalidTransitionError,
    ResourceNotFoundError,
)
from order_service.core.pagination import Page, PageRequest, build_page
from order_service.core.repository_protocols import InvoiceRepository
from order_service.modules.invoices.contracts import InvoiceCreate, InvoiceResponse
from order_service.modules.invoices.mapper import to_record, to_response
from order_service.modules.invoices.models import Invoice
from order_service.modules.invoices.transitions import INVOICE_TRANSITIONS
from order_service.modules.orders import OrderResponse

logger = logging.getLogger(__name__)

INVOICEABLE_ORDER_STATUSES = frozenset({
    OrderStatus.CONFIRMED, OrderStatus.SHIPPED, OrderStatus.DELIVERED,
})


class OrderLookup(Protocol):
    """The one order capability invoicing needs."""

    async def find_by_id(self, order_id: int) -> OrderResponse | None: ...


class InvoiceEngine:
    """Invoice lifecycle: issue, look up, page through, pay and void invoices."""

    def __init__(
        self,
        repository: InvoiceRepository[Invoice, InvoiceStatus],
        orders: OrderLookup,
        clock: Clock = utc_now,
    ):
        self._repository = repository
        self._orders = orders
        self._clock = clock

    async def create(self, request: InvoiceCreate) -> InvoiceResponse:
        order = await self._orders.find_by_id(request.order_id)
        if order is None:
            raise ResourceNotFoundError("Order", request.order_id)
        if order.status not in INVOICEABLE_ORDER_STATUSES:
            raise BusinessRuleViolation(
                f"Cannot invoice order in status {order.status.value.lower()}",
                code="ORDER_NOT_INVOICEABLE",
            )
        existing = await self._repository.find_by_order(order.id)
        if any(invoice.status != InvoiceStatus.VOID for invoice in existing):
            raise BusinessRuleViolation(
                f"Order {order.id} already has an open invoice",
                code="DUPLICATE_INVOICE",
            )

        saved = await self._repository.add(
            to_record(order, created_at=self._clock()),
        )
        logger.info(
            f"Invoice {saved.id} issued for order {order.id}",
            extra={"invoice_id": saved.id, "order_id": order.id},
        )
        return to_response(saved)

    async def find_by_id(self, invoice_id: InvoiceId | int) -> InvoiceResponse | None:
        record = await self._repository.get(invoice_id)
        return to_response(record) if record is not None else None

    async def find_all(
        self, request: PageRequest, status: InvoiceStatus | None = None,
    ) -> Page[InvoiceResponse]:
        raw = await self._repository.find_page(request, status=status)
        return build_page(
            [to_response(record) for record in raw.items], request, raw.total,
        )

    async def transition(
        self, invoice_id: InvoiceId | int, operation: InvoiceOperation,
    ) -> InvoiceResponse:
        record = await self._load(invoice_id)
        current = record.status
        target = self._resolve(record, operation)

        changed = await self._repository.update_status_if(
            invoice_id, current, target, self._clock(),
        )
        if not changed:
            self._raise_lost_race(await self._load(invoice_id), operation)

        updated = await self._load(invoice_id)
        logger.info(
            f"Invoice {invoice_id} {current.value} -> {target.value}",
            extra={
                "invoice_id": invoice_id, "operation": operation.value,
                "from_status": current.value, "to_status": target.value,
            },
        )
        return to_response(updated)

    def _resolve(self, record: Invoice, operation: InvoiceOperation) -> InvoiceStatus:
        try:
            return INVOICE_TRANSITIONS.resolve(record.status, operation)
        except InvalidTransitionError:
            logger.warning(
                f"Rejected {operation.value} on invoice {record.id} in status {record.status.value}",
                extra={
                    "invoice_id": record.id, "operation": operation.value,
                    "from_status": record.status.value,
                    "error_code": "INVALID_TRANSITION",
                },
            )
            raise

    def _raise_lost_race(self, record: Invoice, operation: InvoiceOperation) -> None:
        """Same rule as the order engine: judge the loser against the status that won."""
        self._resolve(record, operation)
        logger.warning(
            f"Concurrent modification of invoice {record.id} during {operation.value}",
            extra={
                "invoice_id": record.id, "operation": operation.value,
                "from_status": record.status.value,
                "error_code": "CONCURRENCY_CONFLICT",
            },
        )
        raise ConcurrencyError(
            f"Invoice {record.id} was modified concurrently; "
            f"retry the {operation.value} request",
        )

    async def _load(self, invoice_id: InvoiceId | int) -> Invoice:
        record = await self._repository.get(invoice_id)
        if record is None:
            raise ResourceNotFoundError("Invoice", invoice_id)
        return record

"""Order Engine — the order lifecycle and the only callable surface of modules/orders.

Invariants:
    - create() always yields status PENDING and stamps created_at from the injected clock
    - find_by_id() returns None for an unknown id: absence is a value, not an error
    - transition() raises ResourceNotFoundError for an unknown id and
      InvalidTransitionError (naming the current status) for a disallowed operation
    - The status write is a conditional update on the status that was read, so of two
      racing transitions at most one succeeds
    - A transition that loses the race is judged again against the status that won.
      It gets InvalidTransitionError when the operation is no longer allowed there
      (the same outcome as running second), otherwise ConcurrencyError
    - Only OrderResponse / Page[OrderResponse] leave this class

Design Decisions:
    - Collaborators injected through the constructor: tests pass an in-memory
      repository and a fixed clock, no FastAPI needed
    - Conditional update over row locks (ADR: no lock held across an await)
    - No automatic retry on conflict: retry policy belongs to the caller
"""

import logging

from order_service.core.clock import Clock, utc_now
from order_service.core.domain_types import OrderId, OrderOperation, OrderStatus
from order_service.core.errors import (
    ConcurrencyError, InvalidTransitionError, ResourceNotFoundError,
)
from order_service.core.pagination import Page, PageRequest, build_page
from order_service.core.repository_protocols import LifecycleRepository
from order_service.modules.orders.contracts import OrderCreate, OrderResponse
from order_service.modules.orders.mapper import to_record, to_response
from order_service.modules.orders.models import Order
from order_service.modules.orders.transitions import ORDER_TRANSITIONS

logger = logging.getLogger(__name__)


class OrderEngine:
    """Order lifecycle: create, look up, page through, and transition orders."""

    def __init__(
        self,
        repository: LifecycleRepository[Order, OrderStatus],
        clock: Clock = utc_now,
    ):
        self._repository = repository
        self._clock = clock

    async def create(self, request: OrderCreate) -> OrderResponse:
        record = to_record(request, created_at=self._clock())
        saved = await self._repository.add(record)
        logger.info(
            f"Order {saved.id} created",
            extra={"order_id": saved.id, "to_status": saved.status.value},
        )
        return to_response(saved)

    async def find_by_id(self, order_id: OrderId | int) -> OrderResponse | None:
        record = await self._repository.get(order_id)
        return to_response(record) if record is not None else None

    async def find_all(
        self, request: PageRequest, status: OrderStatus | None = None,
    ) -> Page[OrderResponse]:
        raw = await self._repository.find_page(request, status=status)
        return build_page(
            [to_response(record) for record in raw.items], request, raw.total,
        )

    async def transition(
        self, order_id: OrderId | int, operation: OrderOperation,
    ) -> OrderResponse:
        """Apply `operation` to the order or raise; never partially applies."""
        record = await self._load(order_id)
        current = record.status
        target = self._resolve(record, operation)

        changed = await self._repository.update_status_if(
            order_id, current, target, self._clock(),
        )
        if not changed:
            self._raise_lost_race(await self._load(order_id), operation)

        updated = await self._load(order_id)
        logger.info(
            f"Order {order_id} {current.value} -> {target.value}",
            extra={
                "order_id": order_id, "operation": operation.value,
                "from_status": current.value, "to_status": target.value,
            },
        )
        return to_response(updated)

    def _resolve(self, record: Order, operation: OrderOperation) -> OrderStatus:
        try:
            return ORDER_TRANSITIONS.resolve(record.status, operation)
        except InvalidTransitionError:
            logger.warning(
                f"Rejected {operation.value} on order {record.id} in status {record.status.value}",
                extra={
                    "order_id": record.id, "operation": operation.value,
                    "from_status": record.status.value,
                    "error_code": "INVALID_TRANSITION",
                },
            )
            raise

    def _raise_lost_race(self, record: Order, operation: OrderOperation) -> None:
        """Another writer moved the order between our read and our update.

        The operation is judged again against the status the order has now.
        If it is no longer allowed it fails as it would have sequentially.
        If it still is, ConcurrencyError tells the caller a retry can succeed.
        """
        self._resolve(record, operation)
        logger.warning(
            f"Concurrent modification of order {record.id} during {operation.value}",
            extra={
                "order_id": record.id, "operation": operation.value,
                "from_status": record.status.value,
                "error_code": "CONCURRENCY_CONFLICT",
            },
        )
        raise ConcurrencyError(
            f"Order {record.id} was modified concurrently; "
            f"retry the {operation.value} request",
        )

    async def allowed_operations(
        self, order_id: OrderId | int,
    ) -> list[OrderOperation] | None:
        """Operations currently permitted, or None when the order does not exist."""
        record = await self._repository.get(order_id)
        if record is None:
            return None
        return ORDER_TRANSITIONS.allowed_operations(record.status)

    async def _load(self, order_id: OrderId | int) -> Order:
        record = await self._repository.get(order_id)
        if record is None:
            raise ResourceNotFoundError("Order", order_id)
        return record

"""Boundary Protocols — contracts between engines and their persistence gateways.

Invariants:
    - Core NEVER imports from modules/ or db/: record types are generic parameters here
    - Every gateway supports: point lookup, predicate-filtered paginated scan,
      upsert, and an atomic conditional status update
    - A gateway is owned by exactly one module and never handed to another

Design Decisions:
    - Protocol over ABC: structural subtyping, so tests pass plain in-memory fakes
    - Conditional update (compare-and-set on status) over read-lock-write: one
      statement, no lock held across an await
    - Async in Protocol: implementations do IO; the pure rules in core/lifecycle.py
      stay synchronous
"""

from datetime import datetime
from enum import Enum
from typing import Protocol, TypeVar

from order_service.core.pagination import PageRequest, RawPage

RecordT = TypeVar("RecordT")
StatusT = TypeVar("StatusT", bound=Enum)


class LifecycleRepository(Protocol[RecordT, StatusT]):
    """Persistence gateway for one resource type with a status lifecycle."""

    async def get(self, record_id: int) -> RecordT | None: ...

    async def add(self, record: RecordT) -> RecordT:
        """Insert or update `record`; returns it with storage-assigned identity."""
        ...

    async def find_page(
        self, request: PageRequest, *, status: StatusT | None = None,
    ) -> RawPage[RecordT]: ...

    async def update_status_if(
        self,
        record_id: int,
        expected: StatusT,
        new: StatusT,
        updated_at: datetime,
    ) -> bool:
        """Set status to `new` only if it is still `expected`. True if a row changed."""
        ...


class InvoiceRepository(LifecycleRepository[RecordT, StatusT], Protocol):
    """Invoice gateway — adds the per-order predicate lookup."""

    async def find_by_order(self, order_id: int) -> list[RecordT]: ...

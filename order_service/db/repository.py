"""SQLAlchemy Lifecycle Repository — shared gateway implementation for status-bearing records.

Invariants:
    - Every write commits its own transaction (one statement = one unit of work)
    - update_status_if is a single UPDATE ... WHERE id = :id AND status = :expected
    - Paginated scans always order by the primary key last (stable pages)
    - Point lookups refresh identity-map state from the database

Design Decisions:
    - Generic base + per-module subclass: each module still owns its own gateway
      class and record type, only the SQL plumbing is shared
    - synchronize_session=False on the conditional UPDATE: the follow-up get()
      reloads with populate_existing, so in-session sync would be redundant
"""

from datetime import datetime
from enum import Enum
from typing import ClassVar, Generic, Mapping, TypeVar

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from order_service.core.domain_types import SortDirection
from order_service.core.pagination import PageRequest, RawPage
from order_service.db.base import Base

RecordT = TypeVar("RecordT", bound=Base)
StatusT = TypeVar("StatusT", bound=Enum)


class SqlAlchemyLifecycleRepository(Generic[RecordT, StatusT]):
    """Gateway over one ORM record type with `id`, `status` and `updated_at` columns."""

    record_type: ClassVar[type]
    # external (camelCase) sort key -> column
    sort_columns: ClassVar[Mapping[str, InstrumentedAttribute]]

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get(self, record_id: int) -> RecordT | None:
        return await self._session.get(
            self.record_type, record_id, populate_existing=True,
        )

    async def add(self, record: RecordT) -> RecordT:
        self._session.add(record)
        await self._session.commit()
        await self._session.refresh(record)
        return record

    async def find_page(
        self, request: PageRequest, *, status: StatusT | None = None,
    ) -> RawPage[RecordT]:
        model = self.record_type
        query = select(model)
        count_query = select(func.count()).select_from(model)
        if status is not None:
            query = query.where(model.status == status)
            count_query = count_query.where(model.status == status)

        query = query.order_by(*self._ordering(request)).limit(
            request.size,
        ).offset(request.offset)

        result = await self._session.execute(query)
        total = await self._session.scalar(count_query)
        return RawPage(items=list(result.scalars().all()), total=total or 0)

    async def update_status_if(
        self,
        record_id: int,
        expected: StatusT,
        new: StatusT,
        updated_at: datetime,
    ) -> bool:
        model = self.record_type
        result = await self._session.execute(
            update(model)
            .where(model.id == record_id, model.status == expected)
            .values(status=new, updated_at=updated_at)
            .execution_options(synchronize_session=False),
        )
        await self._session.commit()
        return result.rowcount == 1

    def _ordering(self, request: PageRequest) -> list:
        primary_key = self.record_type.id
        if request.sort is None:
            return [primary_key.asc()]
        column = self.sort_columns[request.sort.key]
        if request.sort.direction == SortDirection.DESC:
            return [column.desc(), primary_key.desc()]
        return [column.asc(), primary_key.asc()]

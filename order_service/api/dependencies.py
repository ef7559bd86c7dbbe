"""Route Dependencies — engine wiring and page-request parsing for FastAPI routes.

Invariants:
    - Engines are built per request around the request's DB session
    - Page size defaults to settings.default_page_size and never exceeds
      settings.max_page_size
    - Page index bounded so the row offset fits a 64-bit storage integer
    - Sort keys are checked against the module's whitelist before any engine runs

Design Decisions:
    - Engines constructed with explicit collaborators (build_*_engine factories);
      Depends() is used only here, at the edge
"""

from typing import Callable, Iterable

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from order_service.config import Settings, get_settings
from order_service.core.errors import StructuralValidationError
from order_service.core.pagination import PageRequest, max_page_index, parse_sort
from order_service.infrastructure.database import get_db
from order_service.modules.invoices import (
    INVOICE_SORT_KEYS, InvoiceEngine, build_invoice_engine,
)
from order_service.modules.orders import (
    ORDER_SORT_KEYS, OrderEngine, build_order_engine,
)


def get_order_engine(db: AsyncSession = Depends(get_db)) -> OrderEngine:
    return build_order_engine(db)


def get_invoice_engine(db: AsyncSession = Depends(get_db)) -> InvoiceEngine:
    return build_invoice_engine(db, orders=build_order_engine(db))


def page_request_dependency(
    allowed_sort_keys: Iterable[str],
) -> Callable[..., PageRequest]:
    """Build a dependency parsing ?page=&size=&sort= for one resource."""
    allowed = frozenset(allowed_sort_keys)

    def _page_request(
        page: int = Query(0, ge=0),
        size: int | None = Query(None, gt=0),
        sort: str | None = Query(None),
        settings: Settings = Depends(get_settings),
    ) -> PageRequest:
        effective_size = size if size is not None else settings.default_page_size
        if effective_size > settings.max_page_size:
            raise StructuralValidationError(
                {"size": f"must be less than or equal to {settings.max_page_size}"},
            )
        if page > max_page_index(effective_size):
            raise StructuralValidationError(
                {"page": f"must be less than or equal to {max_page_index(effective_size)}"},
            )
        return PageRequest(
            page=page,
            size=effective_size,
            sort=parse_sort(sort if sort is not None else settings.default_sort, allowed),
        )

    return _page_request


order_page_request = page_request_dependency(ORDER_SORT_KEYS)
invoice_page_request = page_request_dependency(INVOICE_SORT_KEYS)

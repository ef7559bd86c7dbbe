"""Pagination — converts (page, size, sort) plus a raw result into a stable page wrapper.

Invariants:
    - page >= 0, size > 0 (zero-based page index)
    - page * size never exceeds MAX_OFFSET (a signed 64-bit storage integer)
    - totalPages == ceil(totalElements / size)
    - len(content) <= size
    - last is True on the final page index, and when totalElements == 0
    - Pure: identical inputs against unchanged data produce identical pages

Design Decisions:
    - Sort keys are validated against a per-module whitelist at the boundary;
      repositories map the external key to a column and always append the
      primary key as tiebreaker (stable ordering)
    - Pages past the end report last=True (no further page exists)
"""

import math
from dataclasses import dataclass
from typing import Generic, Iterable, Sequence, TypeVar

from pydantic import Field, model_validator

from order_service.core.contracts import ContractModel
from order_service.core.domain_types import SortDirection
from order_service.core.errors import StructuralValidationError

T = TypeVar("T")

# Largest row offset a 64-bit SQL integer can carry
MAX_OFFSET = 2**63 - 1


class SortSpec(ContractModel):
    key: str = Field(min_length=1)
    direction: SortDirection = SortDirection.ASC


class PageRequest(ContractModel):
    """Zero-based page request with optional sort."""
    page: int = Field(0, ge=0)
    size: int = Field(20, gt=0)
    sort: SortSpec | None = None

    @model_validator(mode="after")
    def check_offset(self):
        if self.offset > MAX_OFFSET:
            raise ValueError(
                f"page must be less than or equal to {max_page_index(self.size)}",
            )
        return self

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class RawPage(Generic[T]):
    """What a repository returns for a paginated scan: one slice plus the total count."""
    items: Sequence[T]
    total: int


class Page(ContractModel, Generic[T]):
    """Page wrapper — the only shape a collection query ever returns."""
    content: list[T]
    page: int
    size: int
    total_elements: int
    total_pages: int
    last: bool


def total_pages(total_elements: int, size: int) -> int:
    if size <= 0:
        raise ValueError("size must be > 0")
    return math.ceil(total_elements / size)


def build_page(
    content: Sequence[T], request: PageRequest, total_elements: int,
) -> Page[T]:
    """Wrap one slice of already-mapped content into a Page."""
    if len(content) > request.size:
        raise ValueError(
            f"Page content ({len(content)}) exceeds page size ({request.size})",
        )
    pages = total_pages(total_elements, request.size)
    return Page(
        content=list(content),
        page=request.page,
        size=request.size,
        total_elements=total_elements,
        total_pages=pages,
        last=request.page + 1 >= pages,
    )


def parse_sort(raw: str | None, allowed_keys: Iterable[str]) -> SortSpec | None:
    """Parse `key` or `key,direction` from a query string.

    Raises StructuralValidationError on an unknown key or direction.
    """
    if raw is None or not raw.strip():
        return None
    key, _, direction = (part.strip() for part in raw.partition(","))
    allowed = sorted(allowed_keys)
    if key not in allowed:
        raise StructuralValidationError(
            {"sort": f"Unknown sort key '{key}'. Allowed: {', '.join(allowed)}"},
        )
    if not direction:
        return SortSpec(key=key)
    try:
        return SortSpec(key=key, direction=SortDirection(direction.lower()))
    except ValueError:
        raise StructuralValidationError(
            {"sort": f"Unknown sort direction '{direction}'. Allowed: asc, desc"},
        )


def max_page_index(size: int) -> int:
    """Highest page index whose offset still fits in MAX_OFFSET."""
    return MAX_OFFSET // size

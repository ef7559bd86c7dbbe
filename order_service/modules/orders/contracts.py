"""Order Contracts — the only shapes of an order visible outside modules/orders.

Invariants:
    - OrderCreate.email: non-blank, stripped, single '@' with a dotted domain
    - OrderCreate.amount: > 0, at most 2 decimal places
    - OrderResponse.status serializes as the enum name ("PENDING")
    - OrderResponse.id is None only before persistence assigns it

Design Decisions:
    - Decimal in Python, JSON number on the wire: clients send and read 99.99,
      the engine never does float arithmetic
    - Email checked with a pattern instead of EmailStr: no extra validator dependency
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import Field, field_validator

from order_service.core.contracts import AsJsonNumber, ContractModel, Money
from order_service.core.domain_types import OrderStatus

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

# camelCase keys accepted by ?sort=
ORDER_SORT_KEYS = frozenset({
    "id", "email", "amount", "status", "createdAt", "updatedAt",
})


class OrderCreate(ContractModel):
    """Order creation — attributes needed to construct a new order."""
    email: str = Field(min_length=3, max_length=254, pattern=EMAIL_PATTERN)
    amount: Annotated[
        Decimal, Field(gt=0, max_digits=12, decimal_places=2), AsJsonNumber,
    ]
    description: str | None = Field(None, max_length=500)

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v


class OrderResponse(ContractModel):
    """Order response — public-facing order data."""
    id: int | None = None
    email: str
    amount: Money
    description: str | None = None
    status: OrderStatus
    created_at: datetime
    updated_at: datetime | None = None

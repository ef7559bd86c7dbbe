"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - OrderId, InvoiceId wrap storage-assigned integers; never use bare int in engine signatures
    - Status enum values equal their names: the display string IS the stored value
    - Operation enum values are lowercase: they appear verbatim in URL paths
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

OrderId = NewType("OrderId", int)
InvoiceId = NewType("InvoiceId", int)


# ─── Enums ───────────────────────────────────────────────────────

class OrderStatus(str, Enum):
    """Order lifecycle states — maps to DB `status` column."""
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class OrderOperation(str, Enum):
    """Status-changing operations accepted by PATCH /order/{id}/{operation}."""
    CONFIRM = "confirm"
    SHIP = "ship"
    DELIVER = "deliver"
    CANCEL = "cancel"


class InvoiceStatus(str, Enum):
    """Invoice lifecycle states — maps to DB `status` column."""
    ISSUED = "ISSUED"
    PAID = "PAID"
    VOID = "VOID"


class InvoiceOperation(str, Enum):
    """Status-changing operations accepted by PATCH /invoice/{id}/{operation}."""
    PAY = "pay"
    VOID = "void"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

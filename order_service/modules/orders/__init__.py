"""Orders module — public surface.

Only the names below may be imported by other modules or the API layer.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from order_service.core.clock import Clock, utc_now
from order_service.core.domain_types import OrderOperation, OrderStatus
from order_service.modules.orders.contracts import (
    ORDER_SORT_KEYS, OrderCreate, OrderResponse,
)
from order_service.modules.orders.engine import OrderEngine
from order_service.modules.orders.repository import (
    SqlAlchemyOrderRepository as _SqlAlchemyOrderRepository,
)

__all__ = [
    "ORDER_SORT_KEYS",
    "OrderCreate",
    "OrderEngine",
    "OrderOperation",
    "OrderResponse",
    "OrderStatus",
    "build_order_engine",
]


def build_order_engine(session: AsyncSession, clock: Clock = utc_now) -> OrderEngine:
    """Wire an OrderEngine to the SQLAlchemy gateway for one DB session."""
    return OrderEngine(_SqlAlchemyOrderRepository(session), clock=clock)

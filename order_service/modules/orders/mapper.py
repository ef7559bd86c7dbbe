"""Order Mapper — pure transforms between OrderCreate/OrderResponse and the Order record.

Invariants:
    - No IO, no clock, no collaborators: timestamps are passed in
    - to_record always yields the initial status, regardless of input
    - Business attributes pass through unchanged in both directions
"""

from datetime import datetime

from order_service.modules.orders.contracts import OrderCreate, OrderResponse
from order_service.modules.orders.models import Order
from order_service.modules.orders.transitions import ORDER_TRANSITIONS


def to_record(request: OrderCreate, *, created_at: datetime) -> Order:
    return Order(
        email=request.email,
        amount=request.amount,
        description=request.description,
        status=ORDER_TRANSITIONS.initial,
        created_at=created_at,
    )


def to_response(order: Order) -> OrderResponse:
    return OrderResponse(
        id=order.id,
        email=order.email,
        amount=order.amount,
        description=order.description,
        status=order.status,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )

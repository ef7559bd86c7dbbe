"""Order state machine — which operation is allowed from which status.

    confirm   PENDING             -> CONFIRMED
    ship      CONFIRMED           -> SHIPPED
    deliver   SHIPPED             -> DELIVERED
    cancel    PENDING, CONFIRMED  -> CANCELLED
"""

from order_service.core.domain_types import OrderOperation, OrderStatus
from order_service.core.lifecycle import TransitionTable, rule

ORDER_TRANSITIONS: TransitionTable[OrderStatus, OrderOperation] = TransitionTable(
    "Order",
    OrderStatus.PENDING,
    [
        rule(OrderOperation.CONFIRM, [OrderStatus.PENDING], OrderStatus.CONFIRMED),
        rule(OrderOperation.SHIP, [OrderStatus.CONFIRMED], OrderStatus.SHIPPED),
        rule(OrderOperation.DELIVER, [OrderStatus.SHIPPED], OrderStatus.DELIVERED),
        rule(
            OrderOperation.CANCEL,
            [OrderStatus.PENDING, OrderStatus.CONFIRMED],
            OrderStatus.CANCELLED,
        ),
    ],
)

"""Order Repository — SQLAlchemy persistence gateway for Order records."""

from order_service.core.domain_types import OrderStatus
from order_service.db.repository import SqlAlchemyLifecycleRepository
from order_service.modules.orders.models import Order


class SqlAlchemyOrderRepository(SqlAlchemyLifecycleRepository[Order, OrderStatus]):
    record_type = Order
    sort_columns = {
        "id": Order.id,
        "email": Order.email,
        "amount": Order.amount,
        "status": Order.status,
        "createdAt": Order.created_at,
        "updatedAt": Order.updated_at,
    }

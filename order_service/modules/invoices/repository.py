"""Invoice Repository — SQLAlchemy persistence gateway for Invoice records."""

from sqlalchemy import select

from order_service.core.domain_types import InvoiceStatus
from order_service.db.repository import SqlAlchemyLifecycleRepository
from order_service.modules.invoices.models import Invoice


class SqlAlchemyInvoiceRepository(
    SqlAlchemyLifecycleRepository[Invoice, InvoiceStatus],
):
    record_type = Invoice
    sort_columns = {
        "id": Invoice.id,
        "orderId": Invoice.order_id,
        "amount": Invoice.amount,
        "status": Invoice.status,
        "createdAt": Invoice.created_at,
        "updatedAt": Invoice.updated_at,
    }

    async def find_by_order(self, order_id: int) -> list[Invoice]:
        result = await self._session.execute(
            select(Invoice)
            .where(Invoice.order_id == order_id)
            .order_by(Invoice.id.asc()),
        )
        return list(result.scalars().all())

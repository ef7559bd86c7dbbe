"""Order Routes — HTTP boundary for the orders module.

Invariants:
    - Body, path and query shapes validated by FastAPI/Pydantic before the engine runs
    - find_by_id() returning None becomes ResourceNotFoundError HERE, not in the engine
    - Responses are OrderResponse / Page[OrderResponse], serialized camelCase
"""

from fastapi import APIRouter, Depends, Query, status

from order_service.api.dependencies import get_order_engine, order_page_request
from order_service.core.errors import ResourceNotFoundError
from order_service.core.pagination import Page, PageRequest
from order_service.modules.orders import (
    OrderCreate, OrderEngine, OrderOperation, OrderResponse, OrderStatus,
)

router = APIRouter(prefix="/api/v1/order", tags=["order"])


@router.post(
    "", response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_order(
    body: OrderCreate, engine: OrderEngine = Depends(get_order_engine),
):
    """Create a new order in status PENDING."""
    return await engine.create(body)


@router.get("", response_model=Page[OrderResponse])
async def list_orders(
    page_request: PageRequest = Depends(order_page_request),
    status_filter: OrderStatus | None = Query(None, alias="status"),
    engine: OrderEngine = Depends(get_order_engine),
):
    """List orders one page at a time, optionally filtered by status."""
    return await engine.find_all(page_request, status=status_filter)


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: int, engine: OrderEngine = Depends(get_order_engine),
):
    order = await engine.find_by_id(order_id)
    if order is None:
        raise ResourceNotFoundError("Order", order_id)
    return order


@router.get("/{order_id}/operations")
async def list_allowed_operations(
    order_id: int, engine: OrderEngine = Depends(get_order_engine),
):
    """Operations the order currently accepts (empty once terminal)."""
    operations = await engine.allowed_operations(order_id)
    if operations is None:
        raise ResourceNotFoundError("Order", order_id)
    return {"operations": [op.value for op in operations]}


@router.patch("/{order_id}/{operation}", response_model=OrderResponse)
async def transition_order(
    order_id: int,
    operation: OrderOperation,
    engine: OrderEngine = Depends(get_order_engine),
):
    """Apply confirm / ship / deliver / cancel."""
    return await engine.transition(order_id, operation)

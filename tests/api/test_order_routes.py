"""Order routes — HTTP contract of /api/v1/order.

Tests cover:
    - POST: 201, camelCase body, PENDING, amount as JSON number
    - GET by id: 200 / 404 with the uniform error body
    - GET list: page wrapper, size bounds, page index bound, sort whitelist, status filter
    - PATCH: lifecycle operations, rejected transitions, unknown operation
    - GET operations: allowed operations per status
"""

import pytest

from order_service.core.pagination import max_page_index
from tests.api.helpers import create_order, walk_order

ERROR_KEYS = {"status", "message", "timestamp", "errors"}


async def test_create_order_returns_pending(client):
    response = await client.post(
        "/api/v1/order",
        json={"email": "a@b.com", "amount": 99.99, "description": "two lamps"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "PENDING"
    assert body["amount"] == 99.99
    assert body["email"] == "a@b.com"
    assert body["description"] == "two lamps"
    assert isinstance(body["id"], int)
    assert "createdAt" in body
    assert body["updatedAt"] is None


async def test_create_order_rejects_unknown_fields(client):
    response = await client.post(
        "/api/v1/order",
        json={"email": "a@b.com", "amount": 10, "status": "DELIVERED"},
    )
    assert response.status_code == 400
    assert "status" in response.json()["errors"]


@pytest.mark.parametrize("payload, field", [
    ({"email": "not-an-email", "amount": 10}, "email"),
    ({"email": "   ", "amount": 10}, "email"),
    ({"email": "a@b.com", "amount": 0}, "amount"),
    ({"email": "a@b.com", "amount": -5}, "amount"),
    ({"email": "a@b.com", "amount": 1.234}, "amount"),
    ({"amount": 10}, "email"),
])
async def test_create_order_validation_failure(client, payload, field):
    response = await client.post("/api/v1/order", json=payload)
    assert response.status_code == 400
    body = response.json()
    assert set(body) == ERROR_KEYS
    assert body["status"] == 400
    assert body["message"] == "Validation failed"
    assert field in body["errors"]


async def test_get_order(client):
    created = await create_order(client)
    response = await client.get(f"/api/v1/order/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


async def test_get_unknown_order_404(client):
    response = await client.get("/api/v1/order/999")
    assert response.status_code == 404
    body = response.json()
    assert set(body) == ERROR_KEYS
    assert body["status"] == 404
    assert body["message"] == "Order not found with id: 999"
    assert body["errors"] == {}


async def test_list_orders_page_wrapper(client):
    for i in range(45):
        await create_order(client, email=f"buyer{i}@example.com")
    response = await client.get("/api/v1/order", params={"page": 0, "size": 20})
    assert response.status_code == 200
    body = response.json()
    assert body["totalElements"] == 45
    assert body["totalPages"] == 3
    assert body["page"] == 0
    assert body["size"] == 20
    assert body["last"] is False
    assert len(body["content"]) == 20

    last = (await client.get("/api/v1/order", params={"page": 2, "size": 20})).json()
    assert len(last["content"]) == 5
    assert last["last"] is True


async def test_list_orders_defaults(client):
    await create_order(client)
    body = (await client.get("/api/v1/order")).json()
    assert body["size"] == 20
    assert body["page"] == 0
    assert body["totalElements"] == 1


async def test_list_orders_sorted_by_amount(client):
    for amount in (5, 50, 20):
        await create_order(client, amount=amount)
    body = (await client.get(
        "/api/v1/order", params={"sort": "amount,desc"},
    )).json()
    assert [o["amount"] for o in body["content"]] == [50, 20, 5]


async def test_list_orders_size_above_maximum(client):
    response = await client.get("/api/v1/order", params={"size": 1000})
    assert response.status_code == 400
    assert "size" in response.json()["errors"]


async def test_list_orders_page_index_too_large(client):
    response = await client.get(
        "/api/v1/order", params={"page": "10000000000000000000"},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation failed"
    assert "page" in body["errors"]


async def test_list_orders_highest_page_index_is_empty_last_page(client):
    await create_order(client)
    response = await client.get(
        "/api/v1/order", params={"page": max_page_index(20), "size": 20},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["content"] == []
    assert body["last"] is True
    assert body["totalElements"] == 1


async def test_list_orders_size_zero(client):
    response = await client.get("/api/v1/order", params={"size": 0})
    assert response.status_code == 400
    assert "size" in response.json()["errors"]


@pytest.mark.parametrize("sort", ["password", "amount,sideways"])
async def test_list_orders_bad_sort(client, sort):
    response = await client.get("/api/v1/order", params={"sort": sort})
    assert response.status_code == 400
    assert "sort" in response.json()["errors"]


async def test_list_orders_status_filter(client):
    first = await create_order(client)
    await create_order(client)
    await walk_order(client, first["id"], "confirm")
    body = (await client.get(
        "/api/v1/order", params={"status": "CONFIRMED"},
    )).json()
    assert [o["id"] for o in body["content"]] == [first["id"]]


async def test_happy_path_to_delivered(client):
    order = await create_order(client)
    body = await walk_order(client, order["id"], "confirm", "ship", "deliver")
    assert body["status"] == "DELIVERED"
    assert body["updatedAt"] is not None
    assert body["createdAt"] == order["createdAt"]


async def test_cancel_shipped_order_rejected(client):
    order = await create_order(client)
    await walk_order(client, order["id"], "confirm", "ship")
    response = await client.patch(f"/api/v1/order/{order['id']}/cancel")
    assert response.status_code == 400
    body = response.json()
    assert "shipped" in body["message"]
    assert body["errors"] == {}

    current = (await client.get(f"/api/v1/order/{order['id']}")).json()
    assert current["status"] == "SHIPPED"


async def test_cancel_twice(client):
    order = await create_order(client)
    first = await client.patch(f"/api/v1/order/{order['id']}/cancel")
    assert first.status_code == 200
    assert first.json()["status"] == "CANCELLED"
    second = await client.patch(f"/api/v1/order/{order['id']}/cancel")
    assert second.status_code == 400
    assert "cancelled" in second.json()["message"]


async def test_transition_unknown_order_404(client):
    response = await client.patch("/api/v1/order/31337/confirm")
    assert response.status_code == 404
    assert response.json()["message"] == "Order not found with id: 31337"


async def test_unknown_operation_rejected(client):
    order = await create_order(client)
    response = await client.patch(f"/api/v1/order/{order['id']}/refund")
    assert response.status_code == 400
    assert "operation" in response.json()["errors"]


async def test_allowed_operations(client):
    order = await create_order(client)
    body = (await client.get(f"/api/v1/order/{order['id']}/operations")).json()
    assert body == {"operations": ["confirm", "cancel"]}

    await walk_order(client, order["id"], "confirm", "ship", "deliver")
    body = (await client.get(f"/api/v1/order/{order['id']}/operations")).json()
    assert body == {"operations": []}


async def test_allowed_operations_unknown_order(client):
    response = await client.get("/api/v1/order/404/operations")
    assert response.status_code == 404

"""Invoice routes — HTTP contract of /api/v1/invoice and its dependency on orders.

Tests cover:
    - POST: 201 for an invoiceable order, amount and email copied
    - POST: 404 for an unknown order, 400 for pending order or duplicate invoice
    - PATCH pay / void and rejection of pay after void
    - GET by id and list with status filter
"""

from tests.api.helpers import create_order, walk_order


async def _confirmed_order(client, amount=42.5) -> dict:
    order = await create_order(client, amount=amount)
    return await walk_order(client, order["id"], "confirm")


async def test_issue_invoice(client):
    order = await _confirmed_order(client)
    response = await client.post("/api/v1/invoice", json={"orderId": order["id"]})
    assert response.status_code == 201
    body = response.json()
    assert body["orderId"] == order["id"]
    assert body["amount"] == 42.5
    assert body["email"] == order["email"]
    assert body["status"] == "ISSUED"


async def test_issue_invoice_unknown_order(client):
    response = await client.post("/api/v1/invoice", json={"orderId": 8080})
    assert response.status_code == 404
    assert response.json()["message"] == "Order not found with id: 8080"


async def test_issue_invoice_for_pending_order(client):
    order = await create_order(client)
    response = await client.post("/api/v1/invoice", json={"orderId": order["id"]})
    assert response.status_code == 400
    assert "pending" in response.json()["message"]


async def test_issue_second_invoice_rejected(client):
    order = await _confirmed_order(client)
    first = await client.post("/api/v1/invoice", json={"orderId": order["id"]})
    assert first.status_code == 201
    second = await client.post("/api/v1/invoice", json={"orderId": order["id"]})
    assert second.status_code == 400
    assert "open invoice" in second.json()["message"]


async def test_issue_invoice_bad_order_id(client):
    response = await client.post("/api/v1/invoice", json={"orderId": 0})
    assert response.status_code == 400
    assert "orderId" in response.json()["errors"]


async def test_pay_then_void_rejected(client):
    order = await _confirmed_order(client)
    invoice = (await client.post(
        "/api/v1/invoice", json={"orderId": order["id"]},
    )).json()

    paid = await client.patch(f"/api/v1/invoice/{invoice['id']}/pay")
    assert paid.status_code == 200
    assert paid.json()["status"] == "PAID"

    voided = await client.patch(f"/api/v1/invoice/{invoice['id']}/void")
    assert voided.status_code == 400
    assert voided.json()["message"] == "Cannot void invoice in status paid"


async def test_get_invoice_and_404(client):
    order = await _confirmed_order(client)
    invoice = (await client.post(
        "/api/v1/invoice", json={"orderId": order["id"]},
    )).json()
    found = await client.get(f"/api/v1/invoice/{invoice['id']}")
    assert found.status_code == 200
    assert found.json()["id"] == invoice["id"]

    missing = await client.get("/api/v1/invoice/999")
    assert missing.status_code == 404
    assert missing.json()["message"] == "Invoice not found with id: 999"


async def test_list_invoices_by_status(client):
    ids = []
    for _ in range(3):
        order = await _confirmed_order(client)
        invoice = (await client.post(
            "/api/v1/invoice", json={"orderId": order["id"]},
        )).json()
        ids.append(invoice["id"])
    await client.patch(f"/api/v1/invoice/{ids[1]}/void")

    body = (await client.get(
        "/api/v1/invoice", params={"status": "ISSUED", "sort": "id,asc"},
    )).json()
    assert body["totalElements"] == 2
    assert [i["id"] for i in body["content"]] == [ids[0], ids[2]]


async def test_list_invoices_rejects_order_sort_keys(client):
    response = await client.get("/api/v1/invoice", params={"sort": "email"})
    assert response.status_code == 400
    assert "sort" in response.json()["errors"]

"""HTTP helpers shared by the route tests."""


async def create_order(client, email="buyer@example.com", amount=99.99) -> dict:
    response = await client.post(
        "/api/v1/order", json={"email": email, "amount": amount},
    )
    assert response.status_code == 201, response.text
    return response.json()


async def walk_order(client, order_id: int, *operations: str) -> dict:
    """PATCH each operation in turn; returns the last response body."""
    body: dict = {}
    for operation in operations:
        response = await client.patch(f"/api/v1/order/{order_id}/{operation}")
        assert response.status_code == 200, response.text
        body = response.json()
    return body

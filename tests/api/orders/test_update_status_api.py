from tests.factories import auth_headers, product_by_name, create_customer


async def place_order(client, customer, restaurant):
    salmon = product_by_name(restaurant, "Grilled salmon")
    response = await client.post(
        "/orders",
        json={
            "establishmentId": restaurant.id,
            "deliveryAddress": "Rua Augusta, 500",
            "items": [{"productId": salmon.id, "quantity": 1}]
        },
        headers=auth_headers(customer)
    )
    assert response.status_code == 201
    return response.json()["order"]["id"]


async def test_establishment_moves_order_forward(client, customer, restaurant):
    order_id = await place_order(client, customer, restaurant)
    headers = auth_headers(restaurant.user)

    for target in ("CONFIRMED", "PREPARING", "READY", "DELIVERED"):
        response = await client.patch(f"/orders/{order_id}/status", json={"status": target}, headers=headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Order status updated"
        assert response.json()["order"]["status"] == target


async def test_invalid_transition_response(client, customer, restaurant):
    order_id = await place_order(client, customer, restaurant)
    headers = auth_headers(restaurant.user)

    response = await client.patch(f"/orders/{order_id}/status", json={"status": "DELIVERED"}, headers=headers)

    assert response.status_code == 400
    assert response.json() == {
        "detail": "Cannot change order status from PENDING to DELIVERED",
        "currentStatus": "PENDING",
        "allowedStatuses": ["CONFIRMED", "CANCELLED"]
    }

    detail = await client.get(f"/orders/{order_id}", headers=headers)
    assert detail.json()["order"]["status"] == "PENDING"


async def test_cancelled_is_terminal(client, customer, restaurant):
    order_id = await place_order(client, customer, restaurant)
    headers = auth_headers(restaurant.user)

    await client.patch(f"/orders/{order_id}/status", json={"status": "CANCELLED"}, headers=headers)
    response = await client.patch(f"/orders/{order_id}/status", json={"status": "CONFIRMED"}, headers=headers)

    assert response.status_code == 400
    assert response.json()["allowedStatuses"] == []


async def test_customer_cannot_change_status(client, customer, restaurant):
    order_id = await place_order(client, customer, restaurant)

    response = await client.patch(
        f"/orders/{order_id}/status", json={"status": "CANCELLED"}, headers=auth_headers(customer)
    )

    assert response.status_code == 403


async def test_other_establishment_gets_not_found(client, customer, restaurant, bakery):
    order_id = await place_order(client, customer, restaurant)

    response = await client.patch(
        f"/orders/{order_id}/status", json={"status": "CONFIRMED"}, headers=auth_headers(bakery.user)
    )

    assert response.status_code == 404


async def test_unknown_status_value(client, customer, restaurant):
    order_id = await place_order(client, customer, restaurant)

    response = await client.patch(
        f"/orders/{order_id}/status", json={"status": "SHIPPED"}, headers=auth_headers(restaurant.user)
    )

    assert response.status_code == 422


async def test_list_and_detail_are_scoped(client, session, customer, restaurant):
    order_id = await place_order(client, customer, restaurant)
    stranger = create_customer(session, email="stranger@example.com")

    mine = await client.get("/orders", headers=auth_headers(customer))
    assert mine.status_code == 200
    assert [o["id"] for o in mine.json()["orders"]] == [order_id]
    assert mine.json()["pagination"] == {"page": 1, "limit": 10, "total": 1, "pages": 1}

    received = await client.get("/orders", params={"status": "PENDING"}, headers=auth_headers(restaurant.user))
    assert [o["id"] for o in received.json()["orders"]] == [order_id]

    theirs = await client.get("/orders", headers=auth_headers(stranger))
    assert theirs.json()["orders"] == []

    hidden = await client.get(f"/orders/{order_id}", headers=auth_headers(stranger))
    assert hidden.status_code == 404

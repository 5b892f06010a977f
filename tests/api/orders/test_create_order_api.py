from models import Order, OrderItem
from tests.factories import auth_headers, product_by_name


def order_payload(establishment, *lines):
    return {
        "establishmentId": establishment.id,
        "deliveryAddress": "Rua Augusta, 500 - Consolacao",
        "notes": "Ring twice",
        "items": [{"productId": product.id, "quantity": quantity} for product, quantity in lines]
    }


async def test_create_order(client, customer, restaurant):
    salmon = product_by_name(restaurant, "Grilled salmon")
    falafel = product_by_name(restaurant, "Falafel plate")

    response = await client.post(
        "/orders", json=order_payload(restaurant, (salmon, 1), (falafel, 2)), headers=auth_headers(customer)
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Order created"
    order = body["order"]
    assert order["status"] == "PENDING"
    assert order["total"] == 79.8
    assert order["establishmentName"] == "Kosher Delights"
    assert order["userName"] == "Test Customer"
    assert [(i["productName"], i["quantity"], i["price"], i["subtotal"]) for i in order["items"]] == [
        ("Grilled salmon", 1, 48.9, 48.9),
        ("Falafel plate", 2, 12.5, 25.0),
    ]


async def test_client_supplied_price_is_rejected(client, customer, restaurant):
    salmon = product_by_name(restaurant, "Grilled salmon")
    payload = order_payload(restaurant, (salmon, 1))
    payload["items"][0]["price"] = 0.01

    response = await client.post("/orders", json=payload, headers=auth_headers(customer))

    assert response.status_code == 422


async def test_minimum_order_response(client, session, customer, restaurant):
    falafel = product_by_name(restaurant, "Falafel plate")

    response = await client.post(
        "/orders", json=order_payload(restaurant, (falafel, 1)), headers=auth_headers(customer)
    )

    assert response.status_code == 400
    assert response.json()["minOrder"] == 30.0
    assert response.json()["currentTotal"] == 18.4
    assert session.query(Order).count() == 0


async def test_inactive_product_response(client, session, customer, restaurant):
    soup = product_by_name(restaurant, "Seasonal soup")

    response = await client.post(
        "/orders", json=order_payload(restaurant, (soup, 2)), headers=auth_headers(customer)
    )

    assert response.status_code == 400
    assert session.query(OrderItem).count() == 0


async def test_establishment_cannot_order(client, restaurant, bakery):
    challah = product_by_name(bakery, "Challah")

    response = await client.post(
        "/orders", json=order_payload(bakery, (challah, 1)), headers=auth_headers(restaurant.user)
    )

    assert response.status_code == 403


async def test_unknown_establishment(client, customer, restaurant):
    salmon = product_by_name(restaurant, "Grilled salmon")
    payload = order_payload(restaurant, (salmon, 1))
    payload["establishmentId"] = 9999

    response = await client.post("/orders", json=payload, headers=auth_headers(customer))

    assert response.status_code == 404


async def test_empty_items_rejected(client, customer, restaurant):
    payload = order_payload(restaurant)

    response = await client.post("/orders", json=payload, headers=auth_headers(customer))

    assert response.status_code == 422


async def test_requires_authentication(client, restaurant):
    salmon = product_by_name(restaurant, "Grilled salmon")

    response = await client.post("/orders", json=order_payload(restaurant, (salmon, 1)))

    assert response.status_code == 401

from tests.factories import auth_headers, product_by_name


async def test_profile(client, restaurant):
    response = await client.get("/establishment/profile", headers=auth_headers(restaurant.user))

    assert response.status_code == 200
    assert response.json()["name"] == "Kosher Delights"
    assert response.json()["status"] == "APPROVED"
    assert response.json()["minDeliveryOrder"] == 30.0


async def test_customer_is_forbidden(client, customer):
    response = await client.get("/establishment/profile", headers=auth_headers(customer))

    assert response.status_code == 403


async def test_update_profile(client, restaurant):
    response = await client.patch(
        "/establishment/profile",
        json={
            "name": "Kosher Delights Jardins",
            "phone": "(11) 99999-9999",
            "street": "Rua Oscar Freire",
            "number": "900",
            "city": "Sao Paulo",
            "state": "SP",
            "cep": "01426-001",
            "email": "restaurant@example.com",
            "type": "RESTAURANT"
        },
        headers=auth_headers(restaurant.user)
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Kosher Delights Jardins"
    assert body["phone"] == "+5511999999999"
    assert body["address"] == "Rua Oscar Freire, 900"
    assert body["zipCode"] == "01426-001"


async def test_delivery_settings(client, restaurant):
    response = await client.put(
        "/establishment/delivery-settings",
        json={"hasDelivery": True, "deliveryFee": 7.5, "minDeliveryOrder": 40, "deliveryRadius": 5},
        headers=auth_headers(restaurant.user)
    )

    assert response.status_code == 200
    assert response.json()["deliveryFee"] == 7.5
    assert response.json()["minDeliveryOrder"] == 40.0


async def test_replace_operating_hours(client, restaurant):
    headers = auth_headers(restaurant.user)
    hours = [
        {"dayOfWeek": 5, "openTime": "11:00", "closeTime": "15:00"},
        {"dayOfWeek": 0, "openTime": "12:00", "closeTime": "22:00", "isOpen": False},
    ]

    response = await client.put("/establishment/operating-hours", json={"hours": hours}, headers=headers)

    assert response.status_code == 200
    assert [h["dayOfWeek"] for h in response.json()] == [0, 5]

    stored = await client.get("/establishment/operating-hours", headers=headers)
    assert stored.json() == [
        {"dayOfWeek": 0, "openTime": "12:00", "closeTime": "22:00", "isOpen": False},
        {"dayOfWeek": 5, "openTime": "11:00", "closeTime": "15:00", "isOpen": True},
    ]


async def test_midnight_crossing_hours_rejected(client, restaurant):
    headers = auth_headers(restaurant.user)

    response = await client.put(
        "/establishment/delivery-hours",
        json={"hours": [{"dayOfWeek": 6, "openTime": "20:00", "closeTime": "02:00"}]},
        headers=headers
    )

    assert response.status_code == 422
    stored = await client.get("/establishment/delivery-hours", headers=headers)
    assert len(stored.json()) == 7


async def test_malformed_time_rejected(client, restaurant):
    response = await client.put(
        "/establishment/operating-hours",
        json={"hours": [{"dayOfWeek": 1, "openTime": "9:00", "closeTime": "17:00"}]},
        headers=auth_headers(restaurant.user)
    )

    assert response.status_code == 422


async def test_category_and_product_crud(client, restaurant):
    headers = auth_headers(restaurant.user)

    created = await client.post("/establishment/categories", json={"name": "Desserts"}, headers=headers)
    assert created.status_code == 201
    category_id = created.json()["id"]

    product = await client.post(
        "/establishment/products",
        json={"name": "Babka", "price": 22.0, "categoryId": category_id, "position": 1},
        headers=headers
    )
    assert product.status_code == 201
    product_id = product.json()["id"]
    assert product.json()["price"] == 22.0

    refused = await client.delete(f"/establishment/categories/{category_id}", headers=headers)
    assert refused.status_code == 400

    deleted = await client.delete(f"/establishment/products/{product_id}", headers=headers)
    assert deleted.json() == {"message": "Product deleted"}

    deleted = await client.delete(f"/establishment/categories/{category_id}", headers=headers)
    assert deleted.json() == {"message": "Category deleted"}


async def test_cannot_touch_other_establishment_products(client, restaurant, bakery):
    challah = product_by_name(bakery, "Challah")

    response = await client.delete(f"/establishment/products/{challah.id}", headers=auth_headers(restaurant.user))

    assert response.status_code == 404

def add(client, auth, product_id, quantity, size="M"):
    return client.post("/cart", headers=auth, json={"productId": product_id, "quantity": quantity, "size": size})


def test_no_orders(client, auth):
    assert client.get("/orders", headers=auth).get_json() == []


def test_orders_nested_newest_first(client, auth, address_id, make_product):
    shirt = make_product(name="Shirt", price="20.00", stock=20, image="shirt.png", description="Cotton")
    mug = make_product(name="Mug", price="8.00", stock=20, image="mug.png", description="Ceramic")

    add(client, auth, shirt, 1, size="L")
    first = client.post("/checkout", headers=auth, json={"addressId": address_id, "paymentMethod": "cod"})

    add(client, auth, mug, 2, size="")
    add(client, auth, shirt, 1, size="S")
    second = client.post("/checkout", headers=auth, json={"addressId": address_id, "paymentMethod": "card"})

    orders = client.get("/orders", headers=auth).get_json()
    assert [o["order_id"] for o in orders] == [second.get_json()["orderId"], first.get_json()["orderId"]]

    latest = orders[0]
    assert latest["total"] == 36.0
    assert latest["payment_method"] == "card"
    assert {i["product_name"] for i in latest["items"]} == {"Mug", "Shirt"}
    mug_line = next(i for i in latest["items"] if i["product_name"] == "Mug")
    assert mug_line == {
        "product_name": "Mug",
        "quantity": 2,
        "size": "",
        "price": 8.0,
        "image": "mug.png",
        "description": "Ceramic",
    }
    assert len(orders[1]["items"]) == 1

def test_cart_created_on_first_use(client, make_user):
    _, headers = make_user("empty@glyzier.io")
    assert client.get("/api/cart/count", headers=headers).json() == {"count": 0}
    cart = client.get("/api/cart", headers=headers).json()
    assert cart["items"] == []
    assert cart["total_item_count"] == 0
    assert cart["total_price"] == 0


def test_line_totals_use_snapshot_price(client, make_user, make_seller, make_product):
    _, seller_headers, _ = make_seller("snap-seller@glyzier.io")
    product = make_product(seller_headers, price=12.5, stock=10)
    _, headers = make_user("snap@glyzier.io")

    added = client.post("/api/cart/add", json={"product_id": product["product_id"], "quantity": 2}, headers=headers)
    assert added.status_code == 200

    # A later price change does not move the snapshot
    client.put(f"/api/products/{product['product_id']}", json={"price": 99.0}, headers=seller_headers)

    cart = client.get("/api/cart", headers=headers).json()
    item = cart["items"][0]
    assert item["price_snapshot"] == 12.5
    assert item["current_price"] == 99.0
    assert item["line_total"] == 25.0
    assert cart["total_price"] == 25.0
    assert cart["total_item_count"] == 2


def test_adding_again_sums_quantities_within_stock(client, make_user, make_seller, make_product):
    _, seller_headers, _ = make_seller("sum-seller@glyzier.io")
    product = make_product(seller_headers, stock=5)
    _, headers = make_user("sum@glyzier.io")
    pid = product["product_id"]

    client.post("/api/cart/add", json={"product_id": pid, "quantity": 3}, headers=headers)
    cart = client.post("/api/cart/add", json={"product_id": pid, "quantity": 2}, headers=headers).json()
    assert len(cart["items"]) == 1
    assert cart["items"][0]["quantity"] == 5

    too_many = client.post("/api/cart/add", json={"product_id": pid, "quantity": 1}, headers=headers)
    assert too_many.status_code == 400
    assert client.get("/api/cart/count", headers=headers).json() == {"count": 5}


def test_unlimited_stock_short_circuits(client, make_user, make_seller, make_product):
    _, seller_headers, _ = make_seller("digital-seller@glyzier.io")
    product = make_product(seller_headers, stock=-1, product_type="Digital")
    _, headers = make_user("digital@glyzier.io")

    response = client.post("/api/cart/add", json={"product_id": product["product_id"], "quantity": 500},
                           headers=headers)
    assert response.status_code == 200
    assert response.json()["items"][0]["is_unlimited"] is True


def test_add_rejections(client, make_user, make_seller, make_product):
    _, seller_headers, _ = make_seller("reject-seller@glyzier.io")
    product = make_product(seller_headers, stock=3)
    _, headers = make_user("reject@glyzier.io")
    pid = product["product_id"]

    assert client.post("/api/cart/add", json={"product_id": pid, "quantity": 0}, headers=headers).status_code == 400
    assert client.post("/api/cart/add", json={"product_id": 9999, "quantity": 1}, headers=headers).status_code == 404

    client.delete(f"/api/products/{pid}", headers=seller_headers)
    inactive = client.post("/api/cart/add", json={"product_id": pid, "quantity": 1}, headers=headers)
    assert inactive.status_code == 400


def test_update_remove_and_clear(client, make_user, make_seller, make_product):
    _, seller_headers, _ = make_seller("edit-seller@glyzier.io")
    first = make_product(seller_headers, name="First Piece", stock=4)
    second = make_product(seller_headers, name="Second Piece", stock=4)
    _, headers = make_user("edit@glyzier.io")

    client.post("/api/cart/add", json={"product_id": first["product_id"], "quantity": 1}, headers=headers)
    client.post("/api/cart/add", json={"product_id": second["product_id"], "quantity": 1}, headers=headers)

    updated = client.put(f"/api/cart/update/{first['product_id']}", json={"quantity": 4}, headers=headers)
    assert updated.status_code == 200
    assert client.put(f"/api/cart/update/{first['product_id']}", json={"quantity": 5},
                      headers=headers).status_code == 400
    assert client.put(f"/api/cart/update/{first['product_id']}", json={"quantity": 0},
                      headers=headers).status_code == 400
    assert client.put("/api/cart/update/9999", json={"quantity": 1}, headers=headers).status_code == 404

    removed = client.delete(f"/api/cart/remove/{second['product_id']}", headers=headers)
    assert removed.status_code == 200
    assert [i["product_id"] for i in removed.json()["items"]] == [first["product_id"]]
    assert client.delete(f"/api/cart/remove/{second['product_id']}", headers=headers).status_code == 404

    assert client.delete("/api/cart/clear", headers=headers).status_code == 200
    assert client.get("/api/cart/count", headers=headers).json() == {"count": 0}

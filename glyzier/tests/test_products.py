def test_only_sellers_create_products(client, make_user, make_seller):
    _, buyer_headers = make_user("buyer@glyzier.io")
    response = client.post("/api/products", json={"product_name": "Poster", "price": 10}, headers=buyer_headers)
    assert response.status_code == 403

    _, seller_headers, seller = make_seller("seller@glyzier.io", "Gallery")
    created = client.post("/api/products", json={
        "product_name": "Poster",
        "type": "Print",
        "price": 10.5,
        "description": "A3 poster",
        "file_keys": ["https://cdn.glyzier.io/poster.jpg"]
    }, headers=seller_headers)
    assert created.status_code == 201
    product = created.json()
    assert product["seller_id"] == seller["seller_id"]
    assert product["seller_name"] == "Gallery"
    assert product["status"] == "ACTIVE"
    assert product["price"] == 10.5
    # New products start with empty stock
    assert product["qty_on_hand"] == 0
    assert product["in_stock"] is False
    assert product["files"][0]["file_type"] == "product_image"
    assert product["files"][0]["file_format"] == "jpg"
    assert product["files"][0]["url"] == "https://cdn.glyzier.io/poster.jpg"


def test_product_validation(client, make_seller):
    _, headers, _ = make_seller("val@glyzier.io")
    assert client.post("/api/products", json={"product_name": "ab", "price": 10}, headers=headers).status_code == 422
    assert client.post("/api/products", json={"product_name": "Valid", "price": 0}, headers=headers).status_code == 422
    bad_status = client.post("/api/products", json={"product_name": "Valid", "price": 5, "status": "HIDDEN"},
                             headers=headers)
    assert bad_status.status_code == 400


def test_seller_cannot_touch_other_sellers_product(client, make_seller, make_product):
    _, owner_headers, _ = make_seller("owner@glyzier.io", "Owner")
    _, other_headers, _ = make_seller("other@glyzier.io", "Other")
    product = make_product(owner_headers)
    pid = product["product_id"]

    update = client.put(f"/api/products/{pid}", json={"price": 1}, headers=other_headers)
    assert update.status_code == 403
    assert update.json()["detail"] == "You do not have permission to update this product"

    assert client.delete(f"/api/products/{pid}", headers=other_headers).status_code == 403
    assert client.post(f"/api/products/{pid}/inventory", json={"qty_on_hand": 5},
                       headers=other_headers).status_code == 403

    unchanged = client.get(f"/api/products/{pid}").json()
    assert unchanged["price"] == 20.0
    assert unchanged["status"] == "ACTIVE"
    assert unchanged["qty_on_hand"] == 10


def test_update_replaces_image_files(client, make_seller):
    _, headers, _ = make_seller("imgs@glyzier.io")
    product = client.post("/api/products", json={
        "product_name": "Gallery Set", "price": 12, "file_keys": ["https://a.io/1.png", "https://a.io/2.png"]
    }, headers=headers).json()

    updated = client.put(f"/api/products/{product['product_id']}", json={
        "product_name": "Gallery Set v2", "file_keys": ["https://a.io/3.webp"]
    }, headers=headers).json()
    assert updated["product_name"] == "Gallery Set v2"
    assert [f["file_key"] for f in updated["files"]] == ["https://a.io/3.webp"]
    assert updated["files"][0]["file_format"] == "webp"


def test_inventory_endpoint(client, make_seller, make_product):
    _, headers, _ = make_seller("stock@glyzier.io")
    product = make_product(headers, stock=None)
    pid = product["product_id"]

    unlimited = client.post(f"/api/products/{pid}/inventory", json={"qty_on_hand": -1}, headers=headers)
    assert unlimited.status_code == 200
    assert unlimited.json()["is_unlimited"] is True
    assert unlimited.json()["available_quantity"] is None
    assert unlimited.json()["in_stock"] is True

    assert client.post(f"/api/products/{pid}/inventory", json={"qty_on_hand": -2},
                       headers=headers).status_code == 422

    view = client.get(f"/api/products/{pid}").json()
    assert view["is_unlimited"] is True


def test_soft_delete_hides_product_from_listings(client, make_seller, make_product):
    _, headers, seller = make_seller("soft@glyzier.io")
    keep = make_product(headers, name="Keep Me")
    gone = make_product(headers, name="Remove Me")

    response = client.delete(f"/api/products/{gone['product_id']}", headers=headers)
    assert response.status_code == 200

    # The row still exists, marked DELETED
    detail = client.get(f"/api/products/{gone['product_id']}")
    assert detail.status_code == 200
    assert detail.json()["status"] == "DELETED"

    listing = client.get("/api/products").json()
    assert [p["product_id"] for p in listing["products"]] == [keep["product_id"]]
    assert listing["total_items"] == 1

    by_seller = client.get(f"/api/products/seller/{seller['seller_id']}").json()
    assert [p["product_id"] for p in by_seller] == [keep["product_id"]]

    search = client.get("/api/products/search", params={"query": "me"}).json()
    assert [p["product_id"] for p in search["products"]] == [keep["product_id"]]


def test_listing_is_paginated_newest_first(client, make_seller, make_product):
    _, headers, _ = make_seller("pages@glyzier.io")
    ids = [make_product(headers, name=f"Artwork {i}")["product_id"] for i in range(5)]

    first = client.get("/api/products", params={"page": 0, "size": 2}).json()
    assert [p["product_id"] for p in first["products"]] == [ids[4], ids[3]]
    assert first["total_pages"] == 3
    assert first["has_next"] is True
    assert first["has_prev"] is False

    last = client.get("/api/products", params={"page": 2, "size": 2}).json()
    assert [p["product_id"] for p in last["products"]] == [ids[0]]
    assert last["has_next"] is False


def test_search_by_name_and_category(client, make_seller, make_product):
    _, headers, _ = make_seller("search@glyzier.io")
    make_product(headers, name="Blue Ocean", product_type="Print")
    digital = make_product(headers, name="Ocean Pack", product_type="Digital")
    make_product(headers, name="Red Desert", product_type="Print")

    result = client.get("/api/products/search", params={"query": "OCEAN"}).json()
    assert result["count"] == 2
    assert result["query"] == "OCEAN"
    assert "category" not in result or result["category"] is None

    filtered = client.get("/api/products/search", params={"query": "ocean", "category": "digital"}).json()
    assert [p["product_id"] for p in filtered["products"]] == [digital["product_id"]]
    assert filtered["category"] == "digital"

    assert client.get("/api/products/search", params={"query": "   "}).status_code == 400


def test_search_treats_wildcards_literally(client, make_seller, make_product):
    _, headers, _ = make_seller("wildcards@glyzier.io")
    percent = make_product(headers, name="100% Linen Print")
    underscore = make_product(headers, name="Sunset_Study")
    make_product(headers, name="Plain Canvas")

    by_percent = client.get("/api/products/search", params={"query": "%"}).json()
    assert [p["product_id"] for p in by_percent["products"]] == [percent["product_id"]]

    by_underscore = client.get("/api/products/search", params={"query": "_"}).json()
    assert [p["product_id"] for p in by_underscore["products"]] == [underscore["product_id"]]


def test_missing_product_and_seller(client):
    assert client.get("/api/products/9999").status_code == 404
    assert client.get("/api/products/seller/9999").status_code == 404

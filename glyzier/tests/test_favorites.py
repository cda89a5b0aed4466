def test_adding_a_favorite_twice_is_idempotent(client, db_session, make_user, make_seller, make_product):
    _, seller_headers, _ = make_seller("fav-seller@glyzier.io")
    product = make_product(seller_headers)
    _, headers = make_user("fan@glyzier.io")
    pid = product["product_id"]

    first = client.post(f"/api/favorites/{pid}", headers=headers)
    second = client.post(f"/api/favorites/{pid}", headers=headers)
    assert first.status_code == 201
    assert second.status_code == 201
    assert first.json()["favorite_id"] == second.json()["favorite_id"]

    assert client.get("/api/favorites/count", headers=headers).json() == {"count": 1}
    favorites = client.get("/api/favorites", headers=headers).json()
    assert [f["product_id"] for f in favorites] == [pid]
    assert favorites[0]["product_name"] == "Mountain Print"


def test_check_and_remove(client, make_user, make_seller, make_product):
    _, seller_headers, _ = make_seller("check-seller@glyzier.io")
    product = make_product(seller_headers)
    _, headers = make_user("checker@glyzier.io")
    pid = product["product_id"]

    assert client.get(f"/api/favorites/check/{pid}", headers=headers).json() == {"is_favorited": False}
    client.post(f"/api/favorites/{pid}", headers=headers)
    assert client.get(f"/api/favorites/check/{pid}", headers=headers).json() == {"is_favorited": True}
    assert client.get("/api/favorites/check/9999", headers=headers).json() == {"is_favorited": False}

    assert client.delete(f"/api/favorites/{pid}", headers=headers).status_code == 200
    assert client.delete(f"/api/favorites/{pid}", headers=headers).status_code == 404
    assert client.get("/api/favorites/count", headers=headers).json() == {"count": 0}


def test_favorite_unknown_product(client, make_user):
    _, headers = make_user("nofav@glyzier.io")
    assert client.post("/api/favorites/9999", headers=headers).status_code == 404


def test_favorites_are_per_user(client, make_user, make_seller, make_product):
    _, seller_headers, _ = make_seller("per-user-seller@glyzier.io")
    product = make_product(seller_headers)
    _, alice = make_user("alice@glyzier.io")
    _, bob = make_user("bob@glyzier.io")

    client.post(f"/api/favorites/{product['product_id']}", headers=alice)
    assert client.get("/api/favorites", headers=bob).json() == []

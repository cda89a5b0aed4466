def test_me_reports_seller_status(client, make_user):
    _, headers = make_user("me@glyzier.io", display_name="Me")
    me = client.get("/api/users/me", headers=headers).json()
    assert me["email"] == "me@glyzier.io"
    assert me["is_seller"] is False
    assert me["seller_id"] is None

    seller = client.post("/api/sellers/register", json={"seller_name": "My Shop"}, headers=headers).json()
    me = client.get("/api/users/me", headers=headers).json()
    assert me["is_seller"] is True
    assert me["seller_id"] == seller["seller_id"]


def test_update_profile(client, make_user):
    _, headers = make_user("profile@glyzier.io")
    response = client.put("/api/users/profile", json={"display_name": "New Name", "phone_number": "555-0100"},
                          headers=headers)
    assert response.status_code == 200
    assert response.json()["user"]["display_name"] == "New Name"
    assert client.get("/api/users/me", headers=headers).json()["phone_number"] == "555-0100"


def test_change_password_rules(client, make_user):
    _, headers = make_user("change@glyzier.io")

    wrong_current = client.put("/api/users/change-password", json={
        "current_password": "wrong123", "new_password": "newpass1", "confirm_password": "newpass1"
    }, headers=headers)
    assert wrong_current.status_code == 400

    mismatch = client.put("/api/users/change-password", json={
        "current_password": "secret123", "new_password": "newpass1", "confirm_password": "newpass2"
    }, headers=headers)
    assert mismatch.status_code == 400

    too_short = client.put("/api/users/change-password", json={
        "current_password": "secret123", "new_password": "abc", "confirm_password": "abc"
    }, headers=headers)
    assert too_short.status_code == 400

    ok = client.put("/api/users/change-password", json={
        "current_password": "secret123", "new_password": "newpass1", "confirm_password": "newpass1"
    }, headers=headers)
    assert ok.status_code == 200
    login = client.post("/api/auth/login", json={"email": "change@glyzier.io", "password": "newpass1"})
    assert login.status_code == 200

def test_conversation_is_shared_by_the_pair(client, make_user):
    alice, alice_headers = make_user("alice@glyzier.io", display_name="Alice")
    bob, bob_headers = make_user("bob@glyzier.io", display_name="Bob")

    started = client.post("/api/conversations", json={"recipient_user_id": bob["user_id"]}, headers=alice_headers)
    assert started.status_code == 201
    conversation = started.json()
    assert conversation["other_user_id"] == bob["user_id"]
    assert conversation["other_user_name"] == "Bob"
    assert conversation["other_user_email"] == "bob@glyzier.io"

    reverse = client.post("/api/conversations", json={"recipient_user_id": alice["user_id"]}, headers=bob_headers)
    assert reverse.json()["conversation_id"] == conversation["conversation_id"]
    assert reverse.json()["other_user_id"] == alice["user_id"]


def test_conversation_rejections(client, make_user):
    alice, alice_headers = make_user("self@glyzier.io")
    assert client.post("/api/conversations", json={"recipient_user_id": alice["user_id"]},
                       headers=alice_headers).status_code == 400
    assert client.post("/api/conversations", json={"recipient_user_id": 9999},
                       headers=alice_headers).status_code == 404


def test_only_participants_can_read_or_write(client, make_user):
    _, alice_headers = make_user("a@glyzier.io")
    bob, bob_headers = make_user("b@glyzier.io")
    _, eve_headers = make_user("eve@glyzier.io")

    conversation_id = client.post("/api/conversations", json={"recipient_user_id": bob["user_id"]},
                                  headers=alice_headers).json()["conversation_id"]

    assert client.get(f"/api/conversations/{conversation_id}", headers=eve_headers).status_code == 403
    assert client.get(f"/api/messages/{conversation_id}", headers=eve_headers).status_code == 403
    assert client.post("/api/messages", json={"conversation_id": conversation_id, "content": "hi"},
                       headers=eve_headers).status_code == 403
    assert client.get("/api/conversations/9999", headers=alice_headers).status_code == 404
    assert client.get(f"/api/conversations/{conversation_id}", headers=bob_headers).status_code == 200


def test_messages_are_ordered_and_bump_the_conversation(client, make_user):
    _, alice_headers = make_user("sender@glyzier.io", display_name="Sender")
    bob, bob_headers = make_user("first@glyzier.io")
    carol, _ = make_user("second@glyzier.io")

    with_bob = client.post("/api/conversations", json={"recipient_user_id": bob["user_id"]},
                           headers=alice_headers).json()["conversation_id"]
    with_carol = client.post("/api/conversations", json={"recipient_user_id": carol["user_id"]},
                             headers=alice_headers).json()["conversation_id"]

    inbox = client.get("/api/conversations", headers=alice_headers).json()
    assert [c["conversation_id"] for c in inbox] == [with_carol, with_bob]

    first = client.post("/api/messages", json={"conversation_id": with_bob, "content": "Hello"}, headers=alice_headers)
    assert first.status_code == 201
    assert first.json()["sender_name"] == "Sender"
    client.post("/api/messages", json={"conversation_id": with_bob, "content": "Hi back"}, headers=bob_headers)

    inbox = client.get("/api/conversations", headers=alice_headers).json()
    assert [c["conversation_id"] for c in inbox] == [with_bob, with_carol]

    messages = client.get(f"/api/messages/{with_bob}", headers=bob_headers).json()
    assert [m["content"] for m in messages] == ["Hello", "Hi back"]

    blank = client.post("/api/messages", json={"conversation_id": with_bob, "content": "   "}, headers=alice_headers)
    assert blank.status_code == 400

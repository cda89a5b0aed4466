def test_create_and_list_posts(client, make_user):
    _, headers = make_user("poster@glyzier.io", display_name="Poster")
    first = client.post("/api/posts", json={"content": "First post"}, headers=headers)
    assert first.status_code == 201
    second = client.post("/api/posts", json={"content": "Second post"}, headers=headers).json()

    posts = client.get("/api/posts").json()
    assert [p["post_id"] for p in posts] == [second["post_id"], first.json()["post_id"]]
    assert posts[0]["user_display_name"] == "Poster"
    assert posts[0]["liked"] is False

    assert client.post("/api/posts", json={"content": "x" * 501}, headers=headers).status_code == 422
    assert client.post("/api/posts", json={"content": "   "}, headers=headers).status_code == 400


def test_like_toggles(client, make_user):
    _, author = make_user("author@glyzier.io")
    _, reader = make_user("reader@glyzier.io")
    post_id = client.post("/api/posts", json={"content": "Like me"}, headers=author).json()["post_id"]

    assert client.post(f"/api/posts/{post_id}/like", headers=reader).json() == {"like_count": 1, "liked": True}
    assert client.post(f"/api/posts/{post_id}/like", headers=author).json() == {"like_count": 2, "liked": True}

    as_reader = client.get("/api/posts", headers=reader).json()[0]
    assert as_reader["like_count"] == 2
    assert as_reader["liked"] is True
    # Anonymous viewers never see a like of their own
    assert client.get("/api/posts").json()[0]["liked"] is False

    assert client.post(f"/api/posts/{post_id}/like", headers=reader).json() == {"like_count": 1, "liked": False}
    assert client.post("/api/posts/9999/like", headers=reader).status_code == 404


def test_comments(client, make_user):
    _, author = make_user("c-author@glyzier.io")
    _, reader = make_user("c-reader@glyzier.io", display_name="Reader")
    post_id = client.post("/api/posts", json={"content": "Discuss"}, headers=author).json()["post_id"]

    first = client.post(f"/api/posts/{post_id}/comments", json={"content": "One"}, headers=reader)
    assert first.status_code == 201
    assert first.json()["user_display_name"] == "Reader"
    client.post(f"/api/posts/{post_id}/comments", json={"content": "Two"}, headers=author)

    comments = client.get(f"/api/posts/{post_id}/comments").json()
    assert [c["content"] for c in comments] == ["One", "Two"]
    assert client.get("/api/posts").json()[0]["comment_count"] == 2

    too_long = client.post(f"/api/posts/{post_id}/comments", json={"content": "y" * 201}, headers=reader)
    assert too_long.status_code == 422
    assert client.get("/api/posts/9999/comments").status_code == 404


def test_delete_permissions_and_cascade(client, db_session, make_user):
    from ..models import Comment, PostLike

    _, author = make_user("d-author@glyzier.io")
    _, other = make_user("d-other@glyzier.io")
    _, admin = make_user("d-admin@glyzier.io", is_admin=True)

    post_id = client.post("/api/posts", json={"content": "Mine"}, headers=author).json()["post_id"]
    client.post(f"/api/posts/{post_id}/like", headers=other)
    client.post(f"/api/posts/{post_id}/comments", json={"content": "Nice"}, headers=other)

    assert client.delete(f"/api/posts/{post_id}", headers=other).status_code == 403
    assert client.delete(f"/api/posts/{post_id}", headers=author).status_code == 200
    assert client.delete(f"/api/posts/{post_id}", headers=author).status_code == 404
    assert db_session.query(Comment).count() == 0
    assert db_session.query(PostLike).count() == 0

    other_post = client.post("/api/posts", json={"content": "Moderate me"}, headers=other).json()["post_id"]
    assert client.delete(f"/api/posts/{other_post}", headers=admin).status_code == 200

from models.community import Comment


def _new_post(client, **overrides):
    body = {"author": "a1", "nickname": "Al", "content": "hello", "image_url": None}
    body.update(overrides)
    return client.post("/api/community", json=body).json()


def test_create_post(client):
    post = _new_post(client)

    assert post["id"] == 1
    assert post["author"] == "a1"
    assert post["nickname"] == "Al"
    assert post["content"] == "hello"
    assert post["likes"] == 0
    assert post["comments"] == []
    assert post["created_at"] is not None


def test_posts_newest_first_with_comments_oldest_first(client):
    older = _new_post(client, content="older")["id"]
    newer = _new_post(client, content="newer")["id"]
    client.post(f"/api/community/{older}/comment", json={"author": "b", "content": "first"})
    client.post(f"/api/community/{older}/comment", json={"author": "c", "content": "second"})

    posts = client.get("/api/community").json()
    assert [p["id"] for p in posts] == [newer, older]
    assert posts[0]["comments"] == []
    assert [c["content"] for c in posts[1]["comments"]] == ["first", "second"]
    # 一覧のコメントには返信を含めない
    assert "replies" not in posts[1]["comments"][0]


def test_like_increments_by_one_each_time(client):
    post_id = _new_post(client)["id"]

    for expected in range(1, 6):
        post = client.post(f"/api/community/{post_id}/like").json()
        assert post["likes"] == expected
        assert "comments" not in post

    [listed] = client.get("/api/community").json()
    assert listed["likes"] == 5


def test_like_missing_post_is_generic_failure(client):
    r = client.post("/api/community/999/like")

    assert r.status_code == 500
    assert r.text == "Internal Server Error"


def test_like_missing_post_broadcasts_nothing(client):
    with client.websocket_connect("/ws") as ws:
        client.post("/api/community/999/like")
        post = _new_post(client)

        # post_updated は飛ばず、次に届くのは new_post
        assert ws.receive_json() == {"event": "new_post", "data": post}


def test_comment_returns_comments_with_replies(client):
    post_id = _new_post(client)["id"]

    comments = client.post(f"/api/community/{post_id}/comment", json={"author": "b", "content": "nice"}).json()
    assert len(comments) == 1
    assert comments[0]["post_id"] == post_id
    assert comments[0]["author"] == "b"
    assert comments[0]["replies"] == []


def test_reply_nests_under_comment(client):
    post_id = _new_post(client)["id"]
    client.post(f"/api/community/{post_id}/comment", json={"author": "b", "content": "c1"})
    comments = client.post(f"/api/community/{post_id}/comment", json={"author": "c", "content": "c2"}).json()
    c1, c2 = comments[0]["id"], comments[1]["id"]

    client.post(f"/api/comments/{c2}/reply", json={"author": "d", "content": "r1", "postId": post_id})
    comments = client.post(f"/api/comments/{c2}/reply", json={"author": "e", "content": "r2", "postId": post_id}).json()

    assert [c["id"] for c in comments] == [c1, c2]
    assert comments[0]["replies"] == []
    assert [r["content"] for r in comments[1]["replies"]] == ["r1", "r2"]
    assert comments[1]["replies"][0]["comment_id"] == c2


def test_reply_without_post_id_returns_no_comments(client, db_session):
    # post_id が NULL のコメントがあっても拾わない
    db_session.add(Comment(post_id=None, author="x", content="orphan"))
    db_session.commit()
    post_id = _new_post(client)["id"]
    comment_id = client.post(f"/api/community/{post_id}/comment", json={"author": "b", "content": "c1"}).json()[0]["id"]

    r = client.post(f"/api/comments/{comment_id}/reply", json={"author": "d", "content": "r1"})
    assert r.status_code == 200
    assert r.json() == []

    # 返信自体は保存されている
    [comment] = client.post(f"/api/comments/{comment_id}/reply", json={"author": "e", "content": "r2", "postId": post_id}).json()
    assert [r["content"] for r in comment["replies"]] == ["r1", "r2"]

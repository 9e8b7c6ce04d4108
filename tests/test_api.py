"""End-to-end HTTP tests through the FastAPI application."""
from __future__ import annotations

from uuid import uuid4

from linkup.services import get_current_user


def _create_post(client, headers, content="hello world", **extra):
    response = client.post("/api/posts", json={"content": content, **extra}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_signup_login_and_profile(client):
    signup = client.post(
        "/api/auth/signup",
        json={"email": "Ada@example.com", "password": "s3cret-pw", "firstName": "Ada", "lastName": "Lovelace"},
    )
    assert signup.status_code == 201, signup.text
    body = signup.json()
    assert body["user"]["email"] == "ada@example.com"
    assert body["user"]["role"] == "user"
    assert body["user"]["status"] == "active"
    assert "passwordHash" not in body["user"]

    duplicate = client.post("/api/auth/signup", json={"email": "ada@example.com", "password": "another-pw"})
    assert duplicate.status_code == 409

    bad_login = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "wrong-pw"})
    assert bad_login.status_code == 401

    login = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "s3cret-pw"})
    assert login.status_code == 200
    headers = {"Authorization": f"Bearer {login.json()['token']}"}

    me = client.get("/api/auth/user", headers=headers)
    assert me.status_code == 200
    assert me.json()["firstName"] == "Ada"

    updated = client.put(
        "/api/auth/user",
        json={"bio": "First programmer", "otherLinks": ["https://ada.example.com"]},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["bio"] == "First programmer"
    assert updated.json()["otherLinks"] == ["https://ada.example.com"]
    assert updated.json()["lastName"] == "Lovelace"


def test_signup_conflicting_with_existing_row_is_409(client, make_user):
    make_user(email="race@example.com")

    response = client.post("/api/auth/signup", json={"email": "race@example.com", "password": "pw-123456"})

    assert response.status_code == 409
    assert client.post("/api/auth/login", json={"email": "race@example.com", "password": "pw-123456"}).status_code == 401


def test_missing_or_bad_token_is_401(client):
    assert client.get("/api/auth/user").status_code == 401
    bad = client.get("/api/auth/user", headers={"Authorization": "Bearer nope"})
    assert bad.status_code == 401


def test_suspended_user_is_refused(client, make_user, auth_headers):
    suspended = make_user(status="suspended")

    response = client.get("/api/auth/user", headers=auth_headers(suspended))

    assert response.status_code == 403


def test_post_payload_uses_camel_case(client, make_user, auth_headers):
    author = make_user(first_name="Ada")

    post = _create_post(client, auth_headers(author), imageUrl="/uploads/a.png")

    assert post["userId"] == str(author.id)
    assert post["imageUrl"] == "/uploads/a.png"
    assert post["likesCount"] == 0
    assert post["commentsCount"] == 0
    assert post["isLiked"] is False
    assert post["user"]["firstName"] == "Ada"


def test_empty_post_without_media_is_rejected(client, make_user, auth_headers):
    response = client.post("/api/posts", json={"content": "   "}, headers=auth_headers(make_user()))

    assert response.status_code == 400


def test_media_only_post_is_accepted(client, make_user, auth_headers):
    post = _create_post(client, auth_headers(make_user()), content="", videoUrl="/uploads/clip.mp4")

    assert post["content"] == ""
    assert post["videoUrl"] == "/uploads/clip.mp4"


def test_like_toggle_over_http(client, make_user, auth_headers):
    author, alice, bob = make_user(), make_user(), make_user()
    post = _create_post(client, auth_headers(author))
    url = f"/api/posts/{post['id']}/like"

    assert client.post(url, headers=auth_headers(alice)).json() == {"liked": True, "likesCount": 1}
    assert client.post(url, headers=auth_headers(bob)).json() == {"liked": True, "likesCount": 2}
    assert client.post(url, headers=auth_headers(alice)).json() == {"liked": False, "likesCount": 1}

    seen_by_bob = client.get(f"/api/posts/{post['id']}", headers=auth_headers(bob)).json()
    assert seen_by_bob["likesCount"] == 1
    assert seen_by_bob["isLiked"] is True


def test_deleting_someone_elses_post_looks_like_not_found(client, make_user, auth_headers):
    author, intruder = make_user(), make_user()
    post = _create_post(client, auth_headers(author))

    forbidden = client.delete(f"/api/posts/{post['id']}", headers=auth_headers(intruder))
    missing = client.delete(f"/api/posts/{uuid4()}", headers=auth_headers(intruder))

    assert forbidden.status_code == missing.status_code == 404
    assert forbidden.json() == missing.json()

    assert client.delete(f"/api/posts/{post['id']}", headers=auth_headers(author)).status_code == 204
    assert client.get(f"/api/posts/{post['id']}").status_code == 404


def test_comment_flow_updates_counter(client, make_user, auth_headers):
    author, commenter = make_user(), make_user()
    post = _create_post(client, auth_headers(author))
    comments_url = f"/api/posts/{post['id']}/comments"

    created = client.post(comments_url, json={"content": "nice"}, headers=auth_headers(commenter))
    assert created.status_code == 201
    comment = created.json()
    assert comment["postId"] == post["id"]

    assert client.get(f"/api/posts/{post['id']}").json()["commentsCount"] == 1
    assert [c["content"] for c in client.get(comments_url).json()["items"]] == ["nice"]

    assert client.delete(f"/api/comments/{comment['id']}", headers=auth_headers(author)).status_code == 404
    assert client.delete(f"/api/comments/{comment['id']}", headers=auth_headers(commenter)).status_code == 204
    assert client.get(f"/api/posts/{post['id']}").json()["commentsCount"] == 0


def test_feed_pagination_over_http(client, make_user, auth_headers):
    headers = auth_headers(make_user())
    for i in range(3):
        _create_post(client, headers, content=f"post {i}")

    first = client.get("/api/posts", params={"limit": 2}).json()
    assert len(first["items"]) == 2
    assert first["nextCursor"]

    second = client.get("/api/posts", params={"limit": 2, "cursor": first["nextCursor"]}).json()
    assert len(second["items"]) == 1
    assert second["nextCursor"] is None

    everything = client.get("/api/posts").json()
    assert len(everything["items"]) == 3

    assert client.get("/api/posts", params={"limit": 2, "cursor": "Z2FyYmFnZQ=="}).status_code == 400


def test_follow_routes(client, make_user, auth_headers):
    alice, bob = make_user(), make_user()

    assert client.post(f"/api/users/{alice.id}/follow", headers=auth_headers(alice)).status_code == 400

    followed = client.post(f"/api/users/{bob.id}/follow", headers=auth_headers(alice))
    assert followed.json() == {"following": True, "status": "followed"}

    status = client.get(f"/api/users/{bob.id}/follow-status", headers=auth_headers(alice)).json()
    assert status["isFollowing"] is True

    profile = client.get(f"/api/users/{bob.id}", headers=auth_headers(alice)).json()
    assert profile["followersCount"] == 1
    assert profile["followingCount"] == 0
    assert profile["isFollowing"] is True
    assert profile["user"]["id"] == str(bob.id)

    unfollowed = client.post(f"/api/users/{bob.id}/follow", headers=auth_headers(alice))
    assert unfollowed.json() == {"following": False, "status": "unfollowed"}

    assert client.post(f"/api/users/{uuid4()}/follow", headers=auth_headers(alice)).status_code == 404


def test_user_posts_route(client, make_user, auth_headers):
    alice, bob = make_user(), make_user()
    mine = _create_post(client, auth_headers(alice), content="alice post")
    _create_post(client, auth_headers(bob), content="bob post")

    items = client.get(f"/api/users/{alice.id}/posts").json()["items"]

    assert [item["id"] for item in items] == [mine["id"]]


def test_friend_request_lifecycle(client, make_user, auth_headers):
    alice, bob = make_user(), make_user()

    assert client.post(f"/api/friends/requests/{alice.id}", headers=auth_headers(alice)).status_code == 400

    sent = client.post(f"/api/friends/requests/{bob.id}", headers=auth_headers(alice))
    assert sent.status_code == 201
    assert sent.json()["status"] == "requested"

    again = client.post(f"/api/friends/requests/{bob.id}", headers=auth_headers(alice))
    assert again.status_code == 200
    assert again.json()["status"] == "noop"

    inbox = client.get("/api/friends", headers=auth_headers(bob)).json()
    assert [u["id"] for u in inbox["incomingRequests"]] == [str(alice.id)]

    accepted = client.post(f"/api/friends/requests/{alice.id}/accept", headers=auth_headers(bob))
    assert accepted.status_code == 200
    assert client.post(f"/api/friends/requests/{alice.id}/accept", headers=auth_headers(bob)).status_code == 409

    alice_view = client.get("/api/friends", headers=auth_headers(alice)).json()
    assert [u["id"] for u in alice_view["friends"]] == [str(bob.id)]

    assert client.delete(f"/api/friends/{bob.id}", headers=auth_headers(alice)).status_code == 204
    assert client.delete(f"/api/friends/{bob.id}", headers=auth_headers(alice)).status_code == 404
    assert client.get("/api/friends", headers=auth_headers(bob)).json()["friends"] == []


def test_reject_unknown_request_is_404(client, make_user, auth_headers):
    alice, bob = make_user(), make_user()

    response = client.post(f"/api/friends/requests/{alice.id}/reject", headers=auth_headers(bob))

    assert response.status_code == 404


def test_story_routes(client, make_user, auth_headers):
    author = make_user()
    headers = auth_headers(author)

    assert client.post("/api/stories", json={}, headers=headers).status_code == 400

    created = client.post("/api/stories", json={"imageUrl": "/uploads/pic.png"}, headers=headers)
    assert created.status_code == 201
    story = created.json()
    assert story["expiresAt"]

    feed = client.get("/api/stories").json()
    assert [item["id"] for item in feed["items"]] == [story["id"]]

    other = make_user()
    assert client.delete(f"/api/stories/{story['id']}", headers=auth_headers(other)).status_code == 404
    assert client.delete(f"/api/stories/{story['id']}", headers=headers).status_code == 204


def test_search(client, make_user, auth_headers):
    author = make_user(first_name="Marie", last_name="Curie")
    _create_post(client, auth_headers(author), content="Radium notes")
    make_user(first_name="Pierre")

    result = client.get("/api/search", params={"q": "mar"}).json()
    assert [u["firstName"] for u in result["users"]] == ["Marie"]

    result = client.get("/api/search", params={"q": "RADIUM"}).json()
    assert [p["content"] for p in result["posts"]] == ["Radium notes"]

    empty = client.get("/api/search", params={"q": ""}).json()
    assert empty["users"] == [] and empty["posts"] == []


def test_search_wildcards_match_nothing_by_themselves(client, make_user, auth_headers):
    _create_post(client, auth_headers(make_user()), content="ordinary words")

    for query in ("%", "_"):
        result = client.get("/api/search", params={"q": query}).json()
        assert result["users"] == [] and result["posts"] == []


def test_upload_accepts_images_and_rejects_text(client, make_user, auth_headers):
    headers = auth_headers(make_user())

    uploaded = client.post(
        "/api/upload",
        files={"file": ("photo.png", b"\x89PNG\r\n\x1a\nfake", "image/png")},
        headers=headers,
    )
    assert uploaded.status_code == 201, uploaded.text
    body = uploaded.json()
    assert body["type"] == "image"
    assert body["url"].startswith("/uploads/")
    assert body["url"].endswith(".png")
    assert client.get(body["url"]).content == b"\x89PNG\r\n\x1a\nfake"

    rejected = client.post(
        "/api/upload",
        files={"file": ("notes.txt", b"plain text", "text/plain")},
        headers=headers,
    )
    assert rejected.status_code == 400


def test_upload_extension_follows_declared_type(client, make_user, auth_headers):
    headers = auth_headers(make_user())

    uploaded = client.post(
        "/api/upload",
        files={"file": ("evil.html", b"<script>alert(1)</script>", "image/png")},
        headers=headers,
    )
    assert uploaded.status_code == 201, uploaded.text
    url = uploaded.json()["url"]
    assert url.endswith(".png")

    served = client.get(url)
    assert served.status_code == 200
    assert served.headers["content-type"].startswith("image/png")


def test_admin_routes_require_admin_role(client, make_user, auth_headers):
    regular = make_user()
    admin = make_user(role="admin")
    target = make_user()
    _create_post(client, auth_headers(target), content="questionable")

    assert client.get("/api/admin/stats", headers=auth_headers(regular)).status_code == 403

    stats = client.get("/api/admin/stats", headers=auth_headers(admin)).json()
    assert stats["totalUsers"] == 3
    assert stats["totalPosts"] == 1
    assert stats["suspendedUsers"] == 0

    users = client.get("/api/admin/users", headers=auth_headers(admin)).json()["items"]
    by_id = {u["id"]: u for u in users}
    assert by_id[str(target.id)]["postCount"] == 1

    suspended = client.post(f"/api/admin/users/{target.id}/suspend", headers=auth_headers(admin))
    assert suspended.json()["status"] == "suspended"
    assert client.get("/api/auth/user", headers=auth_headers(target)).status_code == 403

    restored = client.patch(
        f"/api/admin/users/{target.id}/status", json={"status": "active"}, headers=auth_headers(admin)
    )
    assert restored.json()["status"] == "active"

    own = client.patch(f"/api/admin/users/{admin.id}/status", json={"status": "banned"}, headers=auth_headers(admin))
    assert own.status_code == 403

    posts = client.get("/api/admin/posts", headers=auth_headers(admin)).json()["items"]
    assert len(posts) == 1
    assert client.delete(f"/api/admin/posts/{posts[0]['id']}", headers=auth_headers(admin)).status_code == 204


def test_identity_can_be_injected_with_dependency_override(client, make_user):
    viewer = make_user(first_name="Injected")
    app = client.app
    app.dependency_overrides[get_current_user] = lambda: viewer

    response = client.get("/api/auth/user")

    assert response.status_code == 200
    assert response.json()["firstName"] == "Injected"

"""Post endpoint tests."""

from postapi.api.dependencies import get_post_service
from postapi.main import app
from postapi.services.posts import PostService


def create_post(client, headers, title="First post", content="Hello world"):
    response = client.post("/posts", headers=headers, json={"title": title, "content": content})
    assert response.status_code == 201
    return response.json()["data"]


def test_list_posts_is_public(client):
    """Test listing posts without a token."""
    response = client.get("/posts")
    assert response.status_code == 200
    assert response.json() == {"data": []}


def test_list_posts(client, auth_headers):
    """Test listing returns every post."""
    create_post(client, auth_headers, title="One")
    create_post(client, auth_headers, title="Two")

    response = client.get("/posts")
    assert response.status_code == 200
    titles = [post["title"] for post in response.json()["data"]]
    assert sorted(titles) == ["One", "Two"]


def test_create_post(client, auth_headers):
    """Test creating a post."""
    response = client.post(
        "/posts",
        headers=auth_headers,
        json={"title": "Shopping", "content": "Milk and eggs"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Post created successfully"
    assert body["data"]["title"] == "Shopping"
    assert body["data"]["content"] == "Milk and eggs"
    assert body["data"]["user_id"] == auth_headers.user_id
    assert body["data"]["id"] is not None


def test_create_post_requires_authentication(client):
    """Test that creating a post without a token fails before validation."""
    response = client.post("/posts", json={})
    assert response.status_code == 401


def test_create_post_revoked_token(client, auth_headers):
    """Test that a logged-out token cannot create posts."""
    client.post("/logout", headers=auth_headers)

    response = client.post("/posts", headers=auth_headers, json={"title": "T", "content": "C"})
    assert response.status_code == 401


def test_create_post_missing_fields(client, auth_headers):
    """Test that missing required fields are reported per field."""
    response = client.post("/posts", headers=auth_headers, json={"content": "No title"})
    assert response.status_code == 422
    body = response.json()
    assert body["message"] == "Validation failed."
    assert list(body["errors"]) == ["title"]


def test_create_post_title_too_long(client, auth_headers):
    """Test title length limit."""
    response = client.post(
        "/posts", headers=auth_headers, json={"title": "x" * 256, "content": "c"}
    )
    assert response.status_code == 422
    assert "title" in response.json()["errors"]


def test_get_post(client, auth_headers):
    """Test fetching a post returns the stored fields."""
    post = create_post(client, auth_headers, title="Stored", content="Exactly this")

    response = client.get(f"/posts/{post['id']}")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["title"] == "Stored"
    assert data["content"] == "Exactly this"


def test_get_post_not_found(client):
    """Test fetching a nonexistent post."""
    response = client.get("/posts/99999")
    assert response.status_code == 404
    assert response.json() == {"message": "Post not found"}


def test_update_post_partial(client, auth_headers):
    """Test that updating one field leaves the others untouched."""
    post = create_post(client, auth_headers, title="Old title", content="Kept content")

    response = client.put(f"/posts/{post['id']}", headers=auth_headers, json={"title": "New title"})
    assert response.status_code == 200
    assert response.json() == {"message": "Post updated successfully"}

    data = client.get(f"/posts/{post['id']}").json()["data"]
    assert data["title"] == "New title"
    assert data["content"] == "Kept content"


def test_patch_post(client, auth_headers):
    """Test PATCH behaves like PUT."""
    post = create_post(client, auth_headers, title="Kept title", content="Old content")

    response = client.patch(
        f"/posts/{post['id']}", headers=auth_headers, json={"content": "New content"}
    )
    assert response.status_code == 200

    data = client.get(f"/posts/{post['id']}").json()["data"]
    assert data["title"] == "Kept title"
    assert data["content"] == "New content"


def test_update_post_empty_body(client, auth_headers):
    """Test an update with no fields succeeds and changes nothing."""
    post = create_post(client, auth_headers, title="Same", content="Same content")

    response = client.put(f"/posts/{post['id']}", headers=auth_headers, json={})
    assert response.status_code == 200

    data = client.get(f"/posts/{post['id']}").json()["data"]
    assert data["title"] == "Same"
    assert data["content"] == "Same content"


def test_update_post_rejects_null(client, auth_headers):
    """Test that a required field cannot be cleared with null."""
    post = create_post(client, auth_headers)

    response = client.put(f"/posts/{post['id']}", headers=auth_headers, json={"title": None})
    assert response.status_code == 422
    assert "title" in response.json()["errors"]


def test_update_post_not_found(client, auth_headers):
    """Test updating a nonexistent post."""
    response = client.put("/posts/99999", headers=auth_headers, json={"title": "Nope"})
    assert response.status_code == 404
    assert response.json()["message"] == "Post not found"


def test_update_post_requires_authentication(client, auth_headers):
    """Test that updates need a token."""
    post = create_post(client, auth_headers)

    response = client.put(f"/posts/{post['id']}", json={"title": "Anonymous"})
    assert response.status_code == 401


def test_any_user_can_update_any_post(client, auth_headers, other_auth_headers):
    """Test that updates are not restricted to the author."""
    post = create_post(client, auth_headers)

    response = client.put(
        f"/posts/{post['id']}", headers=other_auth_headers, json={"title": "Edited by other"}
    )
    assert response.status_code == 200
    assert client.get(f"/posts/{post['id']}").json()["data"]["title"] == "Edited by other"


def test_delete_post(client, auth_headers):
    """Test deleting a post and then fetching it."""
    post = create_post(client, auth_headers)

    response = client.delete(f"/posts/{post['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Post deleted successfully"}

    response = client.get(f"/posts/{post['id']}")
    assert response.status_code == 404


def test_delete_post_twice(client, auth_headers):
    """Test that the second delete of the same id is not found."""
    post = create_post(client, auth_headers)

    client.delete(f"/posts/{post['id']}", headers=auth_headers)
    response = client.delete(f"/posts/{post['id']}", headers=auth_headers)
    assert response.status_code == 404


def test_delete_post_not_found(client, auth_headers):
    """Test deleting a nonexistent post."""
    response = client.delete("/posts/99999", headers=auth_headers)
    assert response.status_code == 404


def test_delete_post_requires_authentication(client, auth_headers):
    """Test that deletes need a token."""
    post = create_post(client, auth_headers)

    response = client.delete(f"/posts/{post['id']}")
    assert response.status_code == 401
    assert client.get(f"/posts/{post['id']}").status_code == 200


class BrokenStore:
    """Post store whose backend is unavailable."""

    def get_all(self):
        raise RuntimeError("connection refused: db.internal:5432")


def test_unexpected_error_is_generic(client, caplog):
    """Test that an unexpected failure returns a generic 500 and is logged."""
    app.dependency_overrides[get_post_service] = lambda: PostService(BrokenStore())

    with caplog.at_level("ERROR", logger="postapi.api.errors"):
        response = client.get("/posts")

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to fetch posts"}
    assert "db.internal" not in response.text
    assert "connection refused" in caplog.text


def test_create_post_malformed_json_without_token(client):
    """Test that a missing token is reported before an unparseable body."""
    response = client.post(
        "/posts", content="{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 401
    assert response.json() == {"message": "Unauthenticated."}


def test_create_post_malformed_json(client, auth_headers):
    """Test that an unparseable body is reported under the body key."""
    response = client.post(
        "/posts",
        content="{not json",
        headers={**auth_headers, "Content-Type": "application/json"},
    )
    assert response.status_code == 422
    assert list(response.json()["errors"]) == ["body"]


def test_register_malformed_json(client):
    """Test that public routes report an unparseable body as a validation error."""
    response = client.post(
        "/register", content="{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 422
    assert list(response.json()["errors"]) == ["body"]

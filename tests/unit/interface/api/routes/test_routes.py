"""Unit tests for the HTTP routes, served over in-memory persistence."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from inkwell.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """API client backed by a fresh in-memory container."""
    app = create_app(build_test_container())
    with TestClient(app) as test_client:
        yield test_client


def user_headers(name: str = "Ada Lovelace") -> dict[str, str]:
    return {
        "X-User-Id": str(uuid4()),
        "X-User-Name": name,
        "X-User-Email": f"{name.split()[0].lower()}@example.com",
    }


def create_post(client, headers, **body) -> str:
    payload = {"title": "Hello", "content": "World", "status": "published", **body}
    response = client.post("/posts", json=payload, headers=headers)
    assert response.status_code == 201
    return response.json()["post_id"]


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestPostRoutes:
    """Tests for /posts."""

    def test_create_without_identity_is_anonymous(self, client):
        response = client.post("/posts", json={"title": "T", "content": "C"})

        assert response.status_code == 201
        post = client.get(f"/posts/{response.json()['post_id']}").json()
        assert post["author_id"] == "anonymous"
        assert post["author_name"] == "Anonymous"
        assert post["author_email"] == "anonymous@example.com"

    def test_anonymous_posts_cannot_be_claimed(self, client):
        post_id = client.post("/posts", json={"title": "T", "content": "C"}).json()[
            "post_id"
        ]

        response = client.patch(
            f"/posts/{post_id}",
            json={"title": "Mine"},
            headers={"X-User-Id": "anonymous"},
        )

        assert response.status_code == 401

    def test_create_and_read_counts_views(self, client):
        headers = user_headers()
        post_id = create_post(client, headers)

        first = client.get(f"/posts/{post_id}")
        second = client.get(f"/posts/{post_id}")

        assert first.status_code == 200
        assert first.json()["views"] == 1
        assert second.json()["views"] == 2
        assert second.json()["author_name"] == "Ada Lovelace"
        assert second.json()["excerpt"] == "World..."

    def test_missing_or_malformed_post_is_404(self, client):
        assert client.get(f"/posts/{uuid4()}").status_code == 404
        assert client.get("/posts/not-a-uuid").status_code == 404

    def test_list_search_and_author_filters(self, client):
        headers = user_headers()
        published_id = create_post(client, headers, title="Python tips")
        draft_id = create_post(client, headers, title="Python draft", status="draft")
        create_post(client, user_headers("Grace Hopper"), title="COBOL")

        listed = client.get("/posts").json()["posts"]
        searched = client.get("/posts", params={"q": "PYTHON"}).json()["posts"]
        by_author = client.get(
            "/posts", params={"author": headers["X-User-Id"]}
        ).json()["posts"]

        assert len(listed) == 2
        assert [p["post_id"] for p in searched] == [published_id]
        assert [p["post_id"] for p in by_author] == [published_id, draft_id]

    @pytest.mark.parametrize("params", [{"limit": 0}, {"limit": 101}, {"skip": -1}])
    def test_paging_bounds_are_validated(self, client, params):
        assert client.get("/posts", params=params).status_code == 422

    def test_update_by_author(self, client):
        headers = user_headers()
        post_id = create_post(client, headers, status="draft")

        response = client.patch(
            f"/posts/{post_id}", json={"status": "published"}, headers=headers
        )

        assert response.status_code == 200
        assert response.json()["updated"] is True
        post = client.get(f"/posts/{post_id}").json()
        assert post["status"] == "published"
        assert post["published_at"] is not None

    def test_update_by_other_user_is_403(self, client):
        post_id = create_post(client, user_headers())

        response = client.patch(
            f"/posts/{post_id}", json={"title": "Mine now"}, headers=user_headers("Eve")
        )

        assert response.status_code == 403

    def test_update_without_identity_is_401(self, client):
        post_id = create_post(client, user_headers())

        response = client.patch(f"/posts/{post_id}", json={"title": "X"})

        assert response.status_code == 401

    def test_update_blank_title_is_400(self, client):
        headers = user_headers()
        post_id = create_post(client, headers)

        response = client.patch(f"/posts/{post_id}", json={"title": " "}, headers=headers)

        assert response.status_code == 400

    def test_delete(self, client):
        headers = user_headers()
        post_id = create_post(client, headers)

        assert client.delete(f"/posts/{post_id}", headers=user_headers("Eve")).status_code == 403
        assert client.delete(f"/posts/{post_id}", headers=headers).status_code == 200
        assert client.delete(f"/posts/{post_id}", headers=headers).status_code == 404


class TestLikeRoutes:
    """Tests for /posts/{id}/like and /users/me/liked-posts."""

    def test_toggle_like(self, client):
        post_id = create_post(client, user_headers())
        reader = user_headers("Grace Hopper")

        liked = client.post(f"/posts/{post_id}/like", headers=reader)
        check = client.get(f"/posts/{post_id}/like", headers=reader)
        unliked = client.post(f"/posts/{post_id}/like", headers=reader)

        assert liked.json() == {"liked": True, "likes_count": 1}
        assert check.json() == {"liked": True}
        assert unliked.json() == {"liked": False, "likes_count": 0}

    def test_like_requires_identity(self, client):
        post_id = create_post(client, user_headers())

        assert client.post(f"/posts/{post_id}/like").status_code == 401

    def test_like_missing_post_is_404(self, client):
        response = client.post(f"/posts/{uuid4()}/like", headers=user_headers())

        assert response.status_code == 404

    def test_liked_posts(self, client):
        post_id = create_post(client, user_headers())
        reader = user_headers("Grace Hopper")
        client.post(f"/posts/{post_id}/like", headers=reader)

        response = client.get("/users/me/liked-posts", headers=reader)

        assert response.status_code == 200
        assert [p["post_id"] for p in response.json()["posts"]] == [post_id]


class TestCommentRoutes:
    """Tests for comment endpoints."""

    def test_comment_lifecycle(self, client):
        post_id = create_post(client, user_headers())
        reader = user_headers("Grace Hopper")

        created = client.post(
            f"/posts/{post_id}/comments", json={"content": " Nice post "}, headers=reader
        )
        comment_id = created.json()["comment_id"]
        listed = client.get(f"/posts/{post_id}/comments").json()["comments"]
        by_other = client.delete(f"/comments/{comment_id}", headers=user_headers("Eve"))
        by_author = client.delete(f"/comments/{comment_id}", headers=reader)

        assert created.status_code == 201
        assert [c["content"] for c in listed] == ["Nice post"]
        assert by_other.status_code == 404
        assert by_author.status_code == 200

    def test_comment_too_long_is_422(self, client):
        post_id = create_post(client, user_headers())

        response = client.post(
            f"/posts/{post_id}/comments",
            json={"content": "x" * 501},
            headers=user_headers(),
        )

        assert response.status_code == 422

    def test_blank_comment_is_400(self, client):
        post_id = create_post(client, user_headers())

        response = client.post(
            f"/posts/{post_id}/comments", json={"content": "   "}, headers=user_headers()
        )

        assert response.status_code == 400

    def test_comment_on_missing_post_is_404(self, client):
        response = client.post(
            f"/posts/{uuid4()}/comments", json={"content": "Hi"}, headers=user_headers()
        )

        assert response.status_code == 404

"""End-to-end API tests against the in-memory backend."""

import httpx
import pytest
import pytest_asyncio

from neo_blog.app import create_app
from neo_blog.features.users.application.commands import CreateUserCommand

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


async def register(client, email, username, password="secret-pass"):
    response = await client.post(
        "/auth/register", json={"email": email, "username": username, "password": password}
    )
    assert response.status_code == 201, response.text
    return response.json()


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def user_token(client):
    return (await register(client, "jane@example.com", "jane"))["access_token"]


@pytest_asyncio.fixture
async def other_token(client):
    return (await register(client, "bob@example.com", "bob"))["access_token"]


@pytest_asyncio.fixture
async def admin_token(app, client):
    await app.state.container.command_bus.execute(
        CreateUserCommand(
            email="admin@example.com", username="admin", password="admin-pass", role="ADMIN"
        )
    )
    response = await client.post(
        "/auth/login", json={"email": "admin@example.com", "password": "admin-pass"}
    )
    return response.json()["access_token"]


class TestSystem:
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.json()["storage_backend"] == "memory"


class TestAuthFlow:
    async def test_register_login_me(self, client):
        registered = await register(client, "Jane@Example.com", "jane")
        assert registered["user"]["role"] == "USER"
        assert registered["user"]["email"] == "jane@example.com"
        assert registered["token_type"] == "bearer"

        login = await client.post(
            "/auth/login", json={"email": "jane@example.com", "password": "secret-pass"}
        )
        assert login.status_code == 200

        me = await client.get("/auth/me", headers=bearer(login.json()["access_token"]))
        assert me.status_code == 200
        assert me.json()["username"] == "jane"
        assert "password" not in me.json()

    async def test_duplicate_registration(self, client):
        await register(client, "jane@example.com", "jane")

        response = await client.post(
            "/auth/register",
            json={"email": "jane@example.com", "username": "jane2", "password": "x"},
        )

        assert response.status_code == 409
        assert response.json()["error"]["type"] == "EmailAlreadyExistsError"

    async def test_bad_password(self, client):
        await register(client, "jane@example.com", "jane")

        response = await client.post(
            "/auth/login", json={"email": "jane@example.com", "password": "wrong"}
        )

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["error"]["message"] == "Invalid email or password."

    async def test_missing_and_garbage_tokens(self, client):
        assert (await client.get("/auth/me")).status_code == 401

        response = await client.get("/auth/me", headers=bearer("not-a-jwt"))

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid token."


class TestCategories:
    async def test_admin_manages_categories(self, client, admin_token, user_token):
        created = await client.post("/categories", json={"name": "Tech"}, headers=bearer(admin_token))
        assert created.status_code == 201
        category_id = created.json()["id"]

        duplicate = await client.post("/categories", json={"name": "tech"}, headers=bearer(admin_token))
        assert duplicate.status_code == 409

        listed = await client.get("/categories", headers=bearer(user_token))
        assert [c["name"] for c in listed.json()] == ["Tech"]

        deleted = await client.delete(f"/categories/{category_id}", headers=bearer(admin_token))
        assert deleted.json() == {"success": True}

    async def test_user_cannot_create_category(self, client, user_token):
        response = await client.post("/categories", json={"name": "Tech"}, headers=bearer(user_token))

        assert response.status_code == 403

    async def test_listing_requires_login(self, client):
        assert (await client.get("/categories")).status_code == 401


class TestPostsAndComments:
    async def test_post_lifecycle(self, client, admin_token, user_token, other_token):
        category = await client.post("/categories", json={"name": "Tech"}, headers=bearer(admin_token))
        category_id = category.json()["id"]

        created = await client.post(
            "/posts",
            json={"title": "Hello", "content": "World", "category_ids": [category_id]},
            headers=bearer(user_token),
        )
        assert created.status_code == 201
        post = created.json()
        assert post["published"] is False
        assert post["category_ids"] == [category_id]

        forbidden = await client.post(f"/posts/{post['id']}/publish", headers=bearer(other_token))
        assert forbidden.status_code == 403

        published = await client.post(f"/posts/{post['id']}/publish", headers=bearer(user_token))
        assert published.json()["published"] is True

        again = await client.post(f"/posts/{post['id']}/publish", headers=bearer(user_token))
        assert again.status_code == 400
        assert again.json()["error"]["message"] == f"Post with ID {post['id']} is already published."

        listing = await client.get("/posts", params={"published": "true"})
        assert listing.json()["total"] == 1
        assert listing.json()["has_more"] is False

        in_use = await client.delete(f"/categories/{category_id}", headers=bearer(admin_token))
        assert in_use.status_code == 409

    async def test_unknown_category_on_create(self, client, user_token):
        response = await client.post(
            "/posts",
            json={"title": "Hello", "content": "World", "category_ids": [42]},
            headers=bearer(user_token),
        )

        assert response.status_code == 404

    async def test_comment_thread(self, client, user_token, other_token):
        post = (
            await client.post(
                "/posts", json={"title": "Hello", "content": "World"}, headers=bearer(user_token)
            )
        ).json()

        comment = await client.post(
            f"/posts/{post['id']}/comments", json={"content": " First! "}, headers=bearer(other_token)
        )
        assert comment.status_code == 201
        comment_id = comment.json()["id"]
        assert comment.json()["content"] == "First!"

        reply = await client.post(
            f"/comments/{comment_id}/replies", json={"content": "Thanks"}, headers=bearer(user_token)
        )
        assert reply.status_code == 201
        assert reply.json()["post_id"] == post["id"]

        thread = await client.get(f"/posts/{post['id']}/comments")
        assert [r["content"] for r in thread.json()[0]["replies"]] == ["Thanks"]

        not_yours = await client.delete(f"/comments/{comment_id}", headers=bearer(user_token))
        assert not_yours.status_code == 403

        deleted = await client.delete(f"/comments/{comment_id}", headers=bearer(other_token))
        assert deleted.json() == {"success": True}

        gone = await client.get(f"/replies/{reply.json()['id']}")
        assert gone.status_code == 404

    async def test_deleting_post_removes_its_thread(self, client, user_token, other_token):
        post = (
            await client.post(
                "/posts", json={"title": "Hello", "content": "World"}, headers=bearer(user_token)
            )
        ).json()
        comment = (
            await client.post(
                f"/posts/{post['id']}/comments", json={"content": "Hi"}, headers=bearer(other_token)
            )
        ).json()
        reply = (
            await client.post(
                f"/comments/{comment['id']}/replies", json={"content": "Yo"}, headers=bearer(user_token)
            )
        ).json()

        deleted = await client.delete(f"/posts/{post['id']}", headers=bearer(user_token))
        assert deleted.json() == {"success": True}

        assert (await client.get(f"/comments/{comment['id']}")).status_code == 404
        assert (await client.get(f"/replies/{reply['id']}")).status_code == 404
        orphan = await client.post(
            f"/comments/{comment['id']}/replies", json={"content": "Late"}, headers=bearer(other_token)
        )
        assert orphan.status_code == 404

    async def test_comment_on_missing_post(self, client, user_token):
        response = await client.post(
            "/posts/999/comments", json={"content": "Hi"}, headers=bearer(user_token)
        )

        assert response.status_code == 404


class TestUsers:
    async def test_admin_lists_users(self, client, admin_token, user_token):
        assert (await client.get("/users", headers=bearer(user_token))).status_code == 403

        everyone = await client.get("/users", headers=bearer(admin_token))
        assert {u["username"] for u in everyone.json()} == {"admin", "jane"}

        lookup = await client.get(
            "/users", params={"email": "nobody@example.com"}, headers=bearer(admin_token)
        )
        assert lookup.json() == []

    async def test_deleting_user_removes_their_posts(self, client, admin_token, user_token):
        me = (await client.get("/auth/me", headers=bearer(user_token))).json()
        post = (
            await client.post(
                "/posts", json={"title": "Hello", "content": "World"}, headers=bearer(user_token)
            )
        ).json()

        deleted = await client.delete(f"/users/{me['id']}", headers=bearer(admin_token))
        assert deleted.json() == {"success": True}

        assert (await client.get(f"/posts/{post['id']}")).status_code == 404

    async def test_user_cannot_promote_self(self, client, user_token):
        me = (await client.get("/auth/me", headers=bearer(user_token))).json()

        response = await client.patch(
            f"/users/{me['id']}", json={"role": "ADMIN"}, headers=bearer(user_token)
        )

        assert response.status_code == 403

from uuid import UUID

from sqlalchemy import func, select

from taskpilot.token import AccessToken, caller_id_from_header, caller_id_from_token
from taskpilot_db.models import User

from .utils import PASSWORD, register


async def test_register_returns_token_for_new_user(client):
    response = await client.post("/api/auth/register",
                                 json={"name": "Alice", "email": "alice@taskpilot.dev",
                                       "password": PASSWORD})
    assert response.status_code == 200
    payload = response.json()
    assert payload["user"]["name"] == "Alice"
    assert payload["user"]["email"] == "alice@taskpilot.dev"
    assert "password" not in payload["user"]
    assert caller_id_from_token(payload["token"]) == UUID(payload["user"]["id"])


async def test_duplicate_email_is_conflict(client, db):
    await register(client, "alice")
    response = await client.post("/api/auth/register",
                                 json={"name": "Other Alice", "email": "alice@taskpilot.dev",
                                       "password": "something-else"})
    assert response.status_code == 409
    assert response.json()["detail"] == "Email already in use"
    async with db.context_session() as session:
        assert await session.scalar(select(func.count()).select_from(User)) == 1


async def test_register_rejects_malformed_email(client):
    response = await client.post("/api/auth/register",
                                 json={"name": "Alice", "email": "not-an-email",
                                       "password": PASSWORD})
    assert response.status_code == 422


async def test_login(client, alice):
    response = await client.post("/api/auth/login",
                                 json={"email": alice.email, "password": PASSWORD})
    assert response.status_code == 200
    assert response.json()["user"]["id"] == alice.id


async def test_login_failures_look_the_same(client, alice):
    wrong_password = await client.post("/api/auth/login",
                                       json={"email": alice.email, "password": "nope"})
    unknown_email = await client.post("/api/auth/login",
                                      json={"email": "ghost@taskpilot.dev", "password": PASSWORD})
    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"detail": "Invalid credentials"}


async def test_current_user(client, alice):
    response = await client.get("/api/auth/me", headers=alice.headers)
    assert response.status_code == 200
    assert response.json() == alice.user


async def test_current_user_is_null_without_valid_token(client, alice):
    anonymous = await client.get("/api/auth/me")
    forged = await client.get("/api/auth/me", headers={"Authorization": "Bearer not.a.token"})
    assert anonymous.status_code == forged.status_code == 200
    assert anonymous.json() is None
    assert forged.json() is None


async def test_protected_operation_requires_token(client):
    response = await client.get("/api/project")
    assert response.status_code == 401
    assert response.json()["detail"] == "Not authenticated"


def test_token_round_trip_and_expiry():
    user_id = UUID("3f1c2b8e-6a5d-4e2f-9b7a-1c0d8e9f2a3b")
    token = AccessToken(user_id)
    assert (token.expires_date - token.created_date).days == 7
    assert caller_id_from_header(f"Bearer {token.to_token()}") == user_id
    assert caller_id_from_header(f"Basic {token.to_token()}") is None
    assert caller_id_from_token("") is None


async def test_login_with_mixed_case_domain(client):
    response = await client.post("/api/auth/register",
                                 json={"name": "Carol", "email": "carol@Example.COM",
                                       "password": PASSWORD})
    assert response.status_code == 200
    assert response.json()["user"]["email"] == "carol@example.com"

    response = await client.post("/api/auth/login",
                                 json={"email": "carol@Example.COM", "password": PASSWORD})
    assert response.status_code == 200
    assert response.json()["user"]["email"] == "carol@example.com"

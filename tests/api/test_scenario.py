"""End-to-end scenario: sign up, log in, and fetch with and without a token."""

from httpx import AsyncClient


async def test_signup_login_fetch_scenario(client: AsyncClient, register) -> None:
    """Walk the sign-up → login → fetch flow, including both rejection paths."""
    created = await client.post(
        "/api/account",
        json={
            "email": "a@x.com",
            "name": "A",
            "password": "pw",
            "receivesUpdates": True,
        },
    )
    assert created.status_code == 201
    account = created.json()
    assert account["email"] == "a@x.com"
    assert account["name"] == "A"
    assert account["receivesUpdates"] is True
    assert "password" not in account
    assert "passwordHash" not in account

    login = await client.post("/api/login", json={"email": "a@x.com", "password": "pw"})
    assert login.status_code == 201
    body = login.json()
    assert body["token"]
    assert body["refreshToken"]
    assert body["expiresAt"]
    assert body["user"]["id"] == account["id"]
    assert body["user"]["role"] == "ADMIN"
    headers = {"Authorization": f"Bearer {body['token']}"}

    no_token = await client.get(f"/api/account/{account['id']}/fetch")
    assert no_token.status_code == 401
    assert no_token.json()["code"] == "ERR_MISSING_TOKEN"

    other_id, _ = await register("b@x.com")
    other = await client.get(f"/api/account/{other_id}/fetch", headers=headers)
    assert other.status_code == 404
    assert other.json()["code"] == "ERR_NOT_FOUND_ACCOUNT_BY_ID"

    own = await client.get(f"/api/account/{account['id']}/fetch", headers=headers)
    assert own.status_code == 200
    assert own.json() == account

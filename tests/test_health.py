"""Smoke tests for health and app wiring (request id, case-insensitive paths, error envelope)."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/health returns 200 and status ok without a token."""
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_every_response_carries_request_id(client: AsyncClient) -> None:
    """X-Request-ID is generated when the client sends none."""
    response = await client.get("/api/health")
    assert response.headers.get("X-Request-ID")


async def test_client_request_id_is_echoed(client: AsyncClient) -> None:
    """A safe client X-Request-ID is forwarded unchanged."""
    response = await client.get("/api/health", headers={"X-Request-ID": "abc-123_DEF"})
    assert response.headers["X-Request-ID"] == "abc-123_DEF"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    """Values outside the allowed character set are replaced with a new id."""
    response = await client.get(
        "/api/health", headers={"X-Request-ID": "bad id with spaces!"}
    )
    assert response.headers["X-Request-ID"] != "bad id with spaces!"


async def test_paths_are_case_insensitive(client: AsyncClient) -> None:
    """/API/Health reaches the same handler as /api/health."""
    response = await client.get("/API/Health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_error_body_carries_request_id(client: AsyncClient) -> None:
    """Error bodies echo the request id used in the header."""
    response = await client.get(
        "/api/account/1/fetch", headers={"X-Request-ID": "trace-me"}
    )
    assert response.status_code == 401
    body = response.json()
    assert body["requestId"] == "trace-me"
    assert response.headers["X-Request-ID"] == "trace-me"


async def test_unknown_route_keeps_framework_status(client: AsyncClient, register) -> None:
    """An unknown route answers 404 in the uniform error envelope."""
    _, headers = await register("routes@x.com")
    response = await client.get("/api/nothing-here", headers=headers)
    assert response.status_code == 404
    assert set(response.json()) == {"requestId", "code", "error"}


async def test_unexpected_exception_gets_fallback_with_request_id(
    app, client: AsyncClient, register
) -> None:
    """An exception no handler knows is answered in the envelope, X-Request-ID included."""

    async def explode() -> None:
        raise RuntimeError("secret internals")

    app.add_api_route("/api/explode", explode, methods=["GET"])
    _, headers = await register("explode@x.com")
    response = await client.get(
        "/api/explode", headers={**headers, "X-Request-ID": "boom-1"}
    )
    assert response.status_code == 400
    assert response.headers["X-Request-ID"] == "boom-1"
    body = response.json()
    assert body == {
        "requestId": "boom-1",
        "code": "ERR_INTERNAL_EXCEPTION",
        "error": "An internal server error occurred.",
    }

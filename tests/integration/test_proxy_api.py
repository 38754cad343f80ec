"""Integration tests for the passthrough proxy endpoint."""

import base64

import httpx
import pytest

from webman.infrastructure.api.app import app
from webman.infrastructure.api.dependencies import get_proxy_relay
from webman.infrastructure.services import ProxyRelay


@pytest.fixture
def upstream():
    """Route proxied calls to a mock upstream; records what it received."""
    calls: list[httpx.Request] = []
    responses: dict[str, httpx.Response] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if request.url.host == "down.test":
            raise httpx.ConnectError("connection refused", request=request)
        return responses.get(request.url.path, httpx.Response(200, content=b"{}"))

    app.dependency_overrides[get_proxy_relay] = lambda: ProxyRelay(
        transport=httpx.MockTransport(handler)
    )
    yield calls, responses
    app.dependency_overrides.pop(get_proxy_relay, None)


@pytest.mark.asyncio
async def test_proxy_json_response(client, upstream):
    calls, responses = upstream
    responses["/users"] = httpx.Response(
        200,
        headers=[("Content-Type", "application/json"), ("X-Multi", "a"), ("X-Multi", "b")],
        content=b'[{"id": 1}]',
    )

    response = await client.post(
        "/",
        json={
            "method": "GET",
            "url": "http://api.test/users",
            "headers": {"Authorization": "Bearer t"},
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["statusCode"] == 200
    assert data["body"] == '[{"id": 1}]'
    assert data["encoding"] == "json"
    assert data["headers"]["Content-Type"] == "application/json"
    assert data["headers"]["X-Multi"] == "a"
    assert calls[0].headers["Authorization"] == "Bearer t"


@pytest.mark.asyncio
async def test_proxy_forwards_decoded_body(client, upstream):
    calls, responses = upstream
    responses["/echo"] = httpx.Response(201, content=b"\x00\x01\x02")
    sent = b'{"name": "ada"}'

    response = await client.post(
        "/",
        json={
            "method": "POST",
            "url": "http://api.test/echo",
            "headers": {"Content-Type": "application/json"},
            "body": base64.b64encode(sent).decode(),
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["statusCode"] == 201
    assert data["encoding"] == "base64"
    assert base64.b64decode(data["body"]) == b"\x00\x01\x02"
    assert calls[0].method == "POST"
    assert calls[0].content == sent


@pytest.mark.asyncio
async def test_proxy_upstream_error_status_is_relayed(client, upstream):
    _, responses = upstream
    responses["/boom"] = httpx.Response(503, text="unavailable")

    response = await client.post("/", json={"url": "http://api.test/boom"})

    assert response.status_code == 200
    assert response.json()["statusCode"] == 503


@pytest.mark.asyncio
async def test_proxy_invalid_url(client, upstream):
    calls, _ = upstream

    response = await client.post("/", json={"method": "GET", "url": "::not a url::"})

    assert response.status_code == 400
    assert response.json()["message"] == "fail"
    assert response.json()["error"]
    assert calls == []


@pytest.mark.asyncio
async def test_proxy_connection_failure(client, upstream):
    response = await client.post("/", json={"method": "GET", "url": "http://down.test/"})

    assert response.status_code == 500
    assert response.json()["message"] == "fail"
    assert "connection refused" in response.json()["error"]


@pytest.mark.asyncio
async def test_proxy_malformed_body(client, upstream):
    response = await client.post(
        "/",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "fail"


@pytest.mark.asyncio
async def test_proxy_rejects_invalid_base64_body(client, upstream):
    calls, _ = upstream

    response = await client.post(
        "/", json={"url": "http://api.test/", "body": "%%%"}
    )

    assert response.status_code == 400
    assert "base64" in response.json()["error"]
    assert calls == []


@pytest.mark.asyncio
async def test_proxy_null_fields_use_defaults(client, upstream):
    calls, _ = upstream

    response = await client.post(
        "/",
        json={"method": None, "url": "http://api.test/", "headers": None, "body": None},
    )

    assert response.status_code == 200
    assert calls[0].method == "GET"
    assert calls[0].content == b""

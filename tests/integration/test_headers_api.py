"""Integration tests for the default header catalog API."""

import pytest


@pytest.mark.asyncio
async def test_list_default_headers(client):
    response = await client.get("/headers/default")

    assert response.status_code == 200
    headers = response.json()
    assert len(headers) == 7
    assert headers[0] == {
        "id": "",
        "name": "Accept",
        "value": "application/json",
        "description": "Indicates that the client expects JSON response",
    }
    assert [h["name"] for h in headers][-1] == "X-Requested-With"


@pytest.mark.asyncio
async def test_get_default_header_by_name(client):
    response = await client.get("/headers/default/User-Agent")

    assert response.status_code == 200
    assert response.json()["value"] == "Webman/1.0.0"


@pytest.mark.asyncio
async def test_get_unknown_default_header(client):
    response = await client.get("/headers/default/X-Nope")

    assert response.status_code == 404
    assert response.json() == {"error": "header not found"}

"""Tests for HTTP-based adapters."""

import asyncio

import httpx
import pytest

from nutrient_suitability.adapters.off_client import HttpxOpenFoodFactsClient


def test_off_client_fetches_product() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"status": 1, "product": {}})

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxOpenFoodFactsClient(
        base_url="https://off.test",
        user_agent="TestAgent/1.0",
        http_client=async_client,
    )

    payload = asyncio.run(client.get_product("4000000000001"))

    assert payload == {"status": 1, "product": {}}
    assert seen[0].url.path == "/api/v2/product/4000000000001.json"
    assert seen[0].headers["User-Agent"] == "TestAgent/1.0"


def test_off_client_raises_on_http_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    transport = httpx.MockTransport(handler)
    client = HttpxOpenFoodFactsClient(
        base_url="https://off.test",
        user_agent="TestAgent/1.0",
        http_client=httpx.AsyncClient(transport=transport),
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.get_product("1"))

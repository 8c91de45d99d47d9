"""Tests for container wiring."""

import asyncio

from nutrient_suitability.adapters.off_client import HttpxOpenFoodFactsClient
from nutrient_suitability.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert isinstance(container.product_client, HttpxOpenFoodFactsClient)
    assert container.product_client.base_url == "https://off.test"
    assert container.product_service.client is container.product_client
    asyncio.run(container.close_resources())

"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrient_suitability.adapters.off_client import (
    HttpxOpenFoodFactsClient,
    OpenFoodFactsClient,
)
from nutrient_suitability.config import Settings
from nutrient_suitability.services.products import ProductLookupService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    product_client: OpenFoodFactsClient
    product_service: ProductLookupService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    product_client = HttpxOpenFoodFactsClient.create(
        base_url=resolved_settings.off_base_url,
        user_agent=resolved_settings.off_user_agent,
        timeout_seconds=resolved_settings.off_timeout_seconds,
    )
    product_service = ProductLookupService(
        client=product_client,
        retry_attempts=resolved_settings.lookup_retry_attempts,
        retry_delay_seconds=resolved_settings.lookup_retry_delay_seconds,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await product_client.close()

    return AppContainer(
        settings=resolved_settings,
        product_client=product_client,
        product_service=product_service,
        close_resources=close_resources,
    )

"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from nutrient_suitability.adapters.off_client import OpenFoodFactsClient
from nutrient_suitability.config import Settings
from nutrient_suitability.containers import AppContainer
from nutrient_suitability.domain.evaluation import ProductInput
from nutrient_suitability.services.products import ProductLookupService

CHEESE_BARCODE = "4000000000001"


def off_cheese_payload() -> dict[str, object]:
    return {
        "status": 1,
        "code": CHEESE_BARCODE,
        "product": {
            "product_name_de": "Bergkäse",
            "product_name": "Mountain cheese",
            "brands": "Alpenhof, Sennerei",
            "image_front_url": "https://images.test/front.jpg",
            "ingredients_text_de": "Milch, Salz, Lab",
            "categories_tags": ["en:dairies", "en:Cheeses"],
            "categories_hierarchy": ["en:dairies", "en:cheeses", "de:bergkaese"],
            "generic_name_de": "Hartkäse",
            "nutriments": {"fat_100g": 30, "salt_100g": 2, "energy-kcal_100g": 380},
        },
    }


@dataclass
class FakeOpenFoodFactsClient(OpenFoodFactsClient):
    """Fake Open Food Facts client with in-memory responses."""

    products: dict[str, dict[str, object]] = field(
        default_factory=lambda: {CHEESE_BARCODE: off_cheese_payload()}
    )
    calls: list[str] = field(default_factory=list)

    async def get_product(self, barcode: str) -> dict[str, object]:
        self.calls.append(barcode)
        return self.products.get(
            barcode, {"status": 0, "status_verbose": "product not found"}
        )


@pytest.fixture
def settings() -> Settings:
    return Settings(off_base_url="https://off.test", lookup_retry_delay_seconds=0)


@pytest.fixture
def product_client() -> FakeOpenFoodFactsClient:
    return FakeOpenFoodFactsClient()


@pytest.fixture
def container(
    settings: Settings, product_client: FakeOpenFoodFactsClient
) -> AppContainer:
    product_service = ProductLookupService(
        client=product_client,
        retry_attempts=settings.lookup_retry_attempts,
        retry_delay_seconds=settings.lookup_retry_delay_seconds,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        product_client=product_client,
        product_service=product_service,
        close_resources=close_resources,
    )


def make_product(**overrides: object) -> ProductInput:
    values: dict[str, object] = {
        "code": "123",
        "name": "Test product",
        "brand": "Test brand",
    }
    values.update(overrides)
    return ProductInput(**values)  # type: ignore[arg-type]

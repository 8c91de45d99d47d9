"""Product lookup service backed by Open Food Facts."""

import asyncio
import logging
import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import httpx

from nutrient_suitability.adapters.off_client import OpenFoodFactsClient
from nutrient_suitability.domain.evaluation import (
    DEFAULT_AGE_GROUP,
    AgeGroup,
    EvaluationProfile,
    ProductEvaluation,
    ProductInput,
)
from nutrient_suitability.services.evaluation import evaluate_product

_LANGUAGE_PREFIX = re.compile(r"^[a-z]{2}:")
_FOUND_STATUS = 1

_logger = logging.getLogger(__name__)


@dataclass
class ProductLookupService:
    """Fetch raw product data by barcode and hand it to the engine."""

    client: OpenFoodFactsClient
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3
    debug: bool = False

    async def lookup(self, barcode: str) -> ProductInput | None:
        """Return the product for a barcode, or None if it can't be found."""
        code = (barcode or "").strip()
        if not code:
            return None
        try:
            payload = await self._call_with_retry(
                lambda: self.client.get_product(code), action=f"get_product:{code}"
            )
        except (httpx.HTTPError, ValueError) as exc:
            _logger.warning("Product lookup failed: barcode=%s error=%s", code, exc)
            return None
        if not isinstance(payload, dict):
            return None
        product = payload.get("product")
        if payload.get("status") != _FOUND_STATUS or not isinstance(product, dict):
            if self.debug:
                _logger.info("Product not found: barcode=%s", code)
            return None
        return parse_product(code, product)

    async def evaluate(
        self,
        barcode: str,
        profile: EvaluationProfile = EvaluationProfile.AGE,
        age_group: AgeGroup = DEFAULT_AGE_GROUP,
    ) -> ProductEvaluation | None:
        """Look up a product and run the selected evaluation profile."""
        product = await self.lookup(barcode)
        if product is None:
            return None
        evaluation = evaluate_product(product, profile, default_age_group=age_group)
        if self.debug:
            _logger.info(
                "Evaluated barcode=%s profile=%s suitable=%s",
                product.code,
                profile.value,
                evaluation.suitable,
            )
        return evaluation

    async def _call_with_retry(
        self, func: Callable[[], Awaitable[dict[str, object]]], *, action: str
    ) -> dict[str, object]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except httpx.HTTPError as exc:
                attempt += 1
                if self.debug:
                    _logger.warning(
                        "Open Food Facts %s failed (attempt %s/%s, status=%s): %s",
                        action,
                        attempt,
                        self.retry_attempts + 1,
                        _status_code_from_exception(exc),
                        exc,
                    )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def parse_product(code: str, product: dict[str, object]) -> ProductInput:
    """Map an Open Food Facts product payload to the engine input."""
    nutriments = product.get("nutriments")
    return ProductInput(
        code=code,
        name=_first_text(
            product,
            "product_name_de",
            "product_name",
            "generic_name_de",
            "generic_name",
        ),
        brand=_first_brand(product.get("brands")),
        image_url=_first_text(product, "image_front_url", "image_url"),
        nutriments=nutriments if isinstance(nutriments, dict) else {},
        ingredients_text=_first_text(
            product, "ingredients_text_de", "ingredients_text"
        ),
        category_tags=_category_tags(product),
        category_path=_category_path(product),
        description=_first_text(product, "generic_name_de", "generic_name"),
    )


def _first_text(product: dict[str, object], *keys: str) -> str | None:
    for key in keys:
        value = product.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _first_brand(brands: object) -> str | None:
    if not isinstance(brands, str):
        return None
    first = brands.split(",")[0].strip()
    return first or None


def _category_path(product: dict[str, object]) -> tuple[str, ...]:
    hierarchy = product.get("categories_hierarchy")
    if not isinstance(hierarchy, list):
        return ()
    return tuple(
        _LANGUAGE_PREFIX.sub("", item) for item in hierarchy if isinstance(item, str)
    )


def _category_tags(product: dict[str, object]) -> tuple[str, ...]:
    tags = product.get("categories_tags")
    if isinstance(tags, list):
        return tuple(tag.lower() for tag in tags if isinstance(tag, str))
    categories = product.get("categories")
    if isinstance(categories, str):
        return tuple(
            part.strip().lower() for part in categories.split(",") if part.strip()
        )
    return ()


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"

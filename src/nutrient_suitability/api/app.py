"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from nutrient_suitability.api.schemas import (
    EvaluationResponse,
    ProductPayload,
    RecentItemRequest,
)
from nutrient_suitability.app_logging import configure_logging
from nutrient_suitability.containers import AppContainer
from nutrient_suitability.domain.evaluation import AgeGroup, EvaluationProfile
from nutrient_suitability.services.evaluation import evaluate_product, to_recent_item


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/products/{barcode}")
    async def product_evaluation(
        barcode: str,
        request: Request,
        profile: EvaluationProfile | None = None,
        age_group: AgeGroup | None = None,
    ) -> EvaluationResponse:
        """Look up a product by barcode and evaluate it."""
        state_container: AppContainer = request.app.state.container
        settings = state_container.settings
        evaluation = await state_container.product_service.evaluate(
            barcode,
            profile or settings.default_profile,
            age_group or settings.default_age_group,
        )
        if evaluation is None:
            logger.info("No product data for barcode=%s", barcode)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="No product data found for this barcode.",
            )
        return EvaluationResponse.from_domain(evaluation)

    @app.post("/evaluate")
    async def evaluate(
        payload: ProductPayload,
        request: Request,
        profile: EvaluationProfile | None = None,
        age_group: AgeGroup | None = None,
    ) -> EvaluationResponse:
        """Evaluate product data supplied by the caller."""
        settings = request.app.state.container.settings
        evaluation = evaluate_product(
            payload.to_domain(),
            profile or settings.default_profile,
            default_age_group=age_group or settings.default_age_group,
        )
        return EvaluationResponse.from_domain(evaluation)

    @app.post("/recent-items")
    async def recent_item(
        payload: RecentItemRequest, request: Request
    ) -> dict[str, object]:
        """Evaluate a product and return its recent-products record."""
        settings = request.app.state.container.settings
        evaluation = evaluate_product(
            payload.product.to_domain(),
            settings.default_profile,
            default_age_group=settings.default_age_group,
        )
        return to_recent_item(evaluation, favorite=payload.favorite).to_record()

    return app

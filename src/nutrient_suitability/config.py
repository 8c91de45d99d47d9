"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrient_suitability.domain.evaluation import AgeGroup, EvaluationProfile

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    off_base_url: str = "https://world.openfoodfacts.org"
    off_user_agent: str = "NutrientSuitability/1.0 (contact: support@example.com)"
    off_timeout_seconds: float = 15.0
    default_profile: EvaluationProfile = EvaluationProfile.AGE
    default_age_group: AgeGroup = AgeGroup.OLDER
    lookup_retry_attempts: int = 1
    lookup_retry_delay_seconds: float = 0.3
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

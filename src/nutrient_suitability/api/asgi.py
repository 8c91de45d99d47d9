"""ASGI entrypoint for the evaluation API."""

from nutrient_suitability.api.app import create_app
from nutrient_suitability.containers import build_container

app = create_app(build_container())

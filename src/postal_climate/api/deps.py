"""
postal_climate.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Encapsulate app.state access patterns for the per-service pipelines.
"""

from __future__ import annotations

from fastapi import Request

from postal_climate.services.climate_lookup import ClimateLookupService
from postal_climate.services.input import InputService


def climate_lookup_service(request: Request) -> ClimateLookupService:
    # Set once by `postal_climate.api.app.create_orchestrator_app`.
    return request.app.state.climate_lookup  # type: ignore[attr-defined]


def input_service(request: Request) -> InputService:
    # Set once by `postal_climate.api.app.create_input_app`.
    return request.app.state.input_service  # type: ignore[attr-defined]

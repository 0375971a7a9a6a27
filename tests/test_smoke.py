"""
tests.test_smoke

Minimal smoke tests to validate both services can boot and serve core endpoints.

Responsibilities:
- Ensure each FastAPI app starts, answers its liveness probe and shuts down cleanly
  with its default (non-injected) pipeline.
"""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest
from fastapi import FastAPI

from postal_climate.api.app import create_input_app, create_orchestrator_app
from postal_climate.observability.tracing import Telemetry
from postal_climate.services.climate_lookup import ClimateLookupService
from postal_climate.services.input import InputService
from postal_climate.settings import Settings


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("factory", "state_attr", "service_type"),
    [
        (create_orchestrator_app, "climate_lookup", ClimateLookupService),
        (create_input_app, "input_service", InputService),
    ],
)
async def test_health_endpoint(
    settings: Settings,
    telemetry: Telemetry,
    factory: Callable[..., FastAPI],
    state_attr: str,
    service_type: type,
) -> None:
    app = factory(settings=settings, telemetry=telemetry)
    assert isinstance(getattr(app.state, state_attr), service_type)

    # httpx ASGITransport does not manage lifespan automatically; do it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.get("/healthz")
            assert r.status_code == 200
            assert r.json()["status"] == "ok"
            assert r.headers["x-request-id"]

            r = await client.get("/healthz", headers={"x-request-id": "req-123"})
            assert r.headers["x-request-id"] == "req-123"


# --- Module Notes -----------------------------------------------------------
# Upstream APIs are never contacted here: /healthz does not touch the pipelines.

"""
postal_climate.api.app

FastAPI app factories for the Input and Orchestrator services.

Responsibilities:
- Build each FastAPI application and register routers/middleware/error handlers.
- Construct the outbound HTTP clients and pipelines unless they are injected.
- Close HTTP clients, then telemetry, when the app shuts down.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from opentelemetry import trace
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from postal_climate import __version__
from postal_climate.api.routers.climate import router as climate_router
from postal_climate.api.routers.health import router as health_router
from postal_climate.api.routers.input import router as input_router
from postal_climate.clients.upstream import UpstreamClient, build_http_client
from postal_climate.domain.models import ErrorBody
from postal_climate.errors import ClassifiedError, describe_cause
from postal_climate.observability.logging import get_logger
from postal_climate.observability.middleware import RequestContextMiddleware
from postal_climate.observability.tracing import Telemetry, record_failure
from postal_climate.resolvers.climate import ClimateResolver
from postal_climate.resolvers.location import LocationResolver
from postal_climate.services.climate_lookup import ClimateLookupService
from postal_climate.services.input import InputService
from postal_climate.settings import Settings

log = get_logger(__name__)


def create_orchestrator_app(
    *,
    settings: Settings,
    telemetry: Telemetry,
    service: ClimateLookupService | None = None,
) -> FastAPI:
    clients: list[httpx.AsyncClient] = []
    if service is None:
        viacep_http = build_http_client(base_url=settings.viacep_api_base_url, settings=settings)
        weather_http = build_http_client(base_url=settings.weather_api_base_url, settings=settings)
        clients += [viacep_http, weather_http]
        service = ClimateLookupService(
            location_resolver=LocationResolver(
                client=UpstreamClient(http=viacep_http, propagator=telemetry.propagator)
            ),
            climate_resolver=ClimateResolver(
                client=UpstreamClient(http=weather_http, propagator=telemetry.propagator),
                api_key=settings.weather_api_key,
            ),
            tracer=telemetry.tracer,
        )

    app = _build_app(
        title="Orchestrator Service",
        settings=settings,
        telemetry=telemetry,
        span_name="climate",
        clients=clients,
    )
    app.state.climate_lookup = service
    app.include_router(climate_router)
    return app


def create_input_app(
    *,
    settings: Settings,
    telemetry: Telemetry,
    service: InputService | None = None,
) -> FastAPI:
    clients: list[httpx.AsyncClient] = []
    if service is None:
        orchestrator_http = build_http_client(
            base_url=settings.orchestrator_service_url, settings=settings
        )
        clients.append(orchestrator_http)
        service = InputService(
            orchestrator=UpstreamClient(http=orchestrator_http, propagator=telemetry.propagator)
        )

    app = _build_app(
        title="Input Service",
        settings=settings,
        telemetry=telemetry,
        span_name="input",
        clients=clients,
    )
    app.state.input_service = service
    app.include_router(input_router)
    return app


def _build_app(
    *,
    title: str,
    settings: Settings,
    telemetry: Telemetry,
    span_name: str,
    clients: Sequence[httpx.AsyncClient],
) -> FastAPI:
    app = FastAPI(
        title=title,
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=_lifespan(telemetry=telemetry, clients=clients, env=settings.env),
    )

    app.add_middleware(RequestContextMiddleware, telemetry=telemetry, span_name=span_name)
    app.add_exception_handler(ClassifiedError, _classified_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
    app.include_router(health_router, tags=["health"])
    return app


def _lifespan(*, telemetry: Telemetry, clients: Sequence[httpx.AsyncClient], env: str):
    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=env)
        try:
            yield
        finally:
            # uvicorn has drained in-flight requests by now; close outbound pools, then
            # flush spans while the exporter connection is still open.
            for client in clients:
                await client.aclose()
            telemetry.shutdown()
            log.info("shutdown")

    return lifespan


async def _classified_error_handler(_: Request, exc: ClassifiedError) -> JSONResponse:
    # Runs inside the request's server span; the cause goes to the span and logs only.
    record_failure(trace.get_current_span(), exc)
    log.warning(
        "request.failed",
        kind=exc.kind.value,
        message=exc.message,
        cause=describe_cause(exc),
        tags=exc.tags,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorBody(message=exc.message).model_dump(),
    )


async def _unhandled_error_handler(_: Request, exc: Exception) -> JSONResponse:
    log.error("request.crashed", error=f"{type(exc).__name__}: {exc}")
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorBody(message="internal server error").model_dump(),
    )


# --- Module Notes -----------------------------------------------------------
# Both services share one composition path (`_build_app`); they differ only in the
# pipeline stored on app.state and the router mounted at "/".

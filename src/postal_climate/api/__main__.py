"""
postal_climate.api.__main__

Entrypoint for running either service via `python -m postal_climate.api {input,orchestrator}`.

Responsibilities:
- Load settings and configure logging.
- Initialize telemetry (fatal if the collector is unreachable).
- Create the app and start uvicorn with a bounded graceful-shutdown period.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import uvicorn
from fastapi import FastAPI

from postal_climate.api.app import create_input_app, create_orchestrator_app
from postal_climate.observability.logging import configure_logging
from postal_climate.observability.tracing import init_telemetry
from postal_climate.settings import Settings, get_settings


@dataclass(frozen=True, slots=True)
class ServiceSpec:
    name: str
    factory: Callable[..., FastAPI]
    port: Callable[[Settings], int]


SERVICES: dict[str, ServiceSpec] = {
    "input": ServiceSpec(
        name="input-service",
        factory=create_input_app,
        port=lambda s: s.input_service_port,
    ),
    "orchestrator": ServiceSpec(
        name="orchestrator-service",
        factory=create_orchestrator_app,
        port=lambda s: s.orchestrator_service_port,
    ),
}


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="postal-climate")
    parser.add_argument("service", choices=sorted(SERVICES))
    args = parser.parse_args(argv)

    spec = SERVICES[args.service]
    settings = get_settings()
    configure_logging(service_name=spec.name, level=settings.log_level)
    telemetry = init_telemetry(service_name=spec.name, settings=settings)
    app = spec.factory(settings=settings, telemetry=telemetry)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=spec.port(settings),
        log_config=None,  # structlog
        timeout_graceful_shutdown=settings.shutdown_grace_period_s,
    )


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# uvicorn handles SIGINT/SIGTERM: it stops accepting connections, waits for in-flight
# requests, then runs the app lifespan shutdown (HTTP clients, then telemetry).

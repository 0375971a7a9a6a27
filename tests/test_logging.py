"""
tests.test_logging

Log events carry the active span and are configured by the service entry point.
"""

from __future__ import annotations

import logging
from typing import Any

import pytest
import structlog
from fastapi import FastAPI

from postal_climate.api import __main__ as entrypoint
from postal_climate.observability.logging import add_span_context, event_processors
from postal_climate.observability.tracing import Telemetry
from postal_climate.settings import Settings


def test_span_context_is_added_inside_a_span(telemetry: Telemetry) -> None:
    with telemetry.tracer.start_as_current_span("find-location-by-postal-code") as span:
        event = add_span_context(None, "info", {"event": "location.lookup"})
        ctx = span.get_span_context()

    assert event["span_id"] == format(ctx.span_id, "016x")
    assert event["trace_id"] == format(ctx.trace_id, "032x")


def test_bound_trace_id_is_kept(telemetry: Telemetry) -> None:
    with telemetry.tracer.start_as_current_span("climate"):
        event = add_span_context(None, "info", {"event": "startup", "trace_id": "bound"})

    assert event["trace_id"] == "bound"
    assert "span_id" in event


def test_no_span_adds_nothing() -> None:
    assert add_span_context(None, "info", {"event": "startup"}) == {"event": "startup"}


def test_service_name_is_stamped() -> None:
    event: dict[str, Any] = {"event": "startup"}
    for processor in event_processors("orchestrator-service"):
        event = processor(logging.getLogger("tests"), "info", event)

    assert event["service"] == "orchestrator-service"
    assert event["level"] == "info"
    assert event["logger"] == "tests"


@pytest.mark.parametrize("service", ["input", "orchestrator"])
def test_main_configures_logging_before_telemetry(
    monkeypatch: pytest.MonkeyPatch, settings: Settings, telemetry: Telemetry, service: str
) -> None:
    calls: list[tuple[str, Any]] = []

    def fake_configure_logging(*, service_name: str, level: str) -> None:
        calls.append(("logging", service_name))

    def fake_init_telemetry(*, service_name: str, settings: Settings) -> Telemetry:
        calls.append(("telemetry", service_name))
        return telemetry

    def fake_run(app: FastAPI, **kwargs: Any) -> None:
        calls.append(("run", kwargs["port"]))

    monkeypatch.setattr(entrypoint, "get_settings", lambda: settings)
    monkeypatch.setattr(entrypoint, "configure_logging", fake_configure_logging)
    monkeypatch.setattr(entrypoint, "init_telemetry", fake_init_telemetry)
    monkeypatch.setattr(entrypoint.uvicorn, "run", fake_run)

    entrypoint.main([service])

    spec = entrypoint.SERVICES[service]
    assert calls == [
        ("logging", spec.name),
        ("telemetry", spec.name),
        ("run", spec.port(settings)),
    ]


def test_app_factory_leaves_logging_alone(
    monkeypatch: pytest.MonkeyPatch, settings: Settings, telemetry: Telemetry
) -> None:
    def fail(**_: Any) -> None:
        raise AssertionError("app factories must not reconfigure structlog")

    monkeypatch.setattr(structlog, "configure", fail)

    entrypoint.create_orchestrator_app(settings=settings, telemetry=telemetry)
    entrypoint.create_input_app(settings=settings, telemetry=telemetry)

"""
tests.conftest

Shared fixtures: test settings and in-memory span capture.
"""

from __future__ import annotations

import pytest
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from postal_climate.observability.tracing import Telemetry, init_telemetry
from postal_climate.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test", otel_enabled=False, weather_api_key="any-api-key")


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def telemetry(settings: Settings, span_exporter: InMemorySpanExporter) -> Telemetry:
    return init_telemetry(service_name="test-service", settings=settings, exporter=span_exporter)

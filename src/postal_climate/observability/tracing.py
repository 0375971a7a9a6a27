"""
postal_climate.observability.tracing

OpenTelemetry wiring for both services.

Responsibilities:
- Build one `Telemetry` handle per process (tracer provider, tracer, propagator).
- Verify the OTLP collector is reachable before serving.
- Extract/inject W3C trace context and record failures on spans.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

import grpc
from opentelemetry.context import Context
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.propagators.textmap import TextMapPropagator
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    SimpleSpanProcessor,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import ALWAYS_ON
from opentelemetry.trace import Span, Status, StatusCode, Tracer, format_trace_id
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

from postal_climate.errors import ClassifiedError, describe_cause
from postal_climate.observability.logging import get_logger
from postal_climate.settings import Settings

log = get_logger(__name__)


class TelemetryInitError(RuntimeError):
    pass


@dataclass(frozen=True, slots=True)
class Telemetry:
    """
    Process-scoped tracing handle. Passed explicitly to app factories; never installed
    as the global OpenTelemetry provider.
    """

    service_name: str
    provider: TracerProvider
    tracer: Tracer
    propagator: TextMapPropagator

    def extract(self, headers: Mapping[str, str]) -> Context:
        # No `traceparent` header yields an empty context, so the next span is a new root.
        return self.propagator.extract(carrier=headers)

    def shutdown(self) -> None:
        # Flushes pending spans before the exporter connection closes.
        self.provider.shutdown()


def init_telemetry(
    *,
    service_name: str,
    settings: Settings,
    exporter: SpanExporter | None = None,
) -> Telemetry:
    provider = TracerProvider(
        resource=Resource.create({SERVICE_NAME: service_name}),
        sampler=ALWAYS_ON,
    )

    if exporter is not None:
        # Explicit exporters (tests, local debugging) export synchronously.
        provider.add_span_processor(SimpleSpanProcessor(exporter))
    elif settings.otel_enabled:
        _wait_for_collector(settings.otel_collector_url, timeout_s=settings.otel_connect_timeout_s)
        otlp = OTLPSpanExporter(endpoint=settings.otel_collector_url, insecure=True)
        provider.add_span_processor(BatchSpanProcessor(otlp))
        log.info("telemetry.exporter_ready", collector=settings.otel_collector_url)
    else:
        log.info("telemetry.export_disabled")

    return Telemetry(
        service_name=service_name,
        provider=provider,
        tracer=provider.get_tracer(service_name),
        propagator=TraceContextTextMapPropagator(),
    )


def _wait_for_collector(url: str, *, timeout_s: float) -> None:
    channel = grpc.insecure_channel(url)
    try:
        grpc.channel_ready_future(channel).result(timeout=timeout_s)
    except grpc.FutureTimeoutError as e:
        raise TelemetryInitError(
            f"failed to connect to trace collector at {url} within {timeout_s}s"
        ) from e
    finally:
        channel.close()


def current_trace_id(span: Span) -> str:
    return format_trace_id(span.get_span_context().trace_id)


def record_failure(span: Span, exc: BaseException, description: str = "") -> None:
    """
    Mark `span` as failed. Classified errors contribute their message, kind, cause and tags.
    """

    if isinstance(exc, ClassifiedError):
        description = exc.message
        attributes: dict[str, Any] = {
            "error.kind": exc.kind.value,
            "error.cause": describe_cause(exc),
        }
        attributes.update({f"error.tag.{k}": str(v) for k, v in exc.tags.items()})
        span.set_attributes(attributes)
    span.set_status(Status(StatusCode.ERROR, description or str(exc)))
    span.record_exception(exc)


@contextmanager
def traced(
    tracer: Tracer,
    name: str,
    *,
    error_description: str,
    attributes: Mapping[str, Any] | None = None,
) -> Iterator[Span]:
    """
    Child span around one logical operation. Failures are recorded before the span ends;
    cancellation ends the span without an error status.
    """

    with tracer.start_as_current_span(
        name,
        attributes=attributes,
        record_exception=False,
        set_status_on_exception=False,
    ) as span:
        try:
            yield span
        except Exception as exc:
            record_failure(span, exc, error_description)
            raise


# --- Module Notes -----------------------------------------------------------
# The global `opentelemetry.trace` provider stays the no-op default; every span in this
# codebase comes from `Telemetry.tracer`. Context itself still flows through the
# OpenTelemetry contextvars, which is what lets outbound injection see the current span.

"""
postal_climate.observability.logging

Structured logging configuration for both services.

Responsibilities:
- Configure `structlog` for one JSON object per line on stdout.
- Stamp every event with the service name and the active span, so log lines can be
  joined to traces.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from opentelemetry import trace

EventDict = dict[str, Any]


def configure_logging(*, service_name: str, level: str) -> None:
    """
    Called once per process from the service entry point, before telemetry and uvicorn.
    """

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )
    structlog.configure(
        processors=[*event_processors(service_name), structlog.processors.JSONRenderer()],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def event_processors(service_name: str) -> list[Any]:
    # Everything up to (not including) the renderer.
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_service_name(service_name),
        add_span_context,
        structlog.processors.dict_tracebacks,
    ]


def add_span_context(_: Any, __: str, event_dict: EventDict) -> EventDict:
    """
    Adds `span_id` of the span active when the event is emitted.

    Inside a resolver call that is the child span, not the request's server span.
    `trace_id` is filled only if the request middleware has not bound it already.
    """
    ctx = trace.get_current_span().get_span_context()
    if not ctx.is_valid:
        return event_dict
    event_dict["span_id"] = trace.format_span_id(ctx.span_id)
    event_dict.setdefault("trace_id", trace.format_trace_id(ctx.trace_id))
    return event_dict


def _add_service_name(service_name: str):
    # "input-service" or "orchestrator-service".
    def processor(_: Any, __: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)

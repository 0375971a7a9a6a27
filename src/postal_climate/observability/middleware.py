"""
postal_climate.observability.middleware

HTTP middleware for request-scoped tracing and logging context.

Responsibilities:
- Continue the caller's trace (or start a new root) with one server span per request.
- Generate/propagate request IDs.
- Bind request metadata and the trace id into structlog contextvars.
"""

from __future__ import annotations

import uuid

import structlog
from opentelemetry.trace import SpanKind
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from postal_climate.observability.tracing import Telemetry, current_trace_id


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    - Extracts the inbound W3C trace context and opens the server span
    - Ensures every request has a request id
    - Binds request-scoped contextvars for structured logs
    """

    def __init__(self, app: ASGIApp, *, telemetry: Telemetry, span_name: str) -> None:
        super().__init__(app)
        self._telemetry = telemetry
        self._span_name = span_name

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        parent = self._telemetry.extract(request.headers)

        with self._telemetry.tracer.start_as_current_span(
            self._span_name,
            context=parent,
            kind=SpanKind.SERVER,
            attributes={
                "http.request.method": request.method,
                "url.path": request.url.path,
                "request.id": request_id,
            },
        ) as span:
            structlog.contextvars.clear_contextvars()
            structlog.contextvars.bind_contextvars(
                request_id=request_id,
                trace_id=current_trace_id(span),
                path=request.url.path,
                method=request.method,
            )
            try:
                response: Response = await call_next(request)
            finally:
                # Avoid leaking context across requests under async concurrency.
                structlog.contextvars.clear_contextvars()
            span.set_attribute("http.response.status_code", response.status_code)

        response.headers["x-request-id"] = request_id
        return response


# --- Module Notes -----------------------------------------------------------
# The span opened here is the parent of the resolver spans and of every outbound
# `traceparent` header injected by `postal_climate.clients.upstream`.

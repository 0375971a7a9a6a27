"""
postal_climate.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- OpenTelemetry tracer setup and W3C trace-context propagation.
- Request context propagation for consistent log enrichment.
"""

# Package marker.

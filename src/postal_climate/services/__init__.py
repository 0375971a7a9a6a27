"""
postal_climate.services

Service layer: the two request pipelines.

Responsibilities:
- Climate lookup by postal code (Orchestrator Service).
- Validation and forwarding of client requests (Input Service).
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services raise `postal_climate.errors.ClassifiedError`; HTTP status mapping happens in
# the API layer only.

"""
postal_climate.api

API package for the Input and Orchestrator services.

Responsibilities:
- FastAPI app factories and router modules.
- API-layer dependency wiring and error-to-response mapping.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: request parsing + delegation to services.

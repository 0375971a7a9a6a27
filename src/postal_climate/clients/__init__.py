"""
postal_climate.clients

Outbound HTTP client package.

Responsibilities:
- Provide the single GET boundary used for ViaCEP, WeatherAPI and the Orchestrator Service.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Resolvers and services depend on this boundary, never on httpx directly.

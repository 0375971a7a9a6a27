"""
postal_climate.resolvers

Upstream resolvers used by the Orchestrator Service.

Responsibilities:
- Postal code -> location (ViaCEP).
- City name -> current weather (WeatherAPI).
"""

# Package marker.

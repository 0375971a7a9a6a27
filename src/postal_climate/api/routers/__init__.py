"""
postal_climate.api.routers

Routers for both services.
"""

# Package marker.

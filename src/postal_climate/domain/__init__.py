"""
postal_climate.domain

Domain package.

Responsibilities:
- Request/response and upstream payload models.
- Pure temperature conversion.
"""

# Package marker.

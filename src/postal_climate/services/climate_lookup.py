"""
postal_climate.services.climate_lookup

Orchestrator pipeline: postal code -> location -> current weather -> temperatures.

Responsibilities:
- Validate the postal code before any network call.
- Sequence the location and climate resolvers, each inside its own child span.
- Turn an empty resolved city into a not-found outcome.
- Convert the Celsius reading into the `TemperatureResult` output.
"""

from __future__ import annotations

import re

from opentelemetry.trace import Tracer

from postal_climate.domain.models import ClimateReading, Location, TemperatureResult
from postal_climate.domain.temperature import build_result
from postal_climate.errors import NotFoundError, UnknownError, ValidationError
from postal_climate.observability.logging import get_logger
from postal_climate.observability.tracing import traced
from postal_climate.resolvers.base import Resolver

log = get_logger(__name__)

# Five digits, optional hyphen, three digits. Searched, not anchored.
POSTAL_CODE_PATTERN = re.compile(r"\b\d{5}-?\d{3}\b", re.ASCII)

LOCATION_SPAN = "find-location-by-postal-code"
CLIMATE_SPAN = "find-climate-by-city-name"


def normalize_postal_code(raw: str) -> str:
    """
    Return the 8-digit form of the first postal code found in `raw`.

    Raises ValidationError when `raw` is empty or holds no postal code.
    """

    match = POSTAL_CODE_PATTERN.search(raw) if raw else None
    if match is None:
        raise ValidationError(
            message="invalid postal code",
            cause="postal code must match 00000-000 or 00000000",
            tags={"postal_code": raw},
            reasons=["postal code must have 5 digits, an optional hyphen and 3 digits"],
        )
    return match.group(0).replace("-", "")


class ClimateLookupService:
    def __init__(
        self,
        *,
        location_resolver: Resolver[str, Location],
        climate_resolver: Resolver[str, ClimateReading],
        tracer: Tracer,
    ) -> None:
        self._locations = location_resolver
        self._climates = climate_resolver
        self._tracer = tracer

    async def lookup(self, raw_postal_code: str) -> TemperatureResult:
        postal_code = normalize_postal_code(raw_postal_code)
        tags = {"postal_code": postal_code}

        with traced(
            self._tracer,
            LOCATION_SPAN,
            error_description="error finding location by postal code",
            attributes=tags,
        ):
            try:
                location = await self._locations.resolve(postal_code)
            except Exception as e:
                # Any resolver failure is a server fault; only an empty city means not found.
                raise UnknownError(
                    message="Unknown error getting location",
                    cause=e,
                    tags=tags,
                ) from e
            if not location.city:
                raise NotFoundError(
                    message="can not find postal code",
                    cause="postal code resolved to an empty city",
                    tags=tags,
                )

        city = location.city
        with traced(
            self._tracer,
            CLIMATE_SPAN,
            error_description="error finding climate by city name",
            attributes={"city": city},
        ):
            try:
                reading = await self._climates.resolve(city)
            except Exception as e:
                # Whatever the climate side reports, the caller sees a server fault.
                raise UnknownError(
                    message="Unknown error getting climate",
                    cause=e,
                    tags={**tags, "city": city},
                ) from e

        result = build_result(city=city, celsius=reading.celsius)
        log.info("climate_lookup.done", postal_code=postal_code, city=city, temp_c=result.celsius)
        return result

"""
postal_climate.resolvers.climate

City name -> current weather lookup against a WeatherAPI-compatible API.
"""

from __future__ import annotations

from urllib.parse import quote_plus

from postal_climate.clients.upstream import UpstreamClient
from postal_climate.domain.models import ClimateReading
from postal_climate.observability.logging import get_logger

log = get_logger(__name__)


class ClimateResolver:
    """
    Upstream errors propagate unclassified; the climate lookup service turns them into
    server faults.
    """

    def __init__(self, *, client: UpstreamClient, api_key: str) -> None:
        self._client = client
        self._api_key = api_key

    def endpoint_for(self, city: str) -> str:
        return f"/v1/current.json?key={quote_plus(self._api_key)}&q={quote_plus(city)}&aqi=no"

    async def resolve(self, value: str) -> ClimateReading:
        city = value
        log.info("climate.lookup", city=city)

        reading = await self._client.get(self.endpoint_for(city), into=ClimateReading)

        log.debug("climate.resolved", city=city, temp_c=reading.celsius)
        return reading

"""
postal_climate.resolvers.location

Postal code -> location lookup against a ViaCEP-compatible API.

Responsibilities:
- Call `/<postal_code>/json/`.
- Classify upstream failures: 404 -> NotFoundError, anything else -> UnknownError.
"""

from __future__ import annotations

from postal_climate.clients.upstream import UpstreamClient, UpstreamError
from postal_climate.domain.models import Location
from postal_climate.errors import NotFoundError, UnknownError
from postal_climate.observability.logging import get_logger

log = get_logger(__name__)


class LocationResolver:
    def __init__(self, *, client: UpstreamClient) -> None:
        self._client = client

    async def resolve(self, value: str) -> Location:
        postal_code = value
        tags = {"postal_code": postal_code}
        log.info("location.lookup", postal_code=postal_code)

        try:
            location = await self._client.get(f"/{postal_code}/json/", into=Location)
        except UpstreamError as e:
            if e.not_found:
                raise NotFoundError(message="can not find postal code", cause=e, tags=tags) from e
            raise UnknownError(
                message="Unknown error getting location", cause=e, tags=tags
            ) from e

        # An empty city is returned as-is; the climate lookup decides what it means.
        log.debug("location.resolved", postal_code=postal_code, city=location.city)
        return location


# --- Module Notes -----------------------------------------------------------
# ViaCEP answers unknown-but-well-formed codes with 200 `{"erro": true}` rather than 404,
# which is why the empty-city check exists one layer up.

"""
postal_climate.services.input

Input pipeline: validate the client's postal code and forward it to the Orchestrator Service.

Responsibilities:
- Reject anything but exactly 8 ASCII digits before touching the network.
- Call the Orchestrator with the current trace context.
- Rebuild the error kind from the Orchestrator's HTTP status.
"""

from __future__ import annotations

import re
from urllib.parse import urlencode

from postal_climate.clients.upstream import UpstreamClient, UpstreamError
from postal_climate.domain.models import PostalCodeRequest, TemperatureResult
from postal_climate.errors import NotFoundError, UnknownError, ValidationError
from postal_climate.observability.logging import get_logger

log = get_logger(__name__)

INPUT_POSTAL_CODE = re.compile(r"[0-9]{8}")


class InputService:
    def __init__(self, *, orchestrator: UpstreamClient) -> None:
        self._orchestrator = orchestrator

    async def execute(self, request: PostalCodeRequest) -> TemperatureResult:
        postal_code = request.postal_code
        tags = {"postal_code": postal_code}

        if not INPUT_POSTAL_CODE.fullmatch(postal_code):
            raise ValidationError(
                message="invalid postal code",
                cause="postal code must have 8 digits",
                tags=tags,
                reasons=["postal code must have 8 digits"],
            )

        log.info("input.forward", postal_code=postal_code)
        try:
            result = await self._orchestrator.get(
                f"/?{urlencode({'postal_code': postal_code})}", into=TemperatureResult
            )
        except UpstreamError as e:
            raise _classify(e, tags=tags) from e

        log.debug("input.result", postal_code=postal_code, city=result.city)
        return result


def _classify(error: UpstreamError, *, tags: dict[str, str]) -> NotFoundError | UnknownError:
    if error.not_found:
        return NotFoundError(message="can not find postal code", cause=error, tags=tags)
    if not error.received_response:
        return UnknownError(message="error reaching orchestrator service", cause=error, tags=tags)
    if 200 <= error.status_code < 300:  # type: ignore[operator]
        return UnknownError(message="decoding error", cause=error, tags=tags)
    return UnknownError(message="Unknown error getting temperatures", cause=error, tags=tags)


# --- Module Notes -----------------------------------------------------------
# The Orchestrator's error kind is not transmitted structurally; only its status code
# crosses the process boundary, so `_classify` is the single place it is reconstructed.

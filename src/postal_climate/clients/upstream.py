"""
postal_climate.clients.upstream

Generic JSON GET client for upstream HTTP APIs.

Responsibilities:
- Issue a single GET against a base-URL-bound `httpx.AsyncClient`.
- Inject the current trace context into outbound headers.
- Classify failures as "not found" (404) versus everything else, with the observed status.
- Decode the body strictly into a caller-supplied pydantic model.
"""

from __future__ import annotations

from typing import TypeVar

import httpx
import pydantic
from opentelemetry.propagators.textmap import TextMapPropagator
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator
from pydantic import BaseModel

from postal_climate.settings import Settings

ModelT = TypeVar("ModelT", bound=BaseModel)


class UpstreamError(Exception):
    """
    Unclassified upstream failure. `status_code` is None when no response was received.
    """

    def __init__(self, *, status_code: int | None, cause: BaseException | str) -> None:
        super().__init__(str(cause))
        self.status_code = status_code
        self.cause = cause

    @property
    def not_found(self) -> bool:
        return self.status_code == httpx.codes.NOT_FOUND

    @property
    def received_response(self) -> bool:
        return self.status_code is not None


def build_http_client(*, base_url: str, settings: Settings) -> httpx.AsyncClient:
    # One keep-alive client per upstream target, shared by all requests of the process.
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(settings.http_client_timeout_s),
        headers={"Accept": "application/json"},
    )


class UpstreamClient:
    """
    No logging, spans or retries here: callers own classification and observability.
    Cancellation of the calling task aborts the in-flight request and propagates.
    """

    def __init__(
        self,
        *,
        http: httpx.AsyncClient,
        propagator: TextMapPropagator | None = None,
    ) -> None:
        self._http = http
        self._propagator = propagator or TraceContextTextMapPropagator()

    async def get(self, endpoint: str, *, into: type[ModelT]) -> ModelT:
        headers: dict[str, str] = {}
        self._propagator.inject(headers)

        try:
            r = await self._http.get(endpoint, headers=headers)
        except httpx.HTTPError as e:
            raise UpstreamError(status_code=None, cause=e) from e

        if r.status_code == httpx.codes.NOT_FOUND:
            raise UpstreamError(status_code=r.status_code, cause="not found")
        if not r.is_success:
            raise UpstreamError(
                status_code=r.status_code,
                cause=f"unexpected status {r.status_code} from {r.request.url.path}",
            )

        try:
            return into.model_validate_json(r.content)
        except pydantic.ValidationError as e:
            raise UpstreamError(status_code=r.status_code, cause=e) from e


# --- Module Notes -----------------------------------------------------------
# Base URL and timeout live on the `httpx.AsyncClient` built from settings; endpoints
# passed to `get` are relative paths (with query string) appended to that base URL.

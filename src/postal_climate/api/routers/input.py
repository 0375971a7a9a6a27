from __future__ import annotations

from typing import Any

import pydantic
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from opentelemetry import trace
from starlette.status import HTTP_400_BAD_REQUEST

from postal_climate.api.deps import input_service
from postal_climate.domain.models import ErrorBody, PostalCodeRequest
from postal_climate.observability.logging import get_logger
from postal_climate.observability.tracing import record_failure
from postal_climate.services.input import InputService

router = APIRouter(tags=["input"])
log = get_logger(__name__)


@router.post("/", response_model=None)
async def submit_postal_code(
    request: Request,
    service: InputService = Depends(input_service),
) -> dict[str, Any] | JSONResponse:
    # Parsed by hand: a malformed body is a 400, while a bad postal code is a 422.
    try:
        payload = PostalCodeRequest.model_validate_json(await request.body())
    except pydantic.ValidationError as e:
        record_failure(trace.get_current_span(), e, "error decoding request body")
        log.warning("input.bad_body", errors=e.error_count())
        return JSONResponse(
            status_code=HTTP_400_BAD_REQUEST,
            content=ErrorBody(message="invalid request body").model_dump(),
        )

    result = await service.execute(payload)
    return result.to_wire()

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from postal_climate.api.deps import climate_lookup_service
from postal_climate.services.climate_lookup import ClimateLookupService

router = APIRouter(tags=["climate"])


@router.get("/")
async def get_temperatures(
    postal_code: str = Query(default=""),
    service: ClimateLookupService = Depends(climate_lookup_service),
) -> dict[str, Any]:
    # Missing/invalid postal codes are rejected by the service (422), not by FastAPI.
    result = await service.lookup(postal_code)
    return result.to_wire()

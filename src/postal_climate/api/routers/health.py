"""
postal_climate.api.routers.health

Liveness endpoint shared by both services.
"""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    # Liveness only: neither service owns a dependency worth probing for readiness.
    return {"status": "ok"}

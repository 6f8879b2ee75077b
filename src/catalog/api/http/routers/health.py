"""Liveness and readiness endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, status
from starlette.responses import JSONResponse

from src.catalog.api.http.deps import get_database_service
from src.catalog.core.services import DbSessionService

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Returns 200 as long as the process is serving requests."""
    return {"status": "healthy"}


@router.get("/ready", response_model=None)
def readiness(
    database: DbSessionService = Depends(get_database_service),
) -> dict[str, Any] | JSONResponse:
    """Reports whether the catalog store accepts connections; 503 if not."""
    checks = {"database": "healthy" if database.health_check() else "unhealthy"}
    if checks["database"] != "healthy":
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "checks": checks},
        )
    return {"status": "ready", "checks": checks}

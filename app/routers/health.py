# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# The demo has no database or queue behind it, so "healthy" only means the
# process is up and serving the users routes.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import settings

router = APIRouter()


class ServiceStatus(BaseModel):
    """Status of the fixture service, identified by name and version."""
    status: str
    service: str
    version: str
    environment: str
    checked_at: str


class LivenessResponse(BaseModel):
    status: str
    checked_at: str


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health", response_model=ServiceStatus)
async def health_check():
    """Report which build of the fixture is answering, and where."""
    return ServiceStatus(
        status="healthy",
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        checked_at=_utc_now(),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """Answer as long as the event loop is serving requests."""
    return LivenessResponse(status="alive", checked_at=_utc_now())

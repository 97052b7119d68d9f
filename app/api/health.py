"""Health check endpoints."""

from fastapi import APIRouter, Request
from pydantic import BaseModel

from app import __version__
from src.signal_engine import tick_source_state

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str


class HealthDetailResponse(HealthResponse):
    """Detailed health check response with tick source status."""

    tick_source: str
    tick_count: int


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="ok", version=__version__)


@router.get("/health/ready", response_model=HealthDetailResponse)
async def readiness_check(request: Request) -> HealthDetailResponse:
    """Readiness check including tick source state."""
    tick_source = tick_source_state(getattr(request.app.state, "tick_source", None))

    return HealthDetailResponse(
        status="ok" if tick_source in ("manual", "running") else "degraded",
        version=__version__,
        tick_source=tick_source,
        tick_count=request.app.state.scheduler.tick_count,
    )

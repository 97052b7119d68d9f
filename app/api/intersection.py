"""
Intersection endpoints.

Read-only views over the in-process scheduler plus a manual tick.
No persistence - every response is built from the current snapshot.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from pydantic import BaseModel, Field

from src.signal_engine import (
    NextGreen,
    Phase,
    PhaseCycleScheduler,
    Prediction,
    SchedulerSnapshot,
    SignalEngineError,
    SignalLight,
    SignalTiming,
    __engine_version__,
    advance,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# --- Response Models ---

class IntersectionInfoResponse(BaseModel):
    """Static intersection information."""

    engine_version: str = Field(description="Signal engine version")
    name: str = Field(description="Intersection name")
    timing: SignalTiming = Field(description="Phase durations")
    rotation: list[int] = Field(description="Direction ids in Green order")
    directions: dict[int, str] = Field(description="Direction names by id")


class ActiveDirectionResponse(BaseModel):
    """Who holds the intersection right now."""

    tick_count: int
    active_direction: int
    active_direction_name: str
    active_phase: Phase
    red_countdown: int = Field(description="Shared countdown shown on Red lights")
    next_green: NextGreen


class ForecastResponse(BaseModel):
    """Predicted Green direction per checkpoint."""

    tick_count: int
    active_direction: int
    predictions: list[Prediction]


# --- Dependencies ---

def get_scheduler(request: Request) -> PhaseCycleScheduler:
    return request.app.state.scheduler


# --- Endpoints ---

@router.get("/info", response_model=IntersectionInfoResponse)
async def get_info(
    scheduler: PhaseCycleScheduler = Depends(get_scheduler),
) -> IntersectionInfoResponse:
    """Get intersection configuration."""
    config = scheduler.config
    return IntersectionInfoResponse(
        engine_version=__engine_version__,
        name=config.name,
        timing=config.timing,
        rotation=list(scheduler.registry.rotation),
        directions={d.id: d.name for d in config.directions},
    )


@router.get("/snapshot", response_model=SchedulerSnapshot)
async def get_snapshot(
    scheduler: PhaseCycleScheduler = Depends(get_scheduler),
) -> SchedulerSnapshot:
    """Full consistent snapshot: lights, countdown, next Green and forecast."""
    return scheduler.snapshot()


@router.get("/lights", response_model=list[SignalLight])
async def get_lights(
    scheduler: PhaseCycleScheduler = Depends(get_scheduler),
) -> list[SignalLight]:
    """All lights with their current phase and seconds remaining."""
    return scheduler.lights


@router.get("/lights/{light_id}", response_model=SignalLight)
async def get_light(
    light_id: int,
    scheduler: PhaseCycleScheduler = Depends(get_scheduler),
) -> SignalLight:
    """Detail view of a single light."""
    light = scheduler.select_light(light_id)
    if light is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "light_not_found", "message": f"No light with id {light_id}"},
        )
    return light


@router.get("/active", response_model=ActiveDirectionResponse)
async def get_active(
    scheduler: PhaseCycleScheduler = Depends(get_scheduler),
) -> ActiveDirectionResponse:
    """Active direction, its phase and the shared Red countdown."""
    return ActiveDirectionResponse(
        tick_count=scheduler.tick_count,
        active_direction=scheduler.active_direction,
        active_direction_name=scheduler.registry.name_of(scheduler.active_direction),
        active_phase=scheduler.active_phase,
        red_countdown=scheduler.red_countdown,
        next_green=scheduler.next_green(),
    )


@router.get("/forecast", response_model=ForecastResponse)
async def get_forecast(
    scheduler: PhaseCycleScheduler = Depends(get_scheduler),
) -> ForecastResponse:
    """Predicted Green direction at each checkpoint."""
    return ForecastResponse(
        tick_count=scheduler.tick_count,
        active_direction=scheduler.active_direction,
        predictions=scheduler.forecast(),
    )


@router.post("/tick", response_model=SchedulerSnapshot)
async def post_tick(
    count: int = Query(default=1, ge=1, le=3600, description="Ticks to apply"),
    scheduler: PhaseCycleScheduler = Depends(get_scheduler),
) -> SchedulerSnapshot:
    """
    Advance the simulation by `count` seconds.

    Intended for manual stepping when the background tick source is off.
    """
    logger.info("Manual tick | count=%s from tick=%s", count, scheduler.tick_count)

    try:
        advance(scheduler, count)
    except SignalEngineError as e:
        logger.exception("Scheduler error during manual tick")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "scheduler_error", "message": str(e)},
        )

    return scheduler.snapshot()

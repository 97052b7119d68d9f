"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app import __version__
from app.api import health, intersection
from app.config import build_forecast_offsets, build_intersection_config, settings
from src.signal_engine import PhaseCycleScheduler, start_tick_source, stop_tick_source

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_scheduler() -> PhaseCycleScheduler:
    return PhaseCycleScheduler(
        build_intersection_config(settings),
        forecast_offsets=build_forecast_offsets(settings),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Run the one-second tick source for the lifetime of the app."""
    if settings.auto_tick:
        app.state.tick_source = start_tick_source(
            app.state.scheduler, settings.tick_interval_seconds
        )
    logger.info("Signal service started | auto_tick=%s", settings.auto_tick)

    yield

    if app.state.tick_source is not None:
        stop_tick_source(app.state.tick_source)
        app.state.tick_source = None
    logger.info("Signal service stopped")


app = FastAPI(
    title="Intersection Signal Service",
    description="Rotating four-way intersection scheduler with Green forecasts",
    version=__version__,
    lifespan=lifespan,
)

app.state.scheduler = create_scheduler()
app.state.tick_source = None

app.include_router(health.router, tags=["health"])
app.include_router(intersection.router, prefix="/intersection", tags=["intersection"])

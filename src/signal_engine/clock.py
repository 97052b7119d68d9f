"""
One-second tick source.

The periodic tick is an APScheduler interval job on the asyncio event
loop. Stopping the clock is the only cancellation concept; a tick in
progress always completes.
"""

import logging
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from .scheduler import PhaseCycleScheduler

logger = logging.getLogger(__name__)

TICK_JOB_ID = "signal_tick"


def advance(scheduler: PhaseCycleScheduler, ticks: int = 1) -> None:
    """Apply `ticks` synchronous ticks."""
    if ticks < 0:
        raise ValueError("ticks cannot be negative")
    for _ in range(ticks):
        scheduler.tick()


def create_tick_source(
    scheduler: PhaseCycleScheduler,
    interval: float = 1.0
) -> AsyncIOScheduler:
    """
    Build an (unstarted) interval job that ticks `scheduler`.

    The job is a coroutine so each tick runs on the event loop rather
    than in the executor's thread pool; readers on the loop never see a
    half-applied tick. Overlapping runs are coalesced into one.

    Args:
        scheduler: Phase cycle scheduler to drive
        interval: Seconds between ticks

    Returns:
        AsyncIOScheduler holding the tick job
    """
    if interval <= 0:
        raise ValueError("interval must be positive")

    async def _tick() -> None:
        scheduler.tick()

    tick_source = AsyncIOScheduler()
    tick_source.add_job(
        _tick,
        IntervalTrigger(seconds=interval),
        id=TICK_JOB_ID,
        name="Advance intersection by one tick",
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )
    return tick_source


def start_tick_source(
    scheduler: PhaseCycleScheduler,
    interval: float = 1.0
) -> AsyncIOScheduler:
    """Create and start the tick source. Must be called with a running loop."""
    tick_source = create_tick_source(scheduler, interval)
    tick_source.start()
    logger.info("Tick source started | interval=%ss", interval)
    return tick_source


def stop_tick_source(tick_source: Optional[AsyncIOScheduler]) -> None:
    if tick_source is None or not tick_source.running:
        logger.warning("No tick source running")
        return
    tick_source.shutdown(wait=False)
    logger.info("Tick source stopped")


def tick_source_state(tick_source: Optional[AsyncIOScheduler]) -> str:
    """
    State of the tick job: `manual` (no source), `running`, `paused`
    or `stopped`.
    """
    if tick_source is None:
        return "manual"
    if not tick_source.running:
        return "stopped"
    job = tick_source.get_job(TICK_JOB_ID)
    if job is None:
        return "stopped"
    if job.next_run_time is None:
        return "paused"
    return "running"

"""Tests for the tick source."""

import asyncio

import pytest
from src.signal_engine import (
    PhaseCycleScheduler,
    advance,
    create_tick_source,
    default_config,
    start_tick_source,
    stop_tick_source,
    tick_source_state,
)
from src.signal_engine.clock import TICK_JOB_ID


@pytest.fixture
def scheduler():
    return PhaseCycleScheduler(default_config())


class TestAdvance:

    def test_advance_applies_ticks(self, scheduler):
        advance(scheduler, 12)
        assert scheduler.tick_count == 12

    def test_advance_zero(self, scheduler):
        advance(scheduler, 0)
        assert scheduler.tick_count == 0

    def test_negative_rejected(self, scheduler):
        with pytest.raises(ValueError):
            advance(scheduler, -1)


class TestTickSource:
    """Interval job driving the scheduler."""

    def test_job_configuration(self, scheduler):
        tick_source = create_tick_source(scheduler, 2.0)
        job = tick_source.get_job(TICK_JOB_ID)

        assert job is not None
        assert job.max_instances == 1
        assert job.coalesce is True
        assert job.trigger.interval.total_seconds() == 2.0

    def test_invalid_interval(self, scheduler):
        with pytest.raises(ValueError, match="interval"):
            create_tick_source(scheduler, 0)

    def test_manual_state(self):
        assert tick_source_state(None) == "manual"

    def test_not_started_is_stopped(self, scheduler):
        assert tick_source_state(create_tick_source(scheduler)) == "stopped"

    @pytest.mark.asyncio
    async def test_ticks_until_stopped(self, scheduler):
        tick_source = start_tick_source(scheduler, 0.02)
        assert tick_source_state(tick_source) == "running"

        await asyncio.sleep(0.3)
        stop_tick_source(tick_source)
        applied = scheduler.tick_count

        assert applied > 0
        await asyncio.sleep(0.1)
        assert scheduler.tick_count == applied
        assert tick_source_state(tick_source) == "stopped"

    @pytest.mark.asyncio
    async def test_paused_job(self, scheduler):
        tick_source = start_tick_source(scheduler, 0.02)
        tick_source.pause_job(TICK_JOB_ID)
        try:
            assert tick_source_state(tick_source) == "paused"
        finally:
            stop_tick_source(tick_source)

    def test_stop_without_source(self):
        stop_tick_source(None)

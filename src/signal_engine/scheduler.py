"""
Phase cycle scheduler.

Owns the light table and the shared Red countdown, and advances both by
one second per `tick()`. The whole transition runs synchronously inside
`tick()`, so any reader sees either the state before a tick or the state
after it.

Per tick:
    1. Green light found: count down; at 0 it turns Yellow and the
       shared countdown resets to Y + G.
    2. Else Yellow light found: count down; at 0 it turns Red, the next
       direction in rotation turns Green and the countdown resets to G.
    3. Else: the first direction in rotation turns Green, countdown G.
    4. A tick that neither reset the countdown nor ran with a Yellow
       light decrements the countdown (floored at 0).
"""

import logging
from typing import Optional

from .countdown import CountdownSynchronizer
from .errors import ConfigurationError, InvariantViolation
from .forecast import checkpoint_offsets, compute_forecast, green_time_left
from .models import (
    IntersectionConfig,
    NextGreen,
    Phase,
    Prediction,
    SchedulerSnapshot,
    SignalLight,
)
from .registry import DirectionRegistry
from .validation import validate_config

logger = logging.getLogger(__name__)


class PhaseCycleScheduler:
    """Round-robin Green/Yellow/Red scheduler for one intersection."""

    def __init__(
        self,
        config: IntersectionConfig,
        forecast_offsets: Optional[list[int]] = None
    ):
        validate_config(config)

        self.config = config
        self.timing = config.timing
        self.registry = DirectionRegistry.from_config(config)
        self.forecast_offsets = (
            checkpoint_offsets() if forecast_offsets is None else list(forecast_offsets)
        )
        self.tick_count = 0

        self._lights = [light.model_copy(deep=True) for light in config.lights]
        self._countdown = CountdownSynchronizer()

        initial = config.initial_direction
        if initial is None:
            initial = self.registry.first()
        for light in self._lights:
            light.phase = Phase.RED
        self._promote(initial)

        logger.info(
            "Scheduler ready | intersection=%s rotation=%s green=%s yellow=%s",
            config.name,
            list(self.registry.rotation),
            self.timing.green_duration,
            self.timing.yellow_duration,
        )

    # --- Tick ---

    def tick(self) -> None:
        """Advance the simulation by one second."""
        green = self._find(Phase.GREEN)
        yellow = self._find(Phase.YELLOW) if green is None else None
        countdown_reset = False

        if green is not None:
            green.seconds_remaining -= 1
            if green.seconds_remaining <= 0:
                green.phase = Phase.YELLOW
                green.seconds_remaining = self.timing.yellow_duration
                self._countdown.reset(
                    self.timing.yellow_duration + self.timing.green_duration
                )
                countdown_reset = True
                logger.debug(
                    "Direction %s Green -> Yellow at tick %s",
                    green.direction_id,
                    self.tick_count + 1,
                )
        elif yellow is not None:
            yellow.seconds_remaining -= 1
            if yellow.seconds_remaining <= 0:
                yellow.phase = Phase.RED
                next_direction = self.registry.next_after(yellow.direction_id)
                self._promote(next_direction)
                countdown_reset = True
                logger.info(
                    "Direction %s Yellow -> Red, direction %s Green at tick %s",
                    yellow.direction_id,
                    next_direction,
                    self.tick_count + 1,
                )
        else:
            first = self.registry.first()
            self._promote(first)
            countdown_reset = True
            logger.info("No active light, starting rotation with direction %s", first)

        if not countdown_reset and yellow is None:
            self._countdown.decrement()

        self._countdown.apply(self._lights)
        self.tick_count += 1
        self._check_invariants()

    def _promote(self, direction_id: int) -> None:
        """Turn `direction_id` Green and restart the shared countdown."""
        light = self._light_for(direction_id)
        light.phase = Phase.GREEN
        light.seconds_remaining = self.timing.green_duration
        self._active_direction = direction_id
        self._countdown.reset(self.timing.green_duration)
        self._countdown.apply(self._lights)

    # --- Lookups ---

    def _find(self, phase: Phase) -> Optional[SignalLight]:
        return next((l for l in self._lights if l.phase == phase), None)

    def _light_for(self, direction_id: int) -> SignalLight:
        light = next((l for l in self._lights if l.direction_id == direction_id), None)
        if light is None:
            raise ConfigurationError(f"no light for direction {direction_id}")
        return light

    def _active_light(self) -> SignalLight:
        return self._light_for(self._active_direction)

    # --- Invariants ---

    def _check_invariants(self) -> None:
        active = [l for l in self._lights if l.is_active()]
        if len(active) != 1:
            raise InvariantViolation(
                f"expected exactly one Green/Yellow light, found {len(active)}"
            )
        if active[0].direction_id != self._active_direction:
            raise InvariantViolation(
                f"active light serves direction {active[0].direction_id}, "
                f"scheduler points at {self._active_direction}"
            )
        negative = [l.id for l in self._lights if l.seconds_remaining < 0]
        if negative:
            raise InvariantViolation(f"negative seconds_remaining on lights {negative}")
        if not self._countdown.is_synchronized(self._lights):
            raise InvariantViolation("Red light countdown diverged from shared countdown")

    # --- Read side ---

    @property
    def lights(self) -> list[SignalLight]:
        """Copies of every light."""
        return [light.model_copy(deep=True) for light in self._lights]

    @property
    def active_direction(self) -> int:
        return self._active_direction

    @property
    def active_phase(self) -> Phase:
        return self._active_light().phase

    @property
    def red_countdown(self) -> int:
        return self._countdown.value

    def select_light(self, light_id: int) -> Optional[SignalLight]:
        """Copy of the light with `light_id`, or None if unknown."""
        for light in self._lights:
            if light.id == light_id:
                return light.model_copy(deep=True)
        return None

    def next_green(self) -> NextGreen:
        """Direction promoted after the active one."""
        direction_id = self.registry.next_after(self._active_direction)
        return NextGreen(
            direction_id=direction_id,
            direction_name=self.registry.name_of(direction_id),
            light_id=self._light_for(direction_id).id,
            seconds_until_green=self._countdown.value,
        )

    def forecast(self) -> list[Prediction]:
        """Predicted Green direction at each checkpoint."""
        active = self._active_light()
        return compute_forecast(
            current_direction=self._active_direction,
            seconds_left_in_green=green_time_left(active.phase, active.seconds_remaining),
            registry=self.registry,
            timing=self.timing,
            offsets=self.forecast_offsets,
        )

    def snapshot(self) -> SchedulerSnapshot:
        return SchedulerSnapshot(
            tick_count=self.tick_count,
            active_direction=self._active_direction,
            active_phase=self.active_phase,
            red_countdown=self._countdown.value,
            lights=self.lights,
            next_green=self.next_green(),
            forecast=self.forecast(),
        )

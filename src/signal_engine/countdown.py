"""
Shared Red countdown.

One counter is the single source of truth for the number shown on every
Red light. The scheduler writes it through to the lights after each tick.
"""

from typing import Iterable

from .models import Phase, SignalLight


class CountdownSynchronizer:
    """Shared countdown referenced by every Red light."""

    def __init__(self, initial: int = 0):
        self._value = max(0, initial)

    @property
    def value(self) -> int:
        return self._value

    def reset(self, seconds: int) -> None:
        self._value = max(0, seconds)

    def decrement(self) -> None:
        """Count down one second, floored at zero."""
        self._value = max(0, self._value - 1)

    def apply(self, lights: Iterable[SignalLight]) -> None:
        """Write the shared value into every Red light."""
        for light in lights:
            if light.phase == Phase.RED:
                light.seconds_remaining = self._value

    def is_synchronized(self, lights: Iterable[SignalLight]) -> bool:
        return all(
            light.seconds_remaining == self._value
            for light in lights
            if light.phase == Phase.RED
        )

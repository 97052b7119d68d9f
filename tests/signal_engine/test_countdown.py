"""Tests for the shared Red countdown."""

from src.signal_engine import CountdownSynchronizer, Phase, SignalLight


def _lights():
    return [
        SignalLight(id=1, direction_id=1, phase=Phase.GREEN, seconds_remaining=12),
        SignalLight(id=2, direction_id=2, phase=Phase.RED, seconds_remaining=3),
        SignalLight(id=3, direction_id=3, phase=Phase.RED, seconds_remaining=0),
    ]


class TestCountdown:

    def test_initial_value_floored(self):
        assert CountdownSynchronizer(-4).value == 0

    def test_decrement(self):
        countdown = CountdownSynchronizer(2)
        countdown.decrement()
        assert countdown.value == 1

    def test_decrement_floors_at_zero(self):
        countdown = CountdownSynchronizer(0)
        countdown.decrement()
        assert countdown.value == 0

    def test_reset(self):
        countdown = CountdownSynchronizer(3)
        countdown.reset(35)
        assert countdown.value == 35

    def test_apply_writes_only_red_lights(self):
        """The active light keeps its own remaining time."""
        countdown = CountdownSynchronizer(20)
        lights = _lights()
        countdown.apply(lights)

        assert lights[0].seconds_remaining == 12
        assert lights[1].seconds_remaining == 20
        assert lights[2].seconds_remaining == 20
        assert countdown.is_synchronized(lights)

    def test_detects_divergence(self):
        countdown = CountdownSynchronizer(20)
        assert not countdown.is_synchronized(_lights())

"""
Green-direction forecast for future checkpoints.

Directions receive Green in a fixed round-robin where every slot lasts
one cycle (Green + Yellow). The direction holding Green at a future
instant is therefore a function of elapsed time modulo one full
rotation:

    total_cycle_time = len(rotation) * (G + Y)

No intermediate ticks are simulated, so a forecast costs
O(checkpoints). During the last Yellow seconds of a slot the forecast
already names the following direction, so it may run one direction
ahead of a tick-by-tick simulation.
"""

from .models import Phase, Prediction, SignalTiming
from .registry import DirectionRegistry


# Checkpoints every 5 minutes, 6 of them (5..30 min)
DEFAULT_CHECKPOINT_INTERVAL_MINUTES = 5
DEFAULT_CHECKPOINT_COUNT = 6


def checkpoint_offsets(
    interval_minutes: int = DEFAULT_CHECKPOINT_INTERVAL_MINUTES,
    count: int = DEFAULT_CHECKPOINT_COUNT
) -> list[int]:
    """
    Checkpoint offsets in seconds.

    Args:
        interval_minutes: Spacing between checkpoints
        count: Number of checkpoints

    Returns:
        Offsets in seconds, ascending (e.g. [300, 600, ..., 1800])

    Raises:
        ValueError: If interval or count is not positive
    """
    if interval_minutes <= 0:
        raise ValueError("interval_minutes must be positive")
    if count <= 0:
        raise ValueError("count must be positive")
    return [i * interval_minutes * 60 for i in range(1, count + 1)]


def green_time_left(phase: Phase, seconds_remaining: int) -> int:
    """
    Green time still to run for the active light.

    A Yellow light has already consumed its whole Green allotment.
    """
    if phase == Phase.GREEN:
        return seconds_remaining
    return 0


def predict_green_direction(
    offset_seconds: int,
    current_direction: int,
    seconds_left_in_green: int,
    registry: DirectionRegistry,
    timing: SignalTiming
) -> int:
    """
    Predict the Green direction `offset_seconds` from now.

    Steps:
        1. remaining = green_left + Y  (time until the next Green begins)
        2. t = offset - remaining; t <= 0 means the next direction
        3. full = t // total_cycle_time, rest = t % total_cycle_time
        4. start at the direction after the current one; `full` whole
           rotations do not move it
        5. step one direction per whole cycle in `rest`; step once more
           if what is left still covers a full Green

    Args:
        offset_seconds: Checkpoint offset in seconds
        current_direction: Direction currently Green or Yellow
        seconds_left_in_green: Green seconds left (0 during Yellow)
        registry: Rotation of directions
        timing: Phase durations

    Returns:
        Predicted direction id
    """
    cycle = timing.cycle_duration
    current_index = registry.index_of(current_direction)

    remaining_in_current_cycle = seconds_left_in_green + timing.yellow_duration
    time_to_target = offset_seconds - remaining_in_current_cycle
    if time_to_target <= 0:
        return registry.at(current_index + 1)

    total_cycle_time = len(registry) * cycle
    complete_cycles, remaining_time = divmod(time_to_target, total_cycle_time)

    # Whole rotations land back on the same direction
    index = current_index + 1 + complete_cycles * len(registry)

    consumed = 0
    while consumed + cycle <= remaining_time:
        consumed += cycle
        index += 1

    if remaining_time > 0 and consumed + timing.green_duration <= remaining_time:
        index += 1

    return registry.at(index)


def compute_forecast(
    current_direction: int,
    seconds_left_in_green: int,
    registry: DirectionRegistry,
    timing: SignalTiming,
    offsets: list[int] | None = None
) -> list[Prediction]:
    """
    Predict the Green direction at every checkpoint.

    Pure: reads nothing but its arguments, so repeated calls with the
    same inputs return equal lists.
    """
    if offsets is None:
        offsets = checkpoint_offsets()

    predictions = []
    for offset in offsets:
        direction_id = predict_green_direction(
            offset_seconds=offset,
            current_direction=current_direction,
            seconds_left_in_green=seconds_left_in_green,
            registry=registry,
            timing=timing
        )
        predictions.append(
            Prediction(
                offset_minutes=offset // 60,
                direction_id=direction_id,
                direction_name=registry.name_of(direction_id)
            )
        )
    return predictions

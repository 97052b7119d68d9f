"""
Default intersection table: the junction in front of the university
gate, with four approaches and a three-direction rotation.

Direction 0 (into campus) has a light but is not part of the rotation,
so it stays Red.
"""

from .models import Direction, IntersectionConfig, SignalLight, SignalTiming


GREEN_DURATION = 30
YELLOW_DURATION = 5
CYCLE_DURATION = GREEN_DURATION + YELLOW_DURATION

DIRECTIONS = [
    Direction(id=0, name="Into campus"),
    Direction(id=1, name="To Mae Sai"),
    Direction(id=2, name="To Chiang Rai"),
    Direction(id=3, name="Out of campus"),
]

ROTATION = [1, 2, 3]

LIGHTS = [
    SignalLight(id=1, direction_id=0, name="University gate (entrance)"),
    SignalLight(id=2, direction_id=1, name="University gate (to Mae Sai)"),
    SignalLight(id=3, direction_id=2, name="University gate (to Chiang Rai)"),
    SignalLight(id=4, direction_id=3, name="University gate (exit)"),
]


def default_config(
    green_duration: int = GREEN_DURATION,
    yellow_duration: int = YELLOW_DURATION
) -> IntersectionConfig:
    """Build the default intersection with optional timing overrides."""
    return IntersectionConfig(
        name="University gate junction",
        timing=SignalTiming(
            green_duration=green_duration,
            yellow_duration=yellow_duration
        ),
        directions=[d.model_copy() for d in DIRECTIONS],
        rotation=list(ROTATION),
        lights=[l.model_copy() for l in LIGHTS],
        initial_direction=ROTATION[0],
    )

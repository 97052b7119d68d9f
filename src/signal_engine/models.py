"""
Pydantic models for the rotating intersection signal engine.

Lights are mutable records owned by the scheduler. Everything handed to
callers is a copy.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, computed_field


class Phase(str, Enum):
    """Signal phase displayed by a single light."""
    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"


class Direction(BaseModel):
    """A traffic movement sharing the intersection."""

    id: int = Field(..., ge=0, description="Direction identifier")
    name: str = Field(..., min_length=1, description="Human-readable name")


class SignalLight(BaseModel):
    """One physical light, mapped to exactly one direction."""

    id: int = Field(..., ge=0, description="Light identifier")
    direction_id: int = Field(..., ge=0, description="Direction served by this light")
    name: str = Field(default="", description="Display name of the light")
    phase: Phase = Field(default=Phase.RED, description="Current phase")
    seconds_remaining: int = Field(
        default=0,
        ge=0,
        description="Seconds remaining in the current phase"
    )

    def is_active(self) -> bool:
        return self.phase != Phase.RED


class SignalTiming(BaseModel):
    """Fixed phase durations shared by every direction."""

    green_duration: int = Field(
        default=30,
        gt=0,
        le=600,
        description="Green phase duration in seconds"
    )
    yellow_duration: int = Field(
        default=5,
        gt=0,
        le=60,
        description="Yellow clearance duration in seconds"
    )

    @computed_field
    @property
    def cycle_duration(self) -> int:
        """One Green + Yellow interval for a single direction."""
        return self.green_duration + self.yellow_duration


class IntersectionConfig(BaseModel):
    """Static intersection table supplied at startup."""

    name: str = Field(default="intersection", description="Intersection name")
    timing: SignalTiming = Field(
        default_factory=SignalTiming,
        description="Phase durations"
    )
    directions: list[Direction] = Field(
        ...,
        description="All directions at the intersection"
    )
    rotation: list[int] = Field(
        ...,
        description="Ordered direction ids receiving Green in turn"
    )
    lights: list[SignalLight] = Field(
        ...,
        description="Physical lights, one per direction"
    )
    initial_direction: Optional[int] = Field(
        default=None,
        description="Direction that starts Green (defaults to first in rotation)"
    )


class Prediction(BaseModel):
    """Predicted Green direction at a future checkpoint."""

    offset_minutes: int = Field(description="Minutes from now")
    direction_id: int = Field(description="Predicted Green direction")
    direction_name: str = Field(description="Name of the predicted direction")

    @computed_field
    @property
    def label(self) -> str:
        return f"{self.offset_minutes} min"


class NextGreen(BaseModel):
    """The direction promoted after the active one, and when."""

    direction_id: int
    direction_name: str
    light_id: int
    seconds_until_green: int = Field(ge=0)


class SchedulerSnapshot(BaseModel):
    """Consistent read model taken between ticks."""

    tick_count: int = Field(ge=0, description="Ticks applied since startup")
    active_direction: int = Field(description="Direction currently Green or Yellow")
    active_phase: Phase = Field(description="Phase of the active light")
    red_countdown: int = Field(ge=0, description="Shared countdown shown on Red lights")
    lights: list[SignalLight]
    next_green: NextGreen
    forecast: list[Prediction]

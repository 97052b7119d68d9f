"""
Rotating Intersection Signal Engine

Deterministic in-memory phase scheduling, shared Red countdown and
Green-direction forecasting for a single intersection.
"""

__version__ = "0.1.0"
__engine_version__ = "SIG-ROTATION-0.1.0"

from .errors import ConfigurationError, InvariantViolation, SignalEngineError
from .models import (
    Direction,
    IntersectionConfig,
    NextGreen,
    Phase,
    Prediction,
    SchedulerSnapshot,
    SignalLight,
    SignalTiming,
)
from .registry import DirectionRegistry
from .countdown import CountdownSynchronizer
from .forecast import checkpoint_offsets, compute_forecast, predict_green_direction
from .scheduler import PhaseCycleScheduler
from .validation import load_config, validate_config
from .defaults import default_config
from .clock import (
    advance,
    create_tick_source,
    start_tick_source,
    stop_tick_source,
    tick_source_state,
)

__all__ = [
    "__version__",
    "__engine_version__",
    "ConfigurationError",
    "InvariantViolation",
    "SignalEngineError",
    "Direction",
    "IntersectionConfig",
    "NextGreen",
    "Phase",
    "Prediction",
    "SchedulerSnapshot",
    "SignalLight",
    "SignalTiming",
    "DirectionRegistry",
    "CountdownSynchronizer",
    "checkpoint_offsets",
    "compute_forecast",
    "predict_green_direction",
    "PhaseCycleScheduler",
    "load_config",
    "validate_config",
    "default_config",
    "advance",
    "create_tick_source",
    "start_tick_source",
    "stop_tick_source",
    "tick_source_state",
]

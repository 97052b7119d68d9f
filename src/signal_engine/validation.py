"""
Validation logic for intersection configurations.

Each check returns a list of problems (empty when valid) so that every
defect in a configuration is reported at once.
"""

from collections import Counter
from typing import Any

from pydantic import ValidationError

from .errors import ConfigurationError
from .models import IntersectionConfig


def validate_rotation(config: IntersectionConfig) -> list[str]:
    """
    Validate the rotation sequence.

    The rotation must be non-empty, must not repeat a direction, and may
    only reference declared directions.
    """
    problems = []
    if not config.rotation:
        return ["rotation is empty"]

    known = {d.id for d in config.directions}
    for direction_id, count in Counter(config.rotation).items():
        if count > 1:
            problems.append(f"rotation repeats direction {direction_id}")
        if direction_id not in known:
            problems.append(f"rotation references unknown direction {direction_id}")
    return problems


def validate_directions(config: IntersectionConfig) -> list[str]:
    """Direction ids must be unique."""
    return [
        f"duplicate direction id {direction_id}"
        for direction_id, count in Counter(d.id for d in config.directions).items()
        if count > 1
    ]


def validate_lights(config: IntersectionConfig) -> list[str]:
    """
    Validate the light table against directions and rotation.

    Every rotation direction needs exactly one light; light ids must be
    unique; each light must serve a declared direction.
    """
    problems = []
    known = {d.id for d in config.directions}

    for light_id, count in Counter(light.id for light in config.lights).items():
        if count > 1:
            problems.append(f"duplicate light id {light_id}")

    per_direction = Counter(light.direction_id for light in config.lights)
    for light in config.lights:
        if light.direction_id not in known:
            problems.append(
                f"light {light.id} references unknown direction {light.direction_id}"
            )
    for direction_id, count in per_direction.items():
        if count > 1:
            problems.append(f"direction {direction_id} has {count} lights")

    for direction_id in config.rotation:
        if per_direction[direction_id] == 0:
            problems.append(f"rotation direction {direction_id} has no light")
    return problems


def validate_initial_direction(config: IntersectionConfig) -> list[str]:
    if config.initial_direction is None or config.initial_direction in config.rotation:
        return []
    return [f"initial direction {config.initial_direction} is not in rotation"]


def validate_config(config: IntersectionConfig) -> None:
    """
    Run every configuration check.

    Raises:
        ConfigurationError: listing all problems found
    """
    problems = (
        validate_rotation(config)
        + validate_directions(config)
        + validate_lights(config)
        + validate_initial_direction(config)
    )
    if problems:
        raise ConfigurationError(problems)


def load_config(data: dict[str, Any]) -> IntersectionConfig:
    """
    Parse and validate a raw intersection table.

    Args:
        data: Mapping in the shape of IntersectionConfig

    Returns:
        Validated IntersectionConfig

    Raises:
        ConfigurationError: if the table is malformed or inconsistent
    """
    try:
        config = IntersectionConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        ) from e
    validate_config(config)
    return config

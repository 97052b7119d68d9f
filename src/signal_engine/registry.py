"""Ordered, cyclic registry of the directions receiving Green."""

from collections import Counter

from .errors import ConfigurationError
from .models import Direction, IntersectionConfig


class DirectionRegistry:
    """
    Fixed rotation of directions.

    The rotation is immutable configuration; it is never changed while the
    simulation runs.
    """

    def __init__(self, directions: list[Direction], rotation: list[int]):
        if not rotation:
            raise ConfigurationError("rotation is empty")
        self._directions = {d.id: d for d in directions}
        self._rotation = tuple(rotation)
        problems = [
            f"rotation references unknown direction {d}"
            for d in self._rotation if d not in self._directions
        ]
        problems += [
            f"rotation repeats direction {d}"
            for d, count in Counter(self._rotation).items() if count > 1
        ]
        if problems:
            raise ConfigurationError(problems)

    @classmethod
    def from_config(cls, config: IntersectionConfig) -> "DirectionRegistry":
        return cls(config.directions, config.rotation)

    @property
    def rotation(self) -> tuple[int, ...]:
        return self._rotation

    def __len__(self) -> int:
        return len(self._rotation)

    def __contains__(self, direction_id: int) -> bool:
        return direction_id in self._rotation

    def first(self) -> int:
        return self._rotation[0]

    def index_of(self, direction_id: int) -> int:
        """Position of a direction in the rotation."""
        try:
            return self._rotation.index(direction_id)
        except ValueError:
            raise ConfigurationError(
                f"direction {direction_id} is not in rotation"
            ) from None

    def at(self, index: int) -> int:
        """Direction at a rotation index, wrapping around."""
        return self._rotation[index % len(self._rotation)]

    def next_after(self, direction_id: int) -> int:
        """Direction following `direction_id`, wrapping to the start."""
        return self.at(self.index_of(direction_id) + 1)

    def name_of(self, direction_id: int) -> str:
        direction = self._directions.get(direction_id)
        return direction.name if direction is not None else f"direction {direction_id}"

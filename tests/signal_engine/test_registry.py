"""Tests for the direction rotation registry."""

import pytest
from src.signal_engine import ConfigurationError, Direction, DirectionRegistry, default_config


@pytest.fixture
def registry():
    return DirectionRegistry.from_config(default_config())


class TestRotation:
    """Ordering and wrap-around."""

    def test_first_direction(self, registry):
        assert registry.first() == 1

    def test_rotation_order(self, registry):
        assert registry.rotation == (1, 2, 3)
        assert len(registry) == 3

    def test_next_after(self, registry):
        assert registry.next_after(1) == 2
        assert registry.next_after(2) == 3

    def test_next_after_wraps(self, registry):
        """Last direction is followed by the first."""
        assert registry.next_after(3) == 1

    def test_at_wraps_any_index(self, registry):
        assert registry.at(3) == 1
        assert registry.at(7) == 2

    def test_direction_outside_rotation(self, registry):
        """Direction 0 has a light but never receives Green."""
        assert 0 not in registry
        with pytest.raises(ConfigurationError):
            registry.index_of(0)

    def test_name_of(self, registry):
        assert registry.name_of(1) == "To Mae Sai"
        assert registry.name_of(0) == "Into campus"

    def test_name_of_unknown_direction(self, registry):
        assert registry.name_of(42) == "direction 42"


class TestRegistryErrors:
    """Invalid rotations are rejected at construction."""

    def test_empty_rotation(self):
        with pytest.raises(ConfigurationError, match="rotation is empty"):
            DirectionRegistry([Direction(id=1, name="A")], [])

    def test_unknown_direction_in_rotation(self):
        with pytest.raises(ConfigurationError) as exc_info:
            DirectionRegistry([Direction(id=1, name="A")], [1, 9])
        assert exc_info.value.problems == ["rotation references unknown direction 9"]

    def test_repeated_direction_in_rotation(self):
        """A direction may appear only once, or rotation would skip a slot."""
        directions = [Direction(id=1, name="A"), Direction(id=2, name="B")]
        with pytest.raises(ConfigurationError) as exc_info:
            DirectionRegistry(directions, [1, 2, 1])
        assert exc_info.value.problems == ["rotation repeats direction 1"]

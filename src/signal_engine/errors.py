"""
Error taxonomy for the signal engine.

Configuration problems are fatal at startup. Invariant violations are
programming defects and surface as assertions.
"""


class SignalEngineError(Exception):
    """Base exception for all signal engine errors."""


class ConfigurationError(SignalEngineError):
    """Raised when the intersection configuration is invalid."""

    def __init__(self, problems: list[str] | str):
        if isinstance(problems, str):
            problems = [problems]
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


class InvariantViolation(SignalEngineError, AssertionError):
    """Raised when scheduler state breaks a cycle invariant."""

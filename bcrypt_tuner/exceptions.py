"""
Tuner Exceptions
================
Exception classes for hashing and cost tuning.
"""

from typing import Optional


class BcryptTunerError(Exception):
    """Base exception for all bcrypt-tuner errors."""
    pass


class HashingError(BcryptTunerError):
    """Raised when the bcrypt primitive fails."""
    pass


class InvalidCostError(HashingError):
    """Raised when a cost falls outside bcrypt's valid range."""

    def __init__(self, cost: int, min_cost: int, max_cost: int):
        self.cost = cost
        self.min_cost = min_cost
        self.max_cost = max_cost
        super().__init__(f"Cost {cost} outside allowed range [{min_cost}, {max_cost}]")


class MalformedHashError(HashingError):
    """Raised when a string cannot be parsed as a bcrypt hash."""
    pass


class HashMismatchError(HashingError):
    """Raised when a password does not match a hash."""
    pass


class TuningError(BcryptTunerError):
    """Raised when a tuning run fails to complete."""
    pass


class TuningInfeasibleError(TuningError):
    """Raised when a latency budget cannot be met within the valid cost range."""

    def __init__(self, tier: str, max_time: float, message: Optional[str] = None):
        self.tier = tier
        self.max_time = max_time
        super().__init__(
            message
            or f"No valid cost satisfies the {tier} budget of {max_time * 1000:.0f}ms"
        )


class CostBelowThresholdError(BcryptTunerError):
    """Raised when a hash cost is lower than the configured tier cost."""

    def __init__(self, cost: int, required: int):
        self.cost = cost
        self.required = required
        super().__init__(
            f"Hash cost {cost} lower than currently configured cost {required}"
        )

"""
bcrypt-tuner
============
bcrypt hashing with costs calibrated to the host machine.

Two tiers are tuned from latency budgets: "quick" for frequent checks,
"strong" for resistance to brute force.
"""

__version__ = "0.1.0"

from bcrypt_tuner.config import (
    BcrypterOptions,
    DEFAULT_QUICK_MAX_TIME,
    DEFAULT_STRONG_MAX_TIME,
    DEFAULT_CONCURRENCY,
)

from bcrypt_tuner.exceptions import (
    BcryptTunerError,
    HashingError,
    InvalidCostError,
    MalformedHashError,
    HashMismatchError,
    TuningError,
    TuningInfeasibleError,
    CostBelowThresholdError,
)

from bcrypt_tuner.primitive import BcryptPrimitive, MIN_COST, MAX_COST

from bcrypt_tuner.gate import ConcurrencyGate

from bcrypt_tuner.tuning import CostEstimator, TunedCosts, TunedState, TuningState

from bcrypt_tuner.bcrypter import Bcrypter

from bcrypt_tuner.async_ops import AsyncBcrypter

from bcrypt_tuner.log_config import configure_logging

__all__ = [
    # Config
    "BcrypterOptions",
    "DEFAULT_QUICK_MAX_TIME",
    "DEFAULT_STRONG_MAX_TIME",
    "DEFAULT_CONCURRENCY",
    # Exceptions
    "BcryptTunerError",
    "HashingError",
    "InvalidCostError",
    "MalformedHashError",
    "HashMismatchError",
    "TuningError",
    "TuningInfeasibleError",
    "CostBelowThresholdError",
    # Primitive
    "BcryptPrimitive",
    "MIN_COST",
    "MAX_COST",
    # Gate
    "ConcurrencyGate",
    # Tuning
    "CostEstimator",
    "TunedCosts",
    "TunedState",
    "TuningState",
    # Facade
    "Bcrypter",
    "AsyncBcrypter",
    # Logging
    "configure_logging",
]

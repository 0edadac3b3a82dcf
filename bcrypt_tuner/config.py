"""
Bcrypter Configuration
======================
Latency budgets and concurrency limit, with environment overrides.
"""

import os
from dataclasses import dataclass

DEFAULT_QUICK_MAX_TIME = 0.5   # seconds
DEFAULT_STRONG_MAX_TIME = 2.0  # seconds
DEFAULT_CONCURRENCY = 2


@dataclass(frozen=True)
class BcrypterOptions:
    """Configuration for a Bcrypter."""
    quick_max_time: float = DEFAULT_QUICK_MAX_TIME    # Max seconds for a quick hash
    strong_max_time: float = DEFAULT_STRONG_MAX_TIME  # Max seconds for a strong hash
    concurrency: int = DEFAULT_CONCURRENCY            # Max simultaneous hash generations

    def __post_init__(self):
        if self.quick_max_time <= 0:
            raise ValueError("quick_max_time must be positive")
        if self.strong_max_time <= 0:
            raise ValueError("strong_max_time must be positive")
        if self.concurrency < 1:
            raise ValueError("concurrency must be at least 1")

    @classmethod
    def from_env(cls) -> "BcrypterOptions":
        """
        Build options from environment variables.

        BCRYPT_TUNER_QUICK_MAX_MS, BCRYPT_TUNER_STRONG_MAX_MS and
        BCRYPT_TUNER_CONCURRENCY each fall back to the defaults when unset.
        """
        quick_ms = os.getenv("BCRYPT_TUNER_QUICK_MAX_MS")
        strong_ms = os.getenv("BCRYPT_TUNER_STRONG_MAX_MS")
        concurrency = os.getenv("BCRYPT_TUNER_CONCURRENCY")

        return cls(
            quick_max_time=int(quick_ms) / 1000 if quick_ms else DEFAULT_QUICK_MAX_TIME,
            strong_max_time=int(strong_ms) / 1000 if strong_ms else DEFAULT_STRONG_MAX_TIME,
            concurrency=int(concurrency) if concurrency else DEFAULT_CONCURRENCY,
        )

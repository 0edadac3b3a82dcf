"""
Tuning Models
=============
Data models and enums for cost tuning.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

NS_PER_MS = 1_000_000
NS_PER_SECOND = 1_000_000_000


class TuningState(str, Enum):
    """Tuned-state lifecycle."""
    UNSET = "unset"    # No tuning run has completed
    TUNING = "tuning"  # A tuning run is in flight
    READY = "ready"    # Costs available


@dataclass(frozen=True)
class TunedCosts:
    """A quick/strong cost pair, replaced as a whole."""
    quick: int = 0
    strong: int = 0


UNSET_COSTS = TunedCosts()


@dataclass
class LatencyTable:
    """Hash latencies in nanoseconds, indexed by cost."""
    latencies: List[int]
    measured_up_to: int = 0  # Highest cost timed directly

    def select_cost(self, max_latency_ns: int) -> Optional[int]:
        """
        Return the first cost whose successor exceeds ``max_latency_ns``.

        None when even the highest cost stays within the budget.
        """
        for cost in range(len(self.latencies) - 1):
            if self.latencies[cost + 1] > max_latency_ns:
                return cost
        return None

    def reported_ms(self, cost: int) -> int:
        """Latency at ``cost`` rounded to the nearest 100ms, for reporting."""
        return round(self.latencies[cost] / (100 * NS_PER_MS)) * 100

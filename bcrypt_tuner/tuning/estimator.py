"""
Cost Estimator
==============
Derives quick and strong bcrypt costs from latency budgets.

Latencies for low costs are measured by hashing a fixed test password.
Once a measured latency reaches the interpolation threshold, each further
cost is estimated as twice the previous latency, floored to 10ms. Every
bcrypt cost step doubles the work, so this keeps tuning to a fraction of
a second even on fast hosts.
"""

import time
from typing import Callable, Optional

import structlog

from ..exceptions import HashingError, TuningError, TuningInfeasibleError
from ..primitive import BcryptPrimitive
from .models import NS_PER_MS, NS_PER_SECOND, LatencyTable, TunedCosts

logger = structlog.get_logger(__name__)

INTERP_THRESHOLD_NS = 50 * NS_PER_MS
QUANTUM_NS = 10 * NS_PER_MS
TEST_PASSWORD = b"#!PnutBudr"


def to_ns(seconds: float) -> int:
    return int(round(seconds * NS_PER_SECOND))


class CostEstimator:
    """
    Builds a latency table and selects costs against budgets.

    Example:
        estimator = CostEstimator()
        costs = estimator.estimate(quick_max_time=0.5, strong_max_time=2.0)
    """

    def __init__(
        self,
        primitive: Optional[BcryptPrimitive] = None,
        clock: Callable[[], int] = time.perf_counter_ns,
    ):
        self.primitive = primitive or BcryptPrimitive()
        self.clock = clock

    def _measure(self, cost: int) -> int:
        start = self.clock()
        try:
            self.primitive.generate(TEST_PASSWORD, cost)
        except HashingError as e:
            logger.error("tuning_failed", cost=cost, error=str(e))
            raise TuningError(f"Failed to measure cost {cost}: {e}") from e
        elapsed = self.clock() - start

        logger.debug("tuning_measured", cost=cost, elapsed_ms=elapsed / NS_PER_MS)
        return elapsed

    def build_latency_table(self) -> LatencyTable:
        """
        Measure or extrapolate the latency of every cost up to max_cost.

        Raises:
            TuningError: a direct measurement failed
        """
        min_cost = self.primitive.min_cost
        max_cost = self.primitive.max_cost

        latencies = [0]
        measured_up_to = 0

        for cost in range(1, max_cost + 1):
            if cost < min_cost:
                latencies.append(0)
                continue

            previous = latencies[cost - 1]
            if previous < INTERP_THRESHOLD_NS:
                latencies.append(self._measure(cost))
                measured_up_to = cost
                continue

            doubled = previous * 2
            latencies.append(doubled - doubled % QUANTUM_NS)

        return LatencyTable(latencies=latencies, measured_up_to=measured_up_to)

    def select_cost(self, table: LatencyTable, tier: str, max_time: float) -> int:
        """
        Pick the cost for one tier.

        Raises:
            TuningInfeasibleError: the budget exceeds the max_cost latency,
                or is below the min_cost latency
        """
        cost = table.select_cost(to_ns(max_time))

        if cost is None:
            logger.warning("tuning_infeasible", tier=tier, max_time=max_time, reason="above_max_cost")
            raise TuningInfeasibleError(
                tier,
                max_time,
                f"{tier} budget of {max_time * 1000:.0f}ms exceeds the latency "
                f"of the maximum cost {self.primitive.max_cost}",
            )

        if cost < self.primitive.min_cost:
            logger.warning("tuning_infeasible", tier=tier, max_time=max_time, reason="below_min_cost")
            raise TuningInfeasibleError(
                tier,
                max_time,
                f"{tier} budget of {max_time * 1000:.0f}ms is below the latency "
                f"of the minimum cost {self.primitive.min_cost}",
            )

        return cost

    def estimate(self, quick_max_time: float, strong_max_time: float) -> TunedCosts:
        """
        Run a full tuning pass.

        Args:
            quick_max_time: Max seconds a quick hash may take
            strong_max_time: Max seconds a strong hash may take

        Returns:
            TunedCosts for both tiers

        Raises:
            TuningError: a measurement failed
            TuningInfeasibleError: a budget cannot be met
        """
        started = time.monotonic()
        logger.info("tuning_started", quick_max_time=quick_max_time, strong_max_time=strong_max_time)

        table = self.build_latency_table()
        costs = TunedCosts(
            quick=self.select_cost(table, "quick", quick_max_time),
            strong=self.select_cost(table, "strong", strong_max_time),
        )

        logger.info(
            "tuning_completed",
            quick_cost=costs.quick,
            strong_cost=costs.strong,
            quick_latency_ms=table.reported_ms(costs.quick),
            strong_latency_ms=table.reported_ms(costs.strong),
            measured_up_to=table.measured_up_to,
            elapsed_ms=round((time.monotonic() - started) * 1000),
        )
        return costs

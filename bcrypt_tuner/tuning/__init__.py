"""
bcrypt-tuner - Cost Tuning
==========================
Host-calibrated bcrypt cost selection.

Usage:
    from bcrypt_tuner.tuning import CostEstimator, TunedState

    state = TunedState()
    estimator = CostEstimator()
    costs = state.current(lambda: estimator.estimate(0.5, 2.0))
"""

from .models import (
    TuningState,
    TunedCosts,
    LatencyTable,
    UNSET_COSTS,
)

from .estimator import CostEstimator, INTERP_THRESHOLD_NS, TEST_PASSWORD

from .state import TunedState

__all__ = [
    # Models
    "TuningState",
    "TunedCosts",
    "LatencyTable",
    "UNSET_COSTS",
    # Estimator
    "CostEstimator",
    "INTERP_THRESHOLD_NS",
    "TEST_PASSWORD",
    # State
    "TunedState",
]

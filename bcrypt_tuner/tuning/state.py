"""
Tuned State
===========
Holds the current cost pair and serializes tuning runs.
"""

import threading
from typing import Callable, Optional

import structlog

from .models import UNSET_COSTS, TunedCosts, TuningState

logger = structlog.get_logger(__name__)

EstimateFn = Callable[[], TunedCosts]


class TunedState:
    """
    Current quick/strong costs with lazy, single-flight tuning.

    Readers arriving while a run is in flight wait for it. A reader that
    finds no costs becomes the tuner; concurrent readers wait for its
    result instead of starting their own run.
    """

    def __init__(self):
        self._cond = threading.Condition()
        self._state = TuningState.UNSET
        self._costs = UNSET_COSTS

    @property
    def state(self) -> TuningState:
        with self._cond:
            return self._state

    def snapshot(self) -> TunedCosts:
        """Current pair without triggering a tuning run."""
        with self._cond:
            return self._costs

    def _not_tuning(self) -> bool:
        return self._state != TuningState.TUNING

    def _run(self, estimate: EstimateFn, previous: TuningState) -> TunedCosts:
        # Runs outside the lock; the state is TUNING so nobody else writes.
        costs: Optional[TunedCosts] = None
        try:
            costs = estimate()
        finally:
            with self._cond:
                if costs is None:
                    self._state = previous
                else:
                    self._costs = costs
                    self._state = TuningState.READY
                self._cond.notify_all()
        return costs

    def tune(self, estimate: EstimateFn) -> TunedCosts:
        """
        Run ``estimate`` and store its result.

        Waits for any in-flight run first. On failure the previous costs
        are kept and the exception propagates.
        """
        with self._cond:
            self._cond.wait_for(self._not_tuning)
            previous = self._state
            self._state = TuningState.TUNING
        return self._run(estimate, previous)

    def current(self, estimate: EstimateFn) -> TunedCosts:
        """Return the current pair, tuning first if none is set."""
        with self._cond:
            self._cond.wait_for(self._not_tuning)
            if self._state == TuningState.READY:
                return self._costs
            previous = self._state
            self._state = TuningState.TUNING

        logger.debug("tuning_lazy_trigger")
        return self._run(estimate, previous)

"""
Bcrypter
========
Quick and strong tier password hashing with host-calibrated bcrypt costs.

Usage:
    from bcrypt_tuner import Bcrypter, BcrypterOptions

    bcx = Bcrypter(BcrypterOptions(quick_max_time=0.4, strong_max_time=1.6))
    bcx.tune()

    hash = bcx.generate_quick("12345")
    bcx.compare(hash, "12345")
"""

from typing import Optional, Union

import structlog

from .config import BcrypterOptions
from .exceptions import CostBelowThresholdError, HashMismatchError, MalformedHashError
from .gate import ConcurrencyGate
from .primitive import BcryptPrimitive, to_bytes
from .tuning import CostEstimator, TunedCosts, TunedState, TuningState

logger = structlog.get_logger(__name__)

Password = Union[str, bytes]

QUICK = "quick"
STRONG = "strong"


class Bcrypter:
    """
    Generates and checks bcrypt hashes at tuned quick/strong costs.

    Costs are tuned on the first call that needs them, or explicitly via
    tune(). Instances share no state.
    """

    def __init__(
        self,
        options: Optional[BcrypterOptions] = None,
        primitive: Optional[BcryptPrimitive] = None,
    ):
        self.options = options or BcrypterOptions()
        self.primitive = primitive or BcryptPrimitive()
        self.estimator = CostEstimator(self.primitive)
        self._state = TunedState()
        self._gate = ConcurrencyGate(self.options.concurrency)

    @property
    def tuning_state(self) -> TuningState:
        return self._state.state

    def _estimate(self) -> TunedCosts:
        return self.estimator.estimate(
            self.options.quick_max_time,
            self.options.strong_max_time,
        )

    def tune(self) -> TunedCosts:
        """
        Measure this host and store new quick/strong costs.

        Raises:
            TuningInfeasibleError: a budget cannot be met within bcrypt's cost range
            TuningError: a test hash failed
        """
        return self._state.tune(self._estimate)

    def current_quick_cost(self) -> int:
        return self._state.current(self._estimate).quick

    def current_strong_cost(self) -> int:
        return self._state.current(self._estimate).strong

    def _cost_for(self, tier: str) -> int:
        if tier == QUICK:
            return self.current_quick_cost()
        if tier == STRONG:
            return self.current_strong_cost()
        raise ValueError(f"Unknown tier: {tier}")

    def _generate(self, password: Password, tier: str) -> str:
        secret = to_bytes(password)
        with self._gate.slot():
            cost = self._cost_for(tier)
            hashed = self.primitive.generate(secret, cost)
        logger.debug("hash_generated", tier=tier, cost=cost)
        return hashed

    def generate_quick(self, password: Password) -> str:
        """Hash ``password`` at the quick cost."""
        return self._generate(password, QUICK)

    def generate_strong(self, password: Password) -> str:
        """Hash ``password`` at the strong cost."""
        return self._generate(password, STRONG)

    def compare(self, hash: str, password: Password) -> None:
        """
        Check ``password`` against ``hash``.

        Raises:
            HashMismatchError: password does not match
            MalformedHashError: hash is not a bcrypt hash
        """
        self.primitive.compare(hash, to_bytes(password))

    def verify(self, hash: str, password: Password) -> bool:
        """True if ``password`` matches ``hash``. Malformed hashes still raise."""
        try:
            self.compare(hash, password)
        except HashMismatchError:
            return False
        return True

    def validate_hash(self, hash: str) -> int:
        """Return the cost encoded in ``hash``, whatever it is."""
        return self.primitive.extract_cost(hash)

    def _check_cost(self, hash: str, tier: str) -> None:
        cost = self.primitive.extract_cost(hash)
        required = self._cost_for(tier)
        if cost < required:
            raise CostBelowThresholdError(cost, required)

    def check_cost_quick(self, hash: str) -> None:
        """
        Raises:
            CostBelowThresholdError: hash cost is below the quick cost
            MalformedHashError: hash is not a bcrypt hash
        """
        self._check_cost(hash, QUICK)

    def check_cost_strong(self, hash: str) -> None:
        """
        Raises:
            CostBelowThresholdError: hash cost is below the strong cost
            MalformedHashError: hash is not a bcrypt hash
        """
        self._check_cost(hash, STRONG)

    def _is_cost(self, hash: str, tier: str) -> bool:
        try:
            self._check_cost(hash, tier)
        except (CostBelowThresholdError, MalformedHashError):
            return False
        return True

    def is_cost_quick(self, hash: str) -> bool:
        return self._is_cost(hash, QUICK)

    def is_cost_strong(self, hash: str) -> bool:
        return self._is_cost(hash, STRONG)

    def needs_rehash(self, hash: str, tier: str = QUICK) -> bool:
        """
        Check if a stored hash should be recomputed.

        Returns True if the hash is malformed or its cost is below the
        given tier's current cost.
        """
        if tier not in (QUICK, STRONG):
            raise ValueError(f"Unknown tier: {tier}")
        return not self._is_cost(hash, tier)

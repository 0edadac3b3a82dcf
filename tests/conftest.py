"""
Shared fixtures: a fake clock and a bcrypt stand-in with doubling latency.
"""

import threading
import time

import pytest

from bcrypt_tuner.exceptions import HashingError
from bcrypt_tuner.primitive import BcryptPrimitive
from bcrypt_tuner.tuning.models import NS_PER_MS


class FakeClock:
    """Nanosecond clock advanced by FakePrimitive."""

    def __init__(self):
        self.now = 0

    def __call__(self) -> int:
        return self.now


class FakePrimitive(BcryptPrimitive):
    """Each cost step doubles the simulated latency, starting at base_ms for min_cost."""

    def __init__(self, clock=None, base_ms=1.0, fail_at=None, delay=0.0):
        self.clock = clock or FakeClock()
        self.base_ns = int(base_ms * NS_PER_MS)
        self.fail_at = fail_at
        self.delay = delay
        self.calls = []
        self.spans = []
        self._lock = threading.Lock()

    def generate(self, secret: bytes, cost: int) -> str:
        if cost == self.fail_at:
            raise HashingError("simulated failure")

        started = time.monotonic()
        if self.delay:
            time.sleep(self.delay)
        finished = time.monotonic()

        with self._lock:
            self.calls.append(cost)
            self.spans.append((started, finished))
            self.clock.now += self.base_ns * 2 ** (cost - self.min_cost)
        return f"fake${cost:02d}"


@pytest.fixture()
def fake_clock():
    return FakeClock()


@pytest.fixture()
def fake_primitive(fake_clock):
    return FakePrimitive(clock=fake_clock)

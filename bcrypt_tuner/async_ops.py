"""
Async Bcrypter
==============
Async-safe wrapper running blocking bcrypt work in the default executor.
"""

import asyncio
from functools import partial
from typing import Callable, Optional, TypeVar

from .bcrypter import QUICK, Bcrypter, Password
from .config import BcrypterOptions
from .tuning import TunedCosts

T = TypeVar("T")


class AsyncBcrypter:
    """
    Async facade over a Bcrypter.

    Example:
        bcx = AsyncBcrypter()
        hash = await bcx.generate_quick("my_secure_password")
        if await bcx.verify(hash, "my_secure_password"):
            ...
    """

    def __init__(
        self,
        options: Optional[BcrypterOptions] = None,
        bcrypter: Optional[Bcrypter] = None,
    ):
        self.bcrypter = bcrypter or Bcrypter(options)

    async def _run(self, func: Callable[..., T], *args) -> T:
        loop = asyncio.get_event_loop()

        # Run in executor to avoid blocking the event loop
        return await loop.run_in_executor(None, partial(func, *args))

    async def tune(self) -> TunedCosts:
        return await self._run(self.bcrypter.tune)

    async def current_quick_cost(self) -> int:
        return await self._run(self.bcrypter.current_quick_cost)

    async def current_strong_cost(self) -> int:
        return await self._run(self.bcrypter.current_strong_cost)

    async def generate_quick(self, password: Password) -> str:
        return await self._run(self.bcrypter.generate_quick, password)

    async def generate_strong(self, password: Password) -> str:
        return await self._run(self.bcrypter.generate_strong, password)

    async def compare(self, hash: str, password: Password) -> None:
        await self._run(self.bcrypter.compare, hash, password)

    async def verify(self, hash: str, password: Password) -> bool:
        return await self._run(self.bcrypter.verify, hash, password)

    async def is_cost_quick(self, hash: str) -> bool:
        return await self._run(self.bcrypter.is_cost_quick, hash)

    async def is_cost_strong(self, hash: str) -> bool:
        return await self._run(self.bcrypter.is_cost_strong, hash)

    async def needs_rehash(self, hash: str, tier: str = QUICK) -> bool:
        return await self._run(self.bcrypter.needs_rehash, hash, tier)

    def validate_hash(self, hash: str) -> int:
        """Parse only, no need for the executor."""
        return self.bcrypter.validate_hash(hash)

"""
Bcrypt Primitive
================
Thin wrapper around the ``bcrypt`` package with the error taxonomy used
throughout bcrypt-tuner.
"""

import re
from typing import Union

import bcrypt

from .exceptions import (
    HashingError,
    HashMismatchError,
    InvalidCostError,
    MalformedHashError,
)

MIN_COST = 4
MAX_COST = 31

# $2b$12$ + 22 chars of salt + 31 chars of checksum
_HASH_RE = re.compile(r"\$2[aby]\$([0-9]{2})\$[./A-Za-z0-9]{53}")

# bcrypt >= 5 rejects longer passwords instead of truncating them
_MAX_SECRET_BYTES = 72


def to_bytes(value: Union[str, bytes]) -> bytes:
    """Encode str values as UTF-8, pass bytes through."""
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError("Password must be str or bytes")


class BcryptPrimitive:
    """
    Hash generation, comparison and cost inspection backed by ``bcrypt``.

    Stateless; a single instance can be shared between threads.
    """

    min_cost = MIN_COST
    max_cost = MAX_COST

    def generate(self, secret: bytes, cost: int) -> str:
        """
        Hash ``secret`` with a fresh salt at ``cost``.

        Raises:
            InvalidCostError: cost outside [min_cost, max_cost]
            HashingError: bcrypt rejected the secret
        """
        if not self.min_cost <= cost <= self.max_cost:
            raise InvalidCostError(cost, self.min_cost, self.max_cost)

        try:
            hashed = bcrypt.hashpw(secret, bcrypt.gensalt(rounds=cost))
        except ValueError as e:
            raise HashingError(str(e)) from e
        return hashed.decode("ascii")

    def compare(self, hash: str, secret: bytes) -> None:
        """
        Check ``secret`` against ``hash``.

        Raises:
            MalformedHashError: hash is not a bcrypt hash
            HashMismatchError: secret does not match
        """
        self.extract_cost(hash)

        try:
            matched = bcrypt.checkpw(secret, hash.encode("ascii"))
        except ValueError as e:
            if len(secret) > _MAX_SECRET_BYTES:
                raise HashingError(str(e)) from e
            raise MalformedHashError(str(e)) from e

        if not matched:
            raise HashMismatchError("Hash does not match password")

    def extract_cost(self, hash: str) -> int:
        """Return the cost encoded in ``hash`` or raise MalformedHashError."""
        if not isinstance(hash, str):
            raise MalformedHashError("Hash must be a string")

        match = _HASH_RE.fullmatch(hash)
        if match is None:
            raise MalformedHashError("Not a bcrypt hash")

        cost = int(match.group(1))
        if not self.min_cost <= cost <= self.max_cost:
            raise MalformedHashError(f"Hash cost {cost} outside valid range")
        return cost

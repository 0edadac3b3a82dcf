"""
Bcrypt Primitive Tests
======================
"""

import bcrypt
import pytest

from bcrypt_tuner.exceptions import (
    HashingError,
    HashMismatchError,
    InvalidCostError,
    MalformedHashError,
)
from bcrypt_tuner.primitive import MAX_COST, MIN_COST, BcryptPrimitive, to_bytes

PASSWORD = b"012Abc!@#z"


class TestBcryptPrimitive:
    """Tests for the bcrypt wrapper."""

    def test_bounds(self):
        """Should expose bcrypt's cost range."""
        primitive = BcryptPrimitive()

        assert (primitive.min_cost, primitive.max_cost) == (MIN_COST, MAX_COST) == (4, 31)

    def test_generated_hash_encodes_cost(self):
        """extract_cost should return the cost used to generate."""
        primitive = BcryptPrimitive()

        for cost in (4, 5, 6):
            hash = primitive.generate(PASSWORD, cost)
            assert hash.startswith(f"$2b${cost:02d}$")
            assert primitive.extract_cost(hash) == cost

    def test_compare_match_and_mismatch(self):
        """Should accept the right password and reject another."""
        primitive = BcryptPrimitive()
        hash = primitive.generate(PASSWORD, 4)

        primitive.compare(hash, PASSWORD)
        with pytest.raises(HashMismatchError):
            primitive.compare(hash, b"spaceballs")

    def test_generate_rejects_invalid_cost(self):
        """Should refuse costs outside the valid range."""
        primitive = BcryptPrimitive()

        for cost in (0, 3, 32):
            with pytest.raises(InvalidCostError) as exc_info:
                primitive.generate(PASSWORD, cost)
            assert exc_info.value.cost == cost

    def test_extract_cost_from_other_prefixes(self):
        """Should parse $2a$ hashes as produced by other implementations."""
        primitive = BcryptPrimitive()
        hash = bcrypt.hashpw(PASSWORD, bcrypt.gensalt(rounds=5, prefix=b"2a")).decode()

        assert primitive.extract_cost(hash) == 5

    @pytest.mark.parametrize(
        "value",
        [
            "012Abc!@#z",
            "",
            "$2b$04$tooshort",
            "$argon2id$v=19$m=65536,t=3,p=4$c2FsdA$aGFzaA",
            "$2b$99$" + "a" * 53,
            "$2b$04$" + "a" * 53 + "\n",
            "$2b$٠٤$" + "a" * 53,
            "$2$04$" + "a" * 53,
            None,
        ],
    )
    def test_extract_cost_rejects_malformed(self, value):
        """Should raise MalformedHashError for anything that is not a bcrypt hash."""
        with pytest.raises(MalformedHashError):
            BcryptPrimitive().extract_cost(value)

    def test_compare_rejects_malformed(self):
        """Should report malformed hashes distinctly from mismatches."""
        with pytest.raises(MalformedHashError):
            BcryptPrimitive().compare("not-a-hash", PASSWORD)

    def test_compare_rejects_trailing_newline(self):
        """A valid hash with a trailing newline is malformed, not a mismatch."""
        primitive = BcryptPrimitive()
        hash = primitive.generate(PASSWORD, 4)

        with pytest.raises(MalformedHashError):
            primitive.compare(hash + "\n", PASSWORD)

    def test_compare_rejects_non_ascii_cost(self):
        """Non-ASCII digits in the cost field should not reach bcrypt."""
        primitive = BcryptPrimitive()
        hash = primitive.generate(PASSWORD, 4)

        with pytest.raises(MalformedHashError):
            primitive.compare(hash.replace("$04$", "$٠٤$", 1), PASSWORD)

    def test_malformed_and_mismatch_share_base(self):
        """Primitive failures should all be HashingError."""
        assert issubclass(MalformedHashError, HashingError)
        assert issubclass(HashMismatchError, HashingError)
        assert issubclass(InvalidCostError, HashingError)


class TestToBytes:
    """Tests for password encoding."""

    def test_encodes_str_as_utf8(self):
        assert to_bytes("pässword") == "pässword".encode("utf-8")

    def test_passes_bytes_through(self):
        assert to_bytes(b"raw") == b"raw"

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            to_bytes(12345)

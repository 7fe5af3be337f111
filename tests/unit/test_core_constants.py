"""Tests for typed_password/core/constants.py.

Verifies the bcrypt format facts the rest of the package relies on.
"""

from typed_password.core.constants import (
    BCRYPT_ACCEPTED_VERSIONS,
    BCRYPT_DEFAULT_COST,
    BCRYPT_ENCODED_DIGEST_LENGTH,
    BCRYPT_ENCODED_SALT_LENGTH,
    BCRYPT_HASH_LENGTH,
    BCRYPT_MAX_COST,
    BCRYPT_MAX_PASSWORD_BYTES,
    BCRYPT_MIN_COST,
    BCRYPT_SALT_BYTES,
    BCRYPT_VERSION,
)


class TestSaltConstants:
    def test_salt_bytes_value(self) -> None:
        """BCRYPT_SALT_BYTES should be 16 (128 bits)."""
        assert BCRYPT_SALT_BYTES == 16

    def test_encoded_salt_length_matches_radix64(self) -> None:
        """16 bytes need ceil(128 / 6) = 22 radix-64 characters."""
        assert BCRYPT_ENCODED_SALT_LENGTH == -(-BCRYPT_SALT_BYTES * 8 // 6)


class TestCostConstants:
    def test_cost_range(self) -> None:
        assert (BCRYPT_MIN_COST, BCRYPT_MAX_COST) == (4, 31)

    def test_default_cost_value(self) -> None:
        assert BCRYPT_DEFAULT_COST == 10

    def test_default_cost_in_range(self) -> None:
        assert BCRYPT_MIN_COST <= BCRYPT_DEFAULT_COST <= BCRYPT_MAX_COST


class TestFormatConstants:
    def test_max_password_bytes(self) -> None:
        assert BCRYPT_MAX_PASSWORD_BYTES == 72

    def test_version_is_accepted(self) -> None:
        assert BCRYPT_VERSION == "2b"
        assert BCRYPT_VERSION in BCRYPT_ACCEPTED_VERSIONS

    def test_hash_length_adds_up(self) -> None:
        """$2b$ + CC + $ + salt + digest."""
        prefix = len(f"${BCRYPT_VERSION}$10$")

        assert (
            prefix + BCRYPT_ENCODED_SALT_LENGTH + BCRYPT_ENCODED_DIGEST_LENGTH
            == BCRYPT_HASH_LENGTH
        )

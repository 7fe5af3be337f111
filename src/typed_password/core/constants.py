"""Centralized constants for bcrypt implementation details.

This module contains facts fixed by the bcrypt format itself, NOT
configuration. For tunable settings (default cost, cost policy) use
`typed_password/core/config.py` instead.

Categories:
- Salt: raw salt size and its radix-64 encoded length
- Cost: valid work-factor range and default
- Input limits: bytes of password the key schedule consumes
- Format: version tags and encoded hash layout

Example:
    >>> from typed_password.core.constants import BCRYPT_SALT_BYTES
    >>> salt = secrets.token_bytes(BCRYPT_SALT_BYTES)
"""

# =============================================================================
# Salt
# =============================================================================

BCRYPT_SALT_BYTES: int = 16
"""Raw salt length in bytes (128 bits)."""

BCRYPT_ENCODED_SALT_LENGTH: int = 22
"""Length of the radix-64 encoded salt inside a hash string."""


# =============================================================================
# Cost
# =============================================================================

BCRYPT_MIN_COST: int = 4
"""Smallest cost bcrypt accepts (2^4 key-schedule rounds)."""

BCRYPT_MAX_COST: int = 31
"""Largest cost bcrypt accepts (2^31 key-schedule rounds)."""

BCRYPT_DEFAULT_COST: int = 10
"""Default work factor used by hash_pass."""


# =============================================================================
# Input Limits
# =============================================================================

BCRYPT_MAX_PASSWORD_BYTES: int = 72
"""Bytes of password consumed by the key schedule; the rest is ignored."""


# =============================================================================
# Hash Format
# =============================================================================

BCRYPT_VERSION: str = "2b"
"""Version tag written into every new hash."""

BCRYPT_ACCEPTED_VERSIONS: frozenset[str] = frozenset({"2a", "2b", "2y"})
"""Version tags accepted when inspecting stored hashes."""

BCRYPT_ENCODED_DIGEST_LENGTH: int = 31
"""Length of the radix-64 encoded digest inside a hash string."""

BCRYPT_HASH_LENGTH: int = 60
"""Total length of an encoded hash: $2b$CC$ + salt + digest."""

"""Salt generation.

Draws raw salt bytes from an injected RandomSourceProtocol. Algorithms pick
the size (bcrypt uses 16 bytes).
"""

from typing import Any

from typed_password.domain.protocols import RandomSourceProtocol
from typed_password.domain.value_objects import Salt


def new_salt(n: int, *, random_source: RandomSourceProtocol) -> Salt[Any]:
    """Generate a random salt of ``n`` bytes.

    Args:
        n: Salt size in bytes.
        random_source: Cryptographically secure byte source.

    Returns:
        Salt: Fresh random salt.

    Raises:
        ValueError: If ``n`` is negative or the source returns the wrong size.
        OSError: If the entropy source is unavailable.
    """
    if n < 0:
        msg = f"Salt size must not be negative, got {n}"
        raise ValueError(msg)

    raw = random_source.token_bytes(n)
    if len(raw) != n:
        msg = f"Random source returned {len(raw)} bytes, expected {n}"
        raise ValueError(msg)

    return Salt(raw)

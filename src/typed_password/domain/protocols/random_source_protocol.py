"""Random byte source protocol.

Salts are drawn through this port so tests can inject fixed bytes and
applications can supply their own cryptographic generator.

Implementations:
    - OsRandomSource: operating system CSPRNG (default)

Requirements:
    - MUST be a cryptographically secure generator
    - MUST raise (not fall back to a weaker generator) when the OS source fails
    - MUST be safe to call from several threads at once
"""

from typing import Protocol


class RandomSourceProtocol(Protocol):
    """Cryptographically secure random bytes."""

    def token_bytes(self, n: int) -> bytes:
        """Return ``n`` random bytes.

        Args:
            n: Number of bytes (>= 0).

        Returns:
            bytes: Exactly ``n`` random bytes.

        Raises:
            OSError: If the entropy source is unavailable.
        """
        ...

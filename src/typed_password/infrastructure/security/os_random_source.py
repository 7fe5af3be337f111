"""Operating system random source (adapter).

Implements RandomSourceProtocol on top of ``secrets.token_bytes``, which
reads the OS CSPRNG (getrandom / urandom / BCryptGenRandom). It keeps no
state, so one instance can be shared by every thread.

There is no fallback: if the OS source fails, the OSError propagates.
"""

import secrets

from typed_password.domain.protocols import LoggerProtocol


class OsRandomSource:
    """Cryptographically secure random bytes from the operating system.

    Usage:
        source = OsRandomSource(logger=get_logger())
        raw = source.token_bytes(16)
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize the random source.

        Args:
            logger: Structured logger for entropy failures.
        """
        self._logger = logger

    def token_bytes(self, n: int) -> bytes:
        """Return ``n`` random bytes.

        Args:
            n: Number of bytes.

        Returns:
            bytes: Random bytes from the OS.

        Raises:
            ValueError: If ``n`` is negative.
            OSError: If the OS entropy source is unavailable.
        """
        if n < 0:
            msg = f"Cannot draw a negative number of random bytes ({n})"
            raise ValueError(msg)

        try:
            return secrets.token_bytes(n)
        except OSError as e:
            self._logger.critical(
                "entropy_source_failed",
                error=e,
                requested_bytes=n,
            )
            raise

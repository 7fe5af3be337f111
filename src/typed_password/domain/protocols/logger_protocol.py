"""LoggerProtocol definition for structured logging.

This protocol keeps the hashing code backend-agnostic. Implementations MUST
emit structured logs (message + key-value context).

Security:
    - NEVER log password bytes, salts or hashes
    - Log costs, outcomes and error types only

Usage:
    from typed_password.core.container import get_logger

    logger = get_logger()
    logger.warning("bcrypt_cost_clamped", requested_cost=3, applied_cost=4)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for unrecoverable failures.

        Args:
            message: Event name (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

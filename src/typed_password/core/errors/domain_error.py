"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for errors returned (not raised) by
inspection operations such as reading the parameters out of a stored hash.

Architecture:
- Does NOT inherit from Exception (not raised, returned in Result)
- Uses dataclass inheritance (NOT Protocol/ABC)
- Type-safe with Result[T, DomainError]

Programmer errors (wrong salt length, rejected cost) are NOT DomainErrors;
they raise ValueError.
"""

from dataclasses import dataclass

from typed_password.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"

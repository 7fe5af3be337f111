"""Common error classes shared across layers.

Usage:
    from typed_password.core.errors import ValidationError
    from typed_password.core.enums import ErrorCode
    from typed_password.core.result import Failure

    return Failure(ValidationError(
        code=ErrorCode.PASSWORD_HASH_MALFORMED,
        message="Hash does not match the bcrypt layout",
        field="pass_hash",
    ))
"""

from dataclasses import dataclass

from typed_password.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None

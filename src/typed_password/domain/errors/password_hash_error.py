"""Stored password hash errors.

Message constants used when inspecting an encoded hash fails.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from typed_password.core.enums import ErrorCode
    from typed_password.core.errors import ValidationError
    from typed_password.core.result import Failure
    from typed_password.domain.errors import PasswordHashError

    return Failure(
        ValidationError(
            code=ErrorCode.PASSWORD_HASH_MALFORMED,
            message=PasswordHashError.MALFORMED,
            field="pass_hash",
        )
    )
"""


class PasswordHashError:
    """Password hash error constants.

    These are NOT exceptions - they are error value constants
    used in railway-oriented programming pattern.
    """

    MALFORMED = "Hash is not in the $2b$CC$<salt><digest> layout"
    """Wrong length, wrong separators or characters outside radix-64."""

    UNSUPPORTED_VERSION = "Hash version tag is not a bcrypt tag"
    """Only 2a, 2b and 2y are bcrypt hashes."""

    INVALID_COST = "Hash cost is outside the range 4-31"
    """Cost field parsed but cannot have come from bcrypt."""

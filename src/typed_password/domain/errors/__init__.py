"""Domain error constants.

Usage:
    from typed_password.domain.errors import PasswordHashError
"""

from typed_password.domain.errors.password_hash_error import PasswordHashError

__all__ = ["PasswordHashError"]

"""Outcome of a password verification.

Usage:
    from typed_password.domain.enums import PassCheck

    if check_pass(password, stored_hash) is PassCheck.SUCCESS:
        # Credentials are valid
"""

from enum import Enum


class PassCheck(str, Enum):
    """Two-valued verification result.

    A wrong password and an unreadable hash both give FAIL; callers can not
    tell them apart.
    """

    SUCCESS = "success"
    """Password matches the hash."""

    FAIL = "fail"
    """Password does not match, or the hash could not be used."""

    def __bool__(self) -> bool:
        """Truthy only for SUCCESS (enum members are otherwise always truthy)."""
        return self is PassCheck.SUCCESS

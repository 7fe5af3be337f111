"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from typed_password.core.errors import DomainError, ValidationError
"""

from typed_password.core.errors.common_errors import ValidationError
from typed_password.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
]

"""Security infrastructure adapters.

This package contains:
- Password hashing (bcrypt)
- OS-backed random source and salt generation
- bcrypt hash string codec (radix-64, setting strings, parsing)
"""

from typed_password.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from typed_password.infrastructure.security.os_random_source import OsRandomSource
from typed_password.infrastructure.security.salt_provider import new_salt

__all__ = [
    "BcryptPasswordService",
    "OsRandomSource",
    "new_salt",
]

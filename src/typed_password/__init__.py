"""Type-safe password hashing.

Plaintext passwords (``Pass``) and password hashes (``PassHash``) are
distinct types that can not be confused, and a plaintext password never
shows up in logs or reprs by accident.

Algorithm-specific hashing lives in submodules:

    from typed_password.bcrypt import check_pass, hash_pass
"""

from typed_password.domain.enums import PassCheck
from typed_password.domain.value_objects import (
    Pass,
    PassHash,
    Salt,
    mk_pass,
    unsafe_show_password,
    unsafe_show_password_text,
)

__version__ = "0.1.0"

__all__ = [
    "Pass",
    "PassCheck",
    "PassHash",
    "Salt",
    "mk_pass",
    "unsafe_show_password",
    "unsafe_show_password_text",
]

"""Domain value objects.

Immutable values; none of them validate on construction.
"""

from typed_password.domain.value_objects.bcrypt_params import BcryptParams
from typed_password.domain.value_objects.pass_hash import PassHash
from typed_password.domain.value_objects.password import (
    Pass,
    mk_pass,
    unsafe_show_password,
    unsafe_show_password_text,
)
from typed_password.domain.value_objects.salt import Salt

__all__ = [
    "BcryptParams",
    "Pass",
    "PassHash",
    "Salt",
    "mk_pass",
    "unsafe_show_password",
    "unsafe_show_password_text",
]

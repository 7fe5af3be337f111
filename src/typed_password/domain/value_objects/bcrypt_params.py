"""Parameters recovered from an encoded bcrypt hash."""

from dataclasses import dataclass

from typed_password.domain.algorithms import Bcrypt
from typed_password.domain.value_objects.salt import Salt


@dataclass(frozen=True, slots=True, kw_only=True)
class BcryptParams:
    """Decoded fields of a ``$2b$CC$<salt><digest>`` hash.

    Attributes:
        version: Version tag without dollars (2a, 2b or 2y).
        cost: Work factor (4-31).
        salt: Raw 16-byte salt.
        digest: Radix-64 encoded digest (31 characters).
    """

    version: str
    cost: int
    salt: Salt[Bcrypt]
    digest: str

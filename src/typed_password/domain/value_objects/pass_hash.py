"""Password hash value object.

Holds the canonical encoded hash exactly as it is persisted. The encoded
string carries the algorithm version, cost and salt, so nothing else needs
to be stored next to it.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

A = TypeVar("A")  # Algorithm marker


@dataclass(frozen=True, slots=True)
class PassHash(Generic[A]):
    """Encoded password hash produced by algorithm ``A``.

    Hashes are public artifacts, so value equality and a plain repr are fine.

    Attributes:
        value: Encoded hash, e.g. ``$2b$10$<salt><digest>`` for bcrypt.

    Example:
        >>> from typed_password.domain.algorithms import Bcrypt
        >>> stored: PassHash[Bcrypt] = PassHash(row.password_hash)
        >>> str(stored) == row.password_hash
        True
    """

    value: str

    def __str__(self) -> str:
        return self.value

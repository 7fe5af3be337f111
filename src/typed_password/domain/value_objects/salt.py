"""Salt value object.

Raw salt bytes tagged with the algorithm they are meant for. The length is
not checked here; each algorithm checks it when hashing.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

A = TypeVar("A")  # Algorithm marker


@dataclass(frozen=True, slots=True)
class Salt(Generic[A]):
    """Raw salt for algorithm ``A``.

    Attributes:
        value: Salt bytes.

    Example:
        >>> from typed_password.domain.algorithms import Bcrypt
        >>> salt: Salt[Bcrypt] = Salt(b"abcdefghijklmnop")
        >>> len(salt)
        16
    """

    value: bytes

    def __len__(self) -> int:
        return len(self.value)

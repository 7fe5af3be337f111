"""Algorithm marker types.

Markers exist only for static typing: ``PassHash[Bcrypt]`` and
``Salt[Bcrypt]`` cannot be passed where another algorithm's hash or salt
is expected, and no tag is stored at runtime.

Usage:
    from typed_password.domain.algorithms import Bcrypt

    def store(pass_hash: PassHash[Bcrypt]) -> None: ...
"""

from typing import final


@final
class Bcrypt:
    """Marker for the bcrypt algorithm. Never instantiated."""

    def __new__(cls) -> "Bcrypt":
        raise TypeError("Bcrypt is a type marker and cannot be instantiated")

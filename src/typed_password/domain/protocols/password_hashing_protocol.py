"""Password hashing protocol.

This protocol defines the interface for hashing and verifying ``Pass``
values. Infrastructure provides the concrete implementation.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPasswordService)
    - Generic over the algorithm marker, so a service typed
      ``PasswordHashingProtocol[Bcrypt]`` only accepts ``PassHash[Bcrypt]``
"""

from typing import Protocol, TypeVar

from typed_password.domain.enums import PassCheck
from typed_password.domain.value_objects import Pass, PassHash, Salt

A = TypeVar("A")  # Algorithm marker


class PasswordHashingProtocol(Protocol[A]):
    """Password hashing and verification interface.

    Implementations:
        - BcryptPasswordService: bcrypt (``PasswordHashingProtocol[Bcrypt]``)

    Usage:
        def __init__(self, hasher: PasswordHashingProtocol[Bcrypt]):
            self.hasher = hasher

        stored = self.hasher.hash_pass(mk_pass(form_password))
        if self.hasher.check_pass(mk_pass(attempt), stored) is PassCheck.SUCCESS:
            ...
    """

    def hash_pass(self, password: Pass) -> PassHash[A]:
        """Hash with the default cost and a fresh random salt.

        Args:
            password: Password to hash.

        Returns:
            Encoded hash.
        """
        ...

    def hash_pass_with_params(self, cost: int, password: Pass) -> PassHash[A]:
        """Hash with an explicit cost and a fresh random salt.

        Args:
            cost: Work factor.
            password: Password to hash.

        Returns:
            Encoded hash.
        """
        ...

    def hash_pass_with_salt(
        self, cost: int, salt: Salt[A], password: Pass
    ) -> PassHash[A]:
        """Hash with an explicit cost and salt (deterministic, no I/O).

        Args:
            cost: Work factor.
            salt: Salt to use. Never reuse a salt in production.
            password: Password to hash.

        Returns:
            Encoded hash.

        Raises:
            ValueError: If the salt has the wrong length.
        """
        ...

    def check_pass(self, password: Pass, pass_hash: PassHash[A]) -> PassCheck:
        """Verify a password against a stored hash.

        Args:
            password: Password to check.
            pass_hash: Stored hash.

        Returns:
            PassCheck.SUCCESS on match, PassCheck.FAIL otherwise
            (including malformed hashes; never raises).
        """
        ...

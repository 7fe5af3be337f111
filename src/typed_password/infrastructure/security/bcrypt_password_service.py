"""Bcrypt password hashing service (adapter).

This service implements PasswordHashingProtocol[Bcrypt] on top of the
``bcrypt`` package, which provides the EksBlowfish key schedule and the
constant-time comparison. Nothing cryptographic is reimplemented here;
this module only decides which bytes reach the primitive.

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container (typed_password.core.container)

Behavior:
    - Passwords longer than 72 bytes are cut to 72 bytes before hashing and
      checking, exactly as classic bcrypt does. Any two passwords sharing the
      first 72 bytes verify against each other's hashes.
    - Costs outside [4, 31] are clamped (CostPolicy.CLAMP, logged) or
      rejected with ValueError (CostPolicy.REJECT).
    - A salt that is not exactly 16 bytes is a programmer error (ValueError).
    - check_pass never raises: mismatches, unreadable hashes and version
      tags outside 2a/2b/2y all return PassCheck.FAIL.

Performance:
    - Cost 10 = 2^10 key-schedule rounds, ~60ms per hash
    - Each +1 doubles the time
    - Verify costs the same as hash
"""

import bcrypt

from typed_password.core.constants import (
    BCRYPT_DEFAULT_COST,
    BCRYPT_MAX_COST,
    BCRYPT_MAX_PASSWORD_BYTES,
    BCRYPT_MIN_COST,
    BCRYPT_SALT_BYTES,
)
from typed_password.core.encoding import from_bytes, to_bytes
from typed_password.core.enums import CostPolicy
from typed_password.core.result import Success
from typed_password.domain.algorithms import Bcrypt
from typed_password.domain.enums import PassCheck
from typed_password.domain.protocols import LoggerProtocol, RandomSourceProtocol
from typed_password.domain.value_objects import Pass, PassHash, Salt
from typed_password.infrastructure.security.bcrypt_codec import (
    encode_salt_setting,
    parse_hash,
)
from typed_password.infrastructure.security.salt_provider import new_salt


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        # Via dependency injection
        from typed_password.core.container import get_password_service

        service = get_password_service()

        # Hash password
        stored = service.hash_pass(mk_pass("SecurePass123!"))

        # Verify password
        result = service.check_pass(mk_pass("SecurePass123!"), stored)
    """

    def __init__(
        self,
        *,
        random_source: RandomSourceProtocol,
        logger: LoggerProtocol,
        default_cost: int = BCRYPT_DEFAULT_COST,
        cost_policy: CostPolicy = CostPolicy.CLAMP,
    ) -> None:
        """Initialize bcrypt password service.

        Args:
            random_source: Source of salt bytes.
            logger: Structured logger (never receives password material).
            default_cost: Cost used by hash_pass (default: 10).
            cost_policy: Handling of costs outside [4, 31] (default: clamp).

        Raises:
            ValueError: If default_cost is outside [4, 31].
        """
        if not BCRYPT_MIN_COST <= default_cost <= BCRYPT_MAX_COST:
            msg = (
                f"Default cost must be between {BCRYPT_MIN_COST} and "
                f"{BCRYPT_MAX_COST}, got {default_cost}"
            )
            raise ValueError(msg)

        self._random_source = random_source
        self._logger = logger
        self._default_cost = default_cost
        self._cost_policy = cost_policy

    @property
    def default_cost(self) -> int:
        """Cost used by hash_pass."""
        return self._default_cost

    def hash_pass(self, password: Pass) -> PassHash[Bcrypt]:
        """Hash a password with the default cost and a random salt.

        Args:
            password: Password to hash.

        Returns:
            PassHash[Bcrypt]: Encoded hash ($2b$10$...), 60 characters.

        Example:
            >>> service.hash_pass(mk_pass("foobar"))
            PassHash(value='$2b$10$...')
        """
        return self.hash_pass_with_params(self._default_cost, password)

    def hash_pass_with_params(self, cost: int, password: Pass) -> PassHash[Bcrypt]:
        """Hash a password with the given cost and a random salt.

        Args:
            cost: Work factor. Should be within [4, 31].
            password: Password to hash.

        Returns:
            PassHash[Bcrypt]: Encoded hash.

        Raises:
            ValueError: If cost is out of range and the policy is REJECT.
            OSError: If the OS entropy source is unavailable.
        """
        applied_cost = self._resolve_cost(cost)
        salt = new_salt(BCRYPT_SALT_BYTES, random_source=self._random_source)
        return self._hash(applied_cost, salt, password)

    def hash_pass_with_salt(
        self, cost: int, salt: Salt[Bcrypt], password: Pass
    ) -> PassHash[Bcrypt]:
        """Hash a password with the given cost and salt.

        Deterministic and free of I/O. Hashing with a fixed salt is almost
        never what you want; never use a static salt in production.

        Args:
            cost: Work factor. Should be within [4, 31].
            salt: Salt. MUST be exactly 16 bytes.
            password: Password to hash.

        Returns:
            PassHash[Bcrypt]: Encoded hash.

        Raises:
            ValueError: If the salt is not 16 bytes, or cost is out of range
                and the policy is REJECT.

        Example:
            >>> service.hash_pass_with_salt(
            ...     10, Salt(b"abcdefghijklmnop"), mk_pass("foobar")
            ... )
            PassHash(value='$2b$10$WUHhXETkX0fnYkrqZU3ta.N8Utt4U77kW4RVbchzgvBvBBEEdCD/u')
        """
        if len(salt.value) != BCRYPT_SALT_BYTES:
            msg = (
                f"bcrypt salt must be exactly {BCRYPT_SALT_BYTES} bytes, "
                f"got {len(salt.value)}"
            )
            raise ValueError(msg)

        return self._hash(self._resolve_cost(cost), salt, password)

    def check_pass(self, password: Pass, pass_hash: PassHash[Bcrypt]) -> PassCheck:
        """Verify a password against a bcrypt hash.

        Args:
            password: Password to verify.
            pass_hash: Stored hash.

        Returns:
            PassCheck.SUCCESS if the password matches, PassCheck.FAIL otherwise.

        Note:
            - bcrypt.checkpw does constant-time comparison
            - The hash must parse as a 2a/2b/2y hash before the primitive
              sees it, so what verifies does not depend on the installed
              bcrypt release ($2x$ and other foreign tags are FAIL)
            - Returns FAIL for malformed or non-bcrypt hashes (no exceptions)
            - Safe to call with untrusted input
        """
        stored = getattr(pass_hash, "value", None)
        matched = False
        if isinstance(stored, str) and isinstance(parse_hash(stored), Success):
            try:
                matched = bcrypt.checkpw(
                    password.key_material(BCRYPT_MAX_PASSWORD_BYTES),
                    to_bytes(stored),
                )
            except (ValueError, TypeError):
                # Rejected by the primitive despite a valid layout
                matched = False

        result = PassCheck.SUCCESS if matched else PassCheck.FAIL
        self._logger.debug("password_check_completed", result=result.value)
        return result

    def _resolve_cost(self, cost: int) -> int:
        """Apply the cost policy to a requested cost."""
        if BCRYPT_MIN_COST <= cost <= BCRYPT_MAX_COST:
            return cost

        if self._cost_policy is CostPolicy.REJECT:
            msg = (
                f"bcrypt cost must be between {BCRYPT_MIN_COST} and "
                f"{BCRYPT_MAX_COST}, got {cost}"
            )
            raise ValueError(msg)

        applied_cost = min(max(cost, BCRYPT_MIN_COST), BCRYPT_MAX_COST)
        self._logger.warning(
            "bcrypt_cost_clamped",
            requested_cost=cost,
            applied_cost=applied_cost,
        )
        return applied_cost

    def _hash(self, cost: int, salt: Salt[Bcrypt], password: Pass) -> PassHash[Bcrypt]:
        """Invoke the primitive. Cost and salt are already validated."""
        encoded = bcrypt.hashpw(
            password.key_material(BCRYPT_MAX_PASSWORD_BYTES),
            encode_salt_setting(cost, salt.value),
        )
        self._logger.debug("password_hashed", cost=cost)
        return PassHash(from_bytes(encoded))

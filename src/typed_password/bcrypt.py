"""bcrypt password hashing.

bcrypt is an adaptive password hash built on the Blowfish key schedule. Its
cost parameter sets the number of key-schedule rounds (2^cost), so hashing
can be made slower as hardware gets faster.

Everything a caller needs is importable from here:

    from typed_password.bcrypt import PassCheck, check_pass, hash_pass, mk_pass

    stored = hash_pass(mk_pass("foobar"))          # PassHash[Bcrypt]
    check_pass(mk_pass("foobar"), stored)          # PassCheck.SUCCESS
    check_pass(mk_pass("wrong"), stored)           # PassCheck.FAIL

N.B.: bcrypt only reads the first 72 bytes of a password. Longer passwords
are cut at 72 bytes, so any two passwords with the same first 72 bytes match
each other's hashes.

Hashing manually:
    If you are unsure what the cost does, use ``hash_pass``.
    ``hash_pass_with_params`` takes an explicit cost.

Hashing with a salt (DISADVISED):
    ``hash_pass_with_salt`` is almost never what you want. ``hash_pass`` and
    ``hash_pass_with_params`` generate a fresh random salt on every call.

Unsafe debugging functions:
    ``unsafe_show_password`` and ``unsafe_show_password_text`` reveal a
    password. Use at your own risk.

Blocking:
    Hashing and checking take tens to hundreds of milliseconds. From async
    code use the ``*_async`` variants, which run on the loop's executor.
"""

import asyncio
from functools import partial

from typed_password.core.constants import BCRYPT_SALT_BYTES
from typed_password.core.container import get_password_service, get_random_source
from typed_password.core.errors import ValidationError
from typed_password.core.result import Result
from typed_password.domain.algorithms import Bcrypt
from typed_password.domain.enums import PassCheck
from typed_password.domain.protocols import RandomSourceProtocol
from typed_password.domain.value_objects import (
    BcryptParams,
    Pass,
    PassHash,
    Salt,
    mk_pass,
    unsafe_show_password,
    unsafe_show_password_text,
)
from typed_password.infrastructure.security import salt_provider
from typed_password.infrastructure.security.bcrypt_codec import parse_hash

__all__ = [
    # Algorithm
    "Bcrypt",
    # Plain-text password
    "Pass",
    "mk_pass",
    # Hash passwords
    "hash_pass",
    "PassHash",
    # Verify passwords
    "check_pass",
    "PassCheck",
    # Hashing manually
    "hash_pass_with_params",
    # Hashing with salt (DISADVISED)
    "hash_pass_with_salt",
    "Salt",
    "new_salt",
    # Inspecting stored hashes
    "extract_params",
    "BcryptParams",
    # Async variants
    "hash_pass_async",
    "hash_pass_with_params_async",
    "check_pass_async",
    # Unsafe debugging functions
    "unsafe_show_password",
    "unsafe_show_password_text",
]


def hash_pass(password: Pass) -> PassHash[Bcrypt]:
    """Hash a password with the default cost (10) and a random salt.

    The default cost can be changed with TYPED_PASSWORD_BCRYPT_DEFAULT_COST.

    Example:
        >>> hash_pass(mk_pass("foobar"))
        PassHash(value='$2b$10$...')
    """
    return get_password_service().hash_pass(password)


def hash_pass_with_params(cost: int, password: Pass) -> PassHash[Bcrypt]:
    """Hash a password with the given cost and a random salt.

    The higher the cost, the longer hashing and checking take. For
    interactive logins aim for 0.05-0.5 seconds on the machine that checks.

    Args:
        cost: Should be between 4 and 31 (inclusive). Values outside are
            clamped, or rejected when the cost policy is ``reject``.
        password: Password to hash.

    Returns:
        PassHash[Bcrypt]: Hash in standard format.
    """
    return get_password_service().hash_pass_with_params(cost, password)


def hash_pass_with_salt(
    cost: int, salt: Salt[Bcrypt], password: Pass
) -> PassHash[Bcrypt]:
    """Hash a password with the given cost and salt. DISADVISED.

    Never use a static salt in production; use ``hash_pass``.

    Args:
        cost: Should be between 4 and 31 (inclusive).
        salt: MUST be 16 bytes or ValueError is raised.
        password: Password to hash.

    Returns:
        PassHash[Bcrypt]: Hash in standard format.

    Example:
        >>> hash_pass_with_salt(10, Salt(b"abcdefghijklmnop"), mk_pass("foobar"))
        PassHash(value='$2b$10$WUHhXETkX0fnYkrqZU3ta.N8Utt4U77kW4RVbchzgvBvBBEEdCD/u')
    """
    return get_password_service().hash_pass_with_salt(cost, salt, password)


def check_pass(password: Pass, pass_hash: PassHash[Bcrypt]) -> PassCheck:
    """Check a password against a bcrypt hash.

    Returns PassCheck.FAIL for a wrong password and for anything that is
    not a usable bcrypt hash; it never raises.

    Example:
        >>> stored = hash_pass(mk_pass("foobar"))
        >>> check_pass(mk_pass("foobar"), stored)
        <PassCheck.SUCCESS: 'success'>
        >>> check_pass(mk_pass("incorrect-password"), stored)
        <PassCheck.FAIL: 'fail'>
    """
    return get_password_service().check_pass(password, pass_hash)


def new_salt(*, random_source: RandomSourceProtocol | None = None) -> Salt[Bcrypt]:
    """Generate a random 16-byte bcrypt salt.

    Args:
        random_source: Byte source; the OS CSPRNG when omitted.

    Raises:
        OSError: If the OS entropy source is unavailable.
    """
    source = random_source if random_source is not None else get_random_source()
    return salt_provider.new_salt(BCRYPT_SALT_BYTES, random_source=source)


def extract_params(pass_hash: PassHash[Bcrypt]) -> Result[BcryptParams, ValidationError]:
    """Read version, cost and salt back out of a stored hash.

    Feeding cost and salt back into hash_pass_with_salt reproduces the digest.
    New hashes are always tagged 2b, so the full string only matches for 2b
    input; a 2a or 2y hash comes back with the same digest under $2b$.

    Example:
        >>> match extract_params(stored):
        ...     case Success(value=params):
        ...         params.cost
        10
    """
    return parse_hash(pass_hash.value)


async def hash_pass_async(password: Pass) -> PassHash[Bcrypt]:
    """``hash_pass`` on the running loop's default executor."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, partial(hash_pass, password))


async def hash_pass_with_params_async(cost: int, password: Pass) -> PassHash[Bcrypt]:
    """``hash_pass_with_params`` on the running loop's default executor."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None, partial(hash_pass_with_params, cost, password)
    )


async def check_pass_async(password: Pass, pass_hash: PassHash[Bcrypt]) -> PassCheck:
    """``check_pass`` on the running loop's default executor."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, partial(check_pass, password, pass_hash))

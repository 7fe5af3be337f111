"""bcrypt hash string codec.

Encodes and decodes the modular crypt layout used by every bcrypt
implementation:

    $2b$10$WUHhXETkX0fnYkrqZU3ta.N8Utt4U77kW4RVbchzgvBvBBEEdCD/u
    \\__/\\_/\\____________________/\\_____________________________/
    tag cost  salt (22 chars)        digest (31 chars)

Salt and digest use bcrypt's radix-64 alphabet (``./A-Za-z0-9``). Bit order
matches standard base64, so encoding is base64 with the alphabet swapped
and the padding dropped.
"""

import base64
import binascii
import re

from typed_password.core.constants import (
    BCRYPT_ACCEPTED_VERSIONS,
    BCRYPT_ENCODED_DIGEST_LENGTH,
    BCRYPT_ENCODED_SALT_LENGTH,
    BCRYPT_MAX_COST,
    BCRYPT_MIN_COST,
    BCRYPT_VERSION,
)
from typed_password.core.enums import ErrorCode
from typed_password.core.errors import ValidationError
from typed_password.core.result import Failure, Result, Success
from typed_password.domain.errors import PasswordHashError
from typed_password.domain.value_objects import BcryptParams, Salt

_STANDARD_ALPHABET = (
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)
_BCRYPT_ALPHABET = (
    b"./ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
)
_TO_BCRYPT = bytes.maketrans(_STANDARD_ALPHABET, _BCRYPT_ALPHABET)
_FROM_BCRYPT = bytes.maketrans(_BCRYPT_ALPHABET, _STANDARD_ALPHABET)

_HASH_PATTERN = re.compile(
    r"\$(?P<version>[0-9a-z]{2})"
    r"\$(?P<cost>[0-9]{2})"
    rf"\$(?P<salt>[./A-Za-z0-9]{{{BCRYPT_ENCODED_SALT_LENGTH}}})"
    rf"(?P<digest>[./A-Za-z0-9]{{{BCRYPT_ENCODED_DIGEST_LENGTH}}})"
)


def encode_radix64(data: bytes) -> str:
    """Encode bytes with bcrypt's radix-64 alphabet, unpadded.

    Args:
        data: Raw bytes.

    Returns:
        str: Encoded text (16 bytes -> 22 characters).
    """
    return base64.b64encode(data).rstrip(b"=").translate(_TO_BCRYPT).decode("ascii")


def decode_radix64(text: str) -> bytes:
    """Decode bcrypt radix-64 text.

    Args:
        text: Encoded text using ``./A-Za-z0-9``.

    Returns:
        bytes: Decoded bytes (22 characters -> 16 bytes).

    Raises:
        ValueError: If ``text`` is not valid radix-64.
    """
    try:
        raw = text.encode("ascii")
    except UnicodeEncodeError as e:
        raise ValueError("radix-64 text must be ASCII") from e
    if raw.translate(None, _BCRYPT_ALPHABET):
        raise ValueError("radix-64 text contains characters outside ./A-Za-z0-9")

    standard = raw.translate(_FROM_BCRYPT)
    padding = b"=" * (-len(standard) % 4)
    try:
        return base64.b64decode(standard + padding, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid radix-64 length ({len(text)})") from e


def encode_salt_setting(cost: int, salt: bytes) -> bytes:
    """Build the ``$2b$CC$<salt>`` setting string consumed by bcrypt.

    Args:
        cost: Work factor, already within range.
        salt: Raw 16-byte salt.

    Returns:
        bytes: 29-byte setting string.
    """
    return f"${BCRYPT_VERSION}${cost:02d}${encode_radix64(salt)}".encode("ascii")


def parse_hash(text: str) -> Result[BcryptParams, ValidationError]:
    """Split an encoded hash into version, cost, salt and digest.

    Args:
        text: Encoded hash.

    Returns:
        Success(BcryptParams) for a well-formed 2a/2b/2y hash, otherwise
        Failure(ValidationError) describing what is wrong.

    Example:
        >>> result = parse_hash(
        ...     "$2b$10$WUHhXETkX0fnYkrqZU3ta.N8Utt4U77kW4RVbchzgvBvBBEEdCD/u"
        ... )
        >>> result.value.cost
        10
    """
    match = _HASH_PATTERN.fullmatch(text)
    if match is None:
        return Failure(
            error=ValidationError(
                code=ErrorCode.PASSWORD_HASH_MALFORMED,
                message=PasswordHashError.MALFORMED,
                field="pass_hash",
            )
        )

    version = match.group("version")
    if version not in BCRYPT_ACCEPTED_VERSIONS:
        return Failure(
            error=ValidationError(
                code=ErrorCode.PASSWORD_HASH_UNSUPPORTED_VERSION,
                message=PasswordHashError.UNSUPPORTED_VERSION,
                field="pass_hash",
                details={"version": version},
            )
        )

    cost = int(match.group("cost"))
    if not BCRYPT_MIN_COST <= cost <= BCRYPT_MAX_COST:
        return Failure(
            error=ValidationError(
                code=ErrorCode.PASSWORD_HASH_INVALID_COST,
                message=PasswordHashError.INVALID_COST,
                field="pass_hash",
                details={"cost": str(cost)},
            )
        )

    salt = decode_radix64(match.group("salt"))

    return Success(
        value=BcryptParams(
            version=version,
            cost=cost,
            salt=Salt(salt),
            digest=match.group("digest"),
        )
    )

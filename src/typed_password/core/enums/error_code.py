"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Stored hash inspection
    PASSWORD_HASH_MALFORMED = "password_hash_malformed"
    PASSWORD_HASH_UNSUPPORTED_VERSION = "password_hash_unsupported_version"
    PASSWORD_HASH_INVALID_COST = "password_hash_invalid_cost"

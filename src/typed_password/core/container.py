"""Dependency factories (composition root).

Process-scoped singletons:
- Logging (structlog console adapter)
- Random source (OS CSPRNG)
- Password hashing (bcrypt)

The random source and the hashing service keep no mutable state, so the
singletons are safe to share between threads. ``cache_clear()`` on each
factory resets it (tests, or after changing environment variables).
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from typed_password.core.config import settings

if TYPE_CHECKING:
    from typed_password.domain.protocols import LoggerProtocol, RandomSourceProtocol
    from typed_password.infrastructure.security import BcryptPasswordService


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the logger singleton.

    Adapter selection:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from typed_password.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)


@lru_cache()
def get_random_source() -> "RandomSourceProtocol":
    """Return the OS random source singleton.

    Returns:
        RandomSourceProtocol: OsRandomSource backed by ``secrets``.
    """
    from typed_password.infrastructure.security import OsRandomSource

    return OsRandomSource(logger=get_logger())


@lru_cache()
def get_password_service() -> "BcryptPasswordService":
    """Return the bcrypt password service singleton.

    Default cost and cost policy come from settings
    (TYPED_PASSWORD_BCRYPT_DEFAULT_COST, TYPED_PASSWORD_BCRYPT_COST_POLICY).

    Returns:
        BcryptPasswordService: Service implementing
        PasswordHashingProtocol[Bcrypt].
    """
    from typed_password.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(
        random_source=get_random_source(),
        logger=get_logger(),
        default_cost=settings.bcrypt_default_cost,
        cost_policy=settings.bcrypt_cost_policy,
    )

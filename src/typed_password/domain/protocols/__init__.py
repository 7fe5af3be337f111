"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from typed_password.domain.protocols import (
        LoggerProtocol,
        PasswordHashingProtocol,
        RandomSourceProtocol,
    )
"""

from typed_password.domain.protocols.logger_protocol import LoggerProtocol
from typed_password.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)
from typed_password.domain.protocols.random_source_protocol import (
    RandomSourceProtocol,
)

__all__ = [
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "RandomSourceProtocol",
]

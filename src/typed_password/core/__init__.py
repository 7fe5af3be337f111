"""Core shared kernel.

This module provides foundational utilities used across all layers:
- Result types for railway-oriented programming
- Base error classes for inspection failures
- Text/bytes conversion

The core module has NO dependencies on other package layers.
"""

from typed_password.core.encoding import from_bytes, to_bytes
from typed_password.core.enums import CostPolicy, Environment, ErrorCode
from typed_password.core.errors import DomainError, ValidationError
from typed_password.core.result import Failure, Result, Success

__all__ = [
    "CostPolicy",
    "DomainError",
    "Environment",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
    "ValidationError",
    "from_bytes",
    "to_bytes",
]

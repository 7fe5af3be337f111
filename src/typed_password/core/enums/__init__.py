"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from typed_password.core.enums import CostPolicy, Environment, ErrorCode
"""

from typed_password.core.enums.cost_policy import CostPolicy
from typed_password.core.enums.environment import Environment
from typed_password.core.enums.error_code import ErrorCode

__all__ = ["CostPolicy", "ErrorCode", "Environment"]

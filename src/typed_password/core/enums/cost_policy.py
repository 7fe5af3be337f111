"""Handling of bcrypt costs outside the [4, 31] range.

Policies:
- CLAMP: move the cost to the nearest bound and log a warning. Matches the
  behavior of the classic bcrypt implementations, so existing callers keep
  working.
- REJECT: raise ValueError. Stricter, surfaces misconfiguration early.
"""

from enum import Enum


class CostPolicy(str, Enum):
    """Out-of-range cost handling."""

    CLAMP = "clamp"
    REJECT = "reject"

"""Domain enums.

Available Enums:
    - PassCheck: outcome of verifying a password against a hash
"""

from typed_password.domain.enums.pass_check import PassCheck

__all__ = ["PassCheck"]

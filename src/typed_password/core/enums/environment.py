"""Runtime environment types.

Used by Settings to pick logging output:
- DEVELOPMENT: human-readable colored console logs
- TESTING: JSON logs for test runs
- CI: JSON logs for continuous integration
- PRODUCTION: JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

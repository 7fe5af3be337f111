"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every variable is prefixed with ``TYPED_PASSWORD_``.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Fixed algorithm facts (salt length, cost bounds) live in core/constants.py

Usage:
    from typed_password.core.config import settings

    cost = settings.bcrypt_default_cost

    if settings.bcrypt_cost_policy is CostPolicy.REJECT:
        # Out-of-range costs raise instead of being clamped
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from typed_password.core.constants import (
    BCRYPT_DEFAULT_COST,
    BCRYPT_MAX_COST,
    BCRYPT_MIN_COST,
)
from typed_password.core.enums import CostPolicy, Environment

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables (TYPED_PASSWORD_*)
        2. Default values

    Returns:
        Settings: Configuration loaded from environment.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    bcrypt_default_cost: int = Field(
        default=BCRYPT_DEFAULT_COST,
        description="Cost used by hash_pass (2^cost key-schedule rounds)",
    )
    bcrypt_cost_policy: CostPolicy = Field(
        default=CostPolicy.CLAMP,
        description="What to do with a cost outside [4, 31]: clamp or reject",
    )

    model_config = SettingsConfigDict(
        env_prefix="TYPED_PASSWORD_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("bcrypt_default_cost")
    @classmethod
    def validate_bcrypt_default_cost(cls, v: int) -> int:
        """
        Validate the default cost is within bcrypt's range.

        Args:
            v: Default bcrypt cost.

        Returns:
            int: Validated cost.

        Raises:
            ValueError: If cost is not between 4 and 31.
        """
        if not BCRYPT_MIN_COST <= v <= BCRYPT_MAX_COST:
            raise ValueError(
                f"bcrypt_default_cost must be between {BCRYPT_MIN_COST} "
                f"and {BCRYPT_MAX_COST}"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name (any case).

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the level is unknown.
        """
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION

    @property
    def use_json_logs(self) -> bool:
        """
        Check whether logs should be rendered as JSON.

        Returns:
            bool: True for testing, ci and production environments.
        """
        return self.environment != Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()

"""
Configuration Management for splitledger

Uses pydantic-settings for type-safe configuration from environment variables.

The engine itself needs almost no configuration: arithmetic is exact and
not tunable. Settings cover the ambient concerns around it (logging, audit,
how balances are rounded for display).
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerSettings(BaseSettings):
    """
    Main ledger settings.

    Loads configuration from LEDGER_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Standard library log level name"
    )
    log_format: str = Field(
        default="json",
        pattern="^(json|console)$",
        description="Render log lines as JSON or for a terminal"
    )

    # Audit
    audit_enabled: bool = Field(
        default=True,
        description="Emit audit events for ledger operations"
    )

    # Reporting
    display_decimal_places: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Decimal places used when balances are shown (never for arithmetic)"
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache()
def get_settings() -> LedgerSettings:
    """
    Get ledger settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return LedgerSettings()

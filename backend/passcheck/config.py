"""
Passcheck Configuration Module
Loads policy settings from environment variables with the institutional defaults.
"""

from functools import lru_cache
from typing import Optional
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PolicySettings(BaseSettings):
    """Password policy settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PASSCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Length bounds (inclusive)
    min_length: int = 8
    max_length: int = 32

    # Longest allowed run of identical characters
    max_consecutive_identical: int = 2

    # Passwords longer than word + slack are exempt from the similarity rule
    similarity_length_slack: int = 4

    # Characters that may not appear anywhere / at the end
    forbidden_characters: str = "\r\n/\\"
    forbidden_trailing: str = "*"

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    @field_validator("min_length", "max_consecutive_identical")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be at least 1")
        return v

    @field_validator("similarity_length_slack")
    @classmethod
    def validate_slack(cls, v: int) -> int:
        if v < 0:
            raise ValueError("similarity_length_slack cannot be negative")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def validate_length_bounds(self) -> "PolicySettings":
        if self.max_length < self.min_length:
            raise ValueError("max_length must not be smaller than min_length")
        return self


@lru_cache()
def get_settings() -> PolicySettings:
    """Get cached settings instance."""
    return PolicySettings()

"""Configuration loading for the valuecheck command line.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Container configuration
    initial_capacity: int = Field(
        default=16,
        description="Initial bucket count for hash containers",
    )
    load_factor: float = Field(
        default=0.75,
        description="Size/bucket ratio above which hash containers double",
    )

    # Contract checker configuration
    max_samples: int = Field(
        default=64,
        description="Largest sample set the checker accepts (triples are cubic)",
    )

    # Reporting configuration
    report_backend: Literal["stdout", "markdown"] = Field(
        default="stdout",
        description="Where contract reports are published",
    )
    report_output_dir: str = Field(
        default="./reports",
        description="Output directory for markdown reports",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    verbose: bool = Field(
        default=False,
        description="Include every violation in stdout reports",
    )

    @field_validator("initial_capacity")
    @classmethod
    def validate_initial_capacity(cls, v: int) -> int:
        """Ensure initial capacity is positive."""
        if v <= 0:
            raise ValueError("initial_capacity must be positive")
        return v

    @field_validator("load_factor")
    @classmethod
    def validate_load_factor(cls, v: float) -> float:
        """Ensure load factor is in (0, 1]."""
        if not 0 < v <= 1:
            raise ValueError("load_factor must be in (0, 1]")
        return v

    @field_validator("max_samples")
    @classmethod
    def validate_max_samples(cls, v: int) -> int:
        """Ensure sample cap is positive."""
        if v <= 0:
            raise ValueError("max_samples must be positive")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]

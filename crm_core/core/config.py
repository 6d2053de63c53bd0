"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables
(prefix ``CRM_``). Every value has a safe default so the core can run
embedded in tests and scripts without any environment set up.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from crm_core.core.config import settings

    page_size = settings.default_page_size
    if settings.is_development:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from crm_core.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables (CRM_*)
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="crm-core",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Request limits
    default_page_size: int = Field(
        default=25,
        description="Page size used when a list request does not specify one",
    )
    max_page_size: int = Field(
        default=100,
        le=100,
        description="Largest page size a list request may ask for",
    )
    max_filter_length: int = Field(
        default=100,
        description="Maximum length of free-text filter values",
    )
    max_label_length: int = Field(
        default=50,
        description="Maximum length of reference labels (type/status names)",
    )
    request_timeout_seconds: float | None = Field(
        default=None,
        description="Default dispatch timeout; None disables the timeout",
    )

    model_config = SettingsConfigDict(
        env_prefix="CRM_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name in any case.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def validate_page_sizes(self) -> "Settings":
        """
        Ensure the default page size fits inside the allowed range.

        Returns:
            Settings: The validated settings.

        Raises:
            ValueError: If 1 <= default_page_size <= max_page_size does not hold.
        """
        if self.max_page_size < 1:
            raise ValueError("max_page_size must be at least 1")
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise ValueError("default_page_size must be between 1 and max_page_size")
        return self

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing or CI environment.

        Returns:
            bool: True if environment is TESTING or CI.
        """
        return self.environment in {Environment.TESTING, Environment.CI}

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION.
        """
        return self.environment == Environment.PRODUCTION


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

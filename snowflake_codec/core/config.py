"""
Configuration

Settings and environment configuration for snowflake-codec.
"""

from typing import Literal, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from snowflake_codec.core.error_codes import ConfigurationErrorCode
from snowflake_codec.core.exceptions import ConfigurationException


class Settings(BaseSettings):
    """
    Snowflake codec configuration settings.

    Supports both environment variables and .env file loading.
    Environment variables take precedence over .env file values.
    """

    # Application settings
    log_level: str = Field(
        default="info", description="Log level (debug, info, warning, error)"
    )
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Application environment"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate log level."""
        allowed_levels = {"debug", "info", "warning", "error"}
        normalized = v.lower().strip()
        if normalized not in allowed_levels:
            raise ValueError(
                f"log_level must be one of {sorted(allowed_levels)}, got '{v}'"
            )
        return normalized

    # Generator identity
    snowflake__worker_id: int = Field(
        default=0, ge=0, description="Cluster worker identifier (encoded modulo 32)"
    )
    snowflake__process_id: Optional[int] = Field(
        default=None,
        ge=0,
        description="Process identifier (encoded modulo 32); defaults to the OS pid",
    )
    snowflake__overflow_sleep_interval: float = Field(
        default=0.0,
        ge=0,
        description="Seconds slept between clock polls after a sequence overflow",
    )

    # Logfire monitoring settings
    logfire__enabled: bool = Field(
        default=False, description="Enable Logfire monitoring"
    )
    logfire__service_name: str = Field(
        default="snowflake_codec", description="Logfire service name"
    )
    logfire__environment: str = Field(
        default="development", description="Logfire environment"
    )
    logfire__token: Optional[SecretStr] = Field(
        default=None, description="Logfire token"
    )

    # Logging file settings (optional)
    log__dir: str = Field(
        default="logs", description="Directory where log files are stored"
    )
    log__file_path: Optional[str] = Field(
        default=None, description="Custom log file path; overrides log__dir if set"
    )
    log__file_level: str = Field(default="INFO", description="File handler log level")
    log__file_max_bytes: int = Field(
        default=10 * 1024 * 1024,
        gt=0,
        description="Max size of a log file before rotation",
    )
    log__file_backup_count: int = Field(
        default=3, ge=0, description="Number of backup log files to keep"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )


def create_settings() -> Settings:
    """
    Create and validate settings instance.

    Returns:
        Settings: Configured settings instance

    Raises:
        ConfigurationException: If configuration validation fails
    """
    try:
        return Settings()
    except Exception as e:
        print(f"❌ Configuration loading failed: {e}")
        print("Please check the SNOWFLAKE__* and LOG__* environment variables")
        raise ConfigurationException.wrap(
            e,
            "Configuration loading failed",
            ConfigurationErrorCode.CONFIG_LOAD_FAILED,
        ) from e


# Global configuration instance
settings = create_settings()

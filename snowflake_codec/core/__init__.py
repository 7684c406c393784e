"""
Core Package

Configuration, error handling, and logging for snowflake-codec.
"""

# ruff: noqa: F401  # All imports are re-exported via __all__

from .config import Settings, settings  # noqa: F401
from .error_codes import (  # noqa: F401
    ConfigurationErrorCode,
    ErrorCode,
    SnowflakeErrorCode,
    ValidationErrorCode,
)
from .exceptions import (  # noqa: F401
    ClockRegressionException,
    ConfigurationException,
    InvalidFormatException,
    InvalidInputTypeException,
    SnowflakeCodecException,
    SnowflakeGenerationException,
    TimestampOutOfRangeException,
    ValidationException,
)
from .logfire_config import initialize_logfire, is_logfire_enabled  # noqa: F401
from .logger import get_logger  # noqa: F401

__all__ = [
    # Configuration
    "Settings",
    "settings",
    # Error handling
    "ErrorCode",
    "ConfigurationErrorCode",
    "ValidationErrorCode",
    "SnowflakeErrorCode",
    # Exceptions
    "SnowflakeCodecException",
    "ConfigurationException",
    "ValidationException",
    "InvalidInputTypeException",
    "InvalidFormatException",
    "SnowflakeGenerationException",
    "ClockRegressionException",
    "TimestampOutOfRangeException",
    # Logger
    "get_logger",
    # Logfire Configuration
    "initialize_logfire",
    "is_logfire_enabled",
]

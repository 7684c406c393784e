"""
Error Codes

Standardized error codes for snowflake-codec.
"""

from enum import StrEnum


class ErrorCode(StrEnum):
    """Base error code enum (string-based)."""


class ConfigurationErrorCode(ErrorCode):
    """Configuration-related error codes."""

    INVALID_CONFIG = "CONFIGURATION_INVALID_CONFIG"
    INVALID_IDENTITY = "CONFIGURATION_INVALID_IDENTITY"
    CONFIG_LOAD_FAILED = "CONFIGURATION_LOAD_FAILED"


class ValidationErrorCode(ErrorCode):
    """Validation-related error codes."""

    INVALID_INPUT_TYPE = "VALIDATION_INVALID_INPUT_TYPE"
    INVALID_FORMAT = "VALIDATION_INVALID_FORMAT"
    VALUE_OUT_OF_RANGE = "VALIDATION_VALUE_OUT_OF_RANGE"


class SnowflakeErrorCode(ErrorCode):
    """Snowflake generation error codes."""

    CLOCK_REGRESSION = "SNOWFLAKE_CLOCK_REGRESSION"
    TIMESTAMP_OUT_OF_RANGE = "SNOWFLAKE_TIMESTAMP_OUT_OF_RANGE"
    GENERATION_FAILED = "SNOWFLAKE_GENERATION_FAILED"


"""
Custom Exceptions

Snowflake codec exception classes.

USAGE GUIDELINES:
- Always use ErrorCode enum members, not string literals
- Each exception subclass defaults to its corresponding domain error code
- Use the wrap() class method to preserve exception chains when wrapping lower-level exceptions
"""

import json
from typing import TYPE_CHECKING, Any, Dict, Optional

from snowflake_codec.core.error_codes import (
    ConfigurationErrorCode,
    SnowflakeErrorCode,
    ValidationErrorCode,
)

if TYPE_CHECKING:
    from snowflake_codec.core.error_codes import ErrorCode


def _safe_serialize(obj: Any) -> Any:
    """Safely serialize an object for JSON, using repr() for non-serializable objects."""
    try:
        json.dumps(obj)
        return obj
    except (TypeError, ValueError):
        return repr(obj)


class SnowflakeCodecException(Exception):
    """Base exception for snowflake-codec errors."""

    default_error_code: Optional["ErrorCode"] = None

    def __init__(
        self,
        message: str,
        error_code: Optional["ErrorCode | str"] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization with safe handling."""
        safe_details = {k: _safe_serialize(v) for k, v in self.details.items()}

        result = {
            "message": self.message,
            "code": (
                self.error_code.value
                if self.error_code is not None and hasattr(self.error_code, "value")
                else self.error_code
            ),
            "details": safe_details,
        }

        # Priority: custom cause > __cause__ > __context__
        cause = (
            self.cause
            or getattr(self, "__cause__", None)
            or getattr(self, "__context__", None)
        )
        if cause:
            result["cause"] = {"type": cause.__class__.__name__, "message": str(cause)}

        return result

    @classmethod
    def wrap(
        cls,
        exc: Exception,
        message: str,
        error_code: Optional["ErrorCode"] = None,
        **context: Any,
    ) -> "SnowflakeCodecException":
        """
        Wrap a lower-level exception while preserving the exception chain.

        Args:
            exc: The original exception to wrap
            message: Error message
            error_code: ErrorCode enum member (strongly recommended over string)
            **context: Additional context to include in details

        Returns:
            New exception instance with preserved exception chain

        Example:
            try:
                return Settings()
            except ValidationError as e:
                raise ConfigurationException.wrap(
                    e, "Configuration loading failed",
                    ConfigurationErrorCode.CONFIG_LOAD_FAILED,
                ) from e
        """
        return cls(message=message, error_code=error_code, details=context, cause=exc)

    def with_context(self, **kwargs: Any) -> "SnowflakeCodecException":
        """Add context details to the exception."""
        self.details.update(kwargs)
        return self

    def __str__(self) -> str:
        """String representation with error code and details."""
        parts = [self.message]
        if self.error_code:
            code_str = (
                self.error_code.value
                if hasattr(self.error_code, "value")
                else self.error_code
            )
            parts.append(f"[{code_str}]")
        if self.details:
            parts.append(f"Details: {self.details}")
        return " ".join(parts)


class ConfigurationException(SnowflakeCodecException):
    """Exception raised for invalid generator configuration."""

    default_error_code = ConfigurationErrorCode.INVALID_CONFIG


class ValidationException(SnowflakeCodecException, ValueError):
    """Exception raised for validation errors."""

    default_error_code = ValidationErrorCode.VALUE_OUT_OF_RANGE


class InvalidInputTypeException(ValidationException, TypeError):
    """Raised when a snowflake is given as anything but a string."""

    default_error_code = ValidationErrorCode.INVALID_INPUT_TYPE


class InvalidFormatException(ValidationException):
    """Raised when a string cannot be read as a 64-bit snowflake."""

    default_error_code = ValidationErrorCode.INVALID_FORMAT


class SnowflakeGenerationException(SnowflakeCodecException):
    """Exception raised when a snowflake cannot be generated."""

    default_error_code = SnowflakeErrorCode.GENERATION_FAILED


class ClockRegressionException(SnowflakeGenerationException):
    """Raised when the wall clock moved backwards between two generate calls."""

    default_error_code = SnowflakeErrorCode.CLOCK_REGRESSION


class TimestampOutOfRangeException(SnowflakeGenerationException):
    """Raised when a timestamp falls before the epoch or beyond 42 bits."""

    default_error_code = SnowflakeErrorCode.TIMESTAMP_OUT_OF_RANGE

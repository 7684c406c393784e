from snowflake_codec.core.error_codes import (
    SnowflakeErrorCode,
    ValidationErrorCode,
)
from snowflake_codec.core.exceptions import (
    ClockRegressionException,
    InvalidFormatException,
    InvalidInputTypeException,
    SnowflakeCodecException,
    ValidationException,
)


def test_default_error_codes():
    assert InvalidFormatException("x").error_code == ValidationErrorCode.INVALID_FORMAT
    assert (
        InvalidInputTypeException("x").error_code
        == ValidationErrorCode.INVALID_INPUT_TYPE
    )
    assert ClockRegressionException("x").error_code == SnowflakeErrorCode.CLOCK_REGRESSION


def test_explicit_error_code_overrides_default():
    exc = ValidationException("x", ValidationErrorCode.INVALID_FORMAT)

    assert exc.error_code == ValidationErrorCode.INVALID_FORMAT


def test_str_includes_code_and_details():
    exc = InvalidFormatException("Bad snowflake", details={"value": "abc"})

    assert str(exc) == "Bad snowflake [VALIDATION_INVALID_FORMAT] Details: {'value': 'abc'}"


def test_wrap_preserves_cause_in_to_dict():
    original = ValueError("invalid literal")

    exc = InvalidFormatException.wrap(original, "Not a snowflake", text=object())
    payload = exc.to_dict()

    assert isinstance(exc, InvalidFormatException)
    assert payload["code"] == "VALIDATION_INVALID_FORMAT"
    assert payload["cause"] == {"type": "ValueError", "message": "invalid literal"}
    assert payload["details"]["text"].startswith("<object object")


def test_with_context_adds_details():
    exc = SnowflakeCodecException("boom").with_context(attempt=2)

    assert exc.details == {"attempt": 2}
    assert exc.to_dict()["code"] is None

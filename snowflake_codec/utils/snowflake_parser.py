"""
Snowflake Parser

Turns the text form of a snowflake back into its fields. Parsing is pure
and never touches generator state.
"""

import re
from typing import Any, Optional

from snowflake_codec.core.exceptions import (
    InvalidFormatException,
    InvalidInputTypeException,
)
from snowflake_codec.models.snowflake_record import SnowflakeRecord
from snowflake_codec.utils.snowflake_generator import generate_snowflake_id_str
from snowflake_codec.utils.snowflake_layout import (
    MAX_SAFE_INTEGER,
    MAX_SNOWFLAKE,
    unpack_snowflake,
)

_DECIMAL_RE = re.compile(r"[0-9]+")
_MAX_DIGITS = len(str(MAX_SNOWFLAKE))


def parse_snowflake(text: Any) -> SnowflakeRecord:
    """
    Deconstruct a snowflake given as a decimal string.

    Values at or below 2**53 - 1 are rejected: they fit a double exactly and
    are far too small to have been generated after the epoch, so they almost
    always mean a truncated or unrelated number.

    Args:
        text: Decimal representation of the snowflake

    Returns:
        SnowflakeRecord: The decoded fields

    Raises:
        InvalidInputTypeException: If text is not a string
        InvalidFormatException: If text is not a decimal 64-bit snowflake
    """
    if not isinstance(text, str):
        raise InvalidInputTypeException(
            "Snowflake must be given as a decimal string",
            details={"type": type(text).__name__},
        )

    candidate = text.strip()
    if not _DECIMAL_RE.fullmatch(candidate):
        raise InvalidFormatException(
            "Snowflake is not a decimal integer", details={"value": text}
        )

    # bounded before int() so long inputs never reach the int conversion limit
    digits = candidate.lstrip("0")
    if len(digits) > _MAX_DIGITS:
        raise InvalidFormatException(
            "Value does not fit in 64 bits",
            details={"digits": len(digits), "maximum_digits": _MAX_DIGITS},
        )

    value = int(digits or "0")
    if value <= MAX_SAFE_INTEGER:
        raise InvalidFormatException(
            "Value is too small to be a snowflake",
            details={"value": text, "minimum": MAX_SAFE_INTEGER + 1},
        )
    if value > MAX_SNOWFLAKE:
        raise InvalidFormatException(
            "Value does not fit in 64 bits", details={"value": text}
        )

    return unpack_snowflake(value)


def construct_snowflake(text: Optional[str] = None) -> SnowflakeRecord:
    """
    Deconstruct a snowflake, generating a fresh one when none is given.

    Args:
        text: Decimal representation of the snowflake, or None

    Returns:
        SnowflakeRecord: The decoded fields
    """
    if text is None:
        text = generate_snowflake_id_str()
    return parse_snowflake(text)

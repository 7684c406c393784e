"""
snowflake-codec Package

Generation and parsing of 64-bit, time-ordered snowflake identifiers.
"""

from snowflake_codec.core.exceptions import (
    ClockRegressionException,
    ConfigurationException,
    InvalidFormatException,
    InvalidInputTypeException,
    SnowflakeCodecException,
    SnowflakeGenerationException,
    TimestampOutOfRangeException,
    ValidationException,
)
from snowflake_codec.models.snowflake_record import SnowflakeRecord
from snowflake_codec.utils.snowflake_generator import (
    SnowflakeGenerator,
    generate_snowflake_id_str,
    get_snowflake_generator,
)
from snowflake_codec.utils.snowflake_parser import construct_snowflake, parse_snowflake

__version__ = "0.1.0"

generate = generate_snowflake_id_str
construct = construct_snowflake
parse = parse_snowflake

__all__ = [
    "generate",
    "construct",
    "parse",
    "get_snowflake_generator",
    "SnowflakeGenerator",
    "SnowflakeRecord",
    "SnowflakeCodecException",
    "ConfigurationException",
    "ValidationException",
    "InvalidInputTypeException",
    "InvalidFormatException",
    "SnowflakeGenerationException",
    "ClockRegressionException",
    "TimestampOutOfRangeException",
]

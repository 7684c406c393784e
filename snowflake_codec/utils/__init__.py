"""
Utils Package

Snowflake generation and parsing for snowflake-codec.
"""

# Snowflake ID utilities - fast-failing imports
from .snowflake_generator import (
    SnowflakeGenerator,
    current_millis,
    generate_snowflake_id,
    generate_snowflake_id_str,
    get_snowflake_generator,
    reset_snowflake_generator,
)
from .snowflake_layout import EPOCH, pack_snowflake, unpack_snowflake
from .snowflake_parser import construct_snowflake, parse_snowflake

__all__ = [
    "SnowflakeGenerator",
    "current_millis",
    "get_snowflake_generator",
    "reset_snowflake_generator",
    "generate_snowflake_id",
    "generate_snowflake_id_str",
    "EPOCH",
    "pack_snowflake",
    "unpack_snowflake",
    "parse_snowflake",
    "construct_snowflake",
]

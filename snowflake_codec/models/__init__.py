"""
Models Package

Data models for snowflake-codec.
"""

from .snowflake_record import SnowflakeRecord

__all__ = ["SnowflakeRecord"]

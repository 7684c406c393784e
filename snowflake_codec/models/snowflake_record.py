"""
Snowflake Record Model

Decoded view of a snowflake identifier.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class SnowflakeRecord(BaseModel):
    """The four fields packed into a snowflake, plus the value itself."""

    snowflake_value: int = Field(
        ..., ge=0, lt=1 << 64, description="The original 64-bit snowflake value"
    )
    timestamp: int = Field(
        ..., description="Creation time in milliseconds since the Unix epoch"
    )
    worker_id: int = Field(..., ge=0, le=31, description="Encoded worker identifier")
    process_id: int = Field(..., ge=0, le=31, description="Encoded process identifier")
    sequence: int = Field(
        ..., ge=0, le=4095, description="Per-millisecond sequence counter"
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "snowflake_value": 175928847299117063,
                "timestamp": 1462015105796,
                "worker_id": 1,
                "process_id": 0,
                "sequence": 7,
            }
        },
    )

    @property
    def snowflake(self) -> str:
        """Decimal text form of the value."""
        return str(self.snowflake_value)

    @property
    def created_at(self) -> datetime:
        """Creation time as an aware UTC datetime."""
        return _UNIX_EPOCH + timedelta(milliseconds=self.timestamp)

    def to_dict(self) -> Dict[str, Any]:
        """Serializable mapping; the 64-bit value travels as text."""
        return {
            "snowflake": self.snowflake,
            "timestamp": self.timestamp,
            "worker_id": self.worker_id,
            "process_id": self.process_id,
            "sequence": self.sequence,
        }

    def __str__(self) -> str:
        return self.snowflake

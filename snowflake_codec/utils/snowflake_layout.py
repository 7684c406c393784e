"""
Snowflake Bit Layout

Field widths, shifts and masks of the 64-bit snowflake, and the pure
pack/unpack functions built on them.

    timestamp delta | worker id | process id | sequence
    42 bits         | 5 bits    | 5 bits     | 12 bits
"""

from snowflake_codec.core.error_codes import ValidationErrorCode
from snowflake_codec.core.exceptions import (
    TimestampOutOfRangeException,
    ValidationException,
)
from snowflake_codec.models.snowflake_record import SnowflakeRecord

# 2015-01-01T00:00:00Z in milliseconds
EPOCH = 1420070400000

TIMESTAMP_BITS = 42
WORKER_ID_BITS = 5
PROCESS_ID_BITS = 5
SEQUENCE_BITS = 12

PROCESS_SHIFT = SEQUENCE_BITS
WORKER_SHIFT = SEQUENCE_BITS + PROCESS_ID_BITS
TIME_SHIFT = SEQUENCE_BITS + PROCESS_ID_BITS + WORKER_ID_BITS

WORKER_MASK = 0x3E0000
PROCESS_MASK = 0x1F000
SEQUENCE_MASK = 0xFFF

# worker and process ids are reduced modulo this value
IDENTITY_LIMIT = 1 << WORKER_ID_BITS

MAX_SEQUENCE = SEQUENCE_MASK
MAX_TIMESTAMP_DELTA = (1 << TIMESTAMP_BITS) - 1
MAX_SNOWFLAKE = (1 << 64) - 1

# Largest integer an IEEE-754 double holds exactly; anything at or below it
# is too small to be a genuine snowflake.
MAX_SAFE_INTEGER = (1 << 53) - 1


def pack_snowflake(
    timestamp_ms: int, worker_id: int, process_id: int, sequence: int
) -> int:
    """
    Pack the four fields into a snowflake value.

    Args:
        timestamp_ms: Milliseconds since the Unix epoch
        worker_id: Raw worker identifier, reduced modulo 32
        process_id: Raw process identifier, reduced modulo 32
        sequence: Counter value within the millisecond (0-4095)

    Returns:
        int: The packed 64-bit value

    Raises:
        TimestampOutOfRangeException: If the timestamp precedes EPOCH or
            overflows 42 bits
        ValidationException: If the sequence or an identity is out of range
    """
    delta = timestamp_ms - EPOCH
    if delta < 0 or delta > MAX_TIMESTAMP_DELTA:
        raise TimestampOutOfRangeException(
            "Timestamp does not fit the 42-bit snowflake range",
            details={"timestamp": timestamp_ms, "epoch": EPOCH},
        )
    if not 0 <= sequence <= MAX_SEQUENCE:
        raise ValidationException(
            "Sequence must be between 0 and 4095",
            ValidationErrorCode.VALUE_OUT_OF_RANGE,
            details={"sequence": sequence},
        )
    if worker_id < 0 or process_id < 0:
        raise ValidationException(
            "Worker and process ids must be non-negative",
            ValidationErrorCode.VALUE_OUT_OF_RANGE,
            details={"worker_id": worker_id, "process_id": process_id},
        )

    return (
        (delta << TIME_SHIFT)
        | ((worker_id % IDENTITY_LIMIT) << WORKER_SHIFT)
        | ((process_id % IDENTITY_LIMIT) << PROCESS_SHIFT)
        | sequence
    )


def unpack_snowflake(value: int) -> SnowflakeRecord:
    """Split a snowflake value into its fields."""
    return SnowflakeRecord(
        snowflake_value=value,
        timestamp=(value >> TIME_SHIFT) + EPOCH,
        worker_id=(value & WORKER_MASK) >> WORKER_SHIFT,
        process_id=(value & PROCESS_MASK) >> PROCESS_SHIFT,
        sequence=value & SEQUENCE_MASK,
    )

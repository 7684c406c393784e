from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

import snowflake_codec
from snowflake_codec.core.exceptions import (
    InvalidFormatException,
    InvalidInputTypeException,
    ValidationException,
)
from snowflake_codec.utils.snowflake_layout import (
    EPOCH,
    MAX_SAFE_INTEGER,
    MAX_SNOWFLAKE,
    pack_snowflake,
    unpack_snowflake,
)
from snowflake_codec.utils.snowflake_parser import construct_snowflake, parse_snowflake


def test_parse_known_snowflake():
    record = parse_snowflake("175928847299117063")

    assert record.snowflake_value == 175928847299117063
    assert record.timestamp == 1462015105796
    assert record.worker_id == 1
    assert record.process_id == 0
    assert record.sequence == 7


def test_parse_is_inverse_of_pack():
    value = pack_snowflake(1_700_000_000_000, 17, 30, 4095)

    record = parse_snowflake(str(value))

    assert record.timestamp == 1_700_000_000_000
    assert (record.worker_id, record.process_id, record.sequence) == (17, 30, 4095)


def test_parse_ignores_surrounding_whitespace():
    assert parse_snowflake(" 175928847299117063\n").sequence == 7


def test_parse_rejects_non_string():
    with pytest.raises(InvalidInputTypeException) as exc_info:
        parse_snowflake(123)

    assert isinstance(exc_info.value, TypeError)
    assert exc_info.value.details == {"type": "int"}


@pytest.mark.parametrize(
    "text", ["abc", "", "   ", "-175928847299117063", "1.5e20", "0x1F000", "١٢٣"]
)
def test_parse_rejects_non_decimal_text(text):
    with pytest.raises(InvalidFormatException):
        parse_snowflake(text)


@pytest.mark.parametrize("text", ["42", "4329472", str(MAX_SAFE_INTEGER)])
def test_parse_rejects_values_in_safe_integer_range(text):
    with pytest.raises(InvalidFormatException) as exc_info:
        parse_snowflake(text)

    assert exc_info.value.details["minimum"] == MAX_SAFE_INTEGER + 1


def test_parse_accepts_boundaries():
    assert parse_snowflake(str(MAX_SAFE_INTEGER + 1)).snowflake_value == 1 << 53
    assert parse_snowflake(str(MAX_SNOWFLAKE)).sequence == 4095


def test_parse_rejects_values_wider_than_64_bits():
    with pytest.raises(InvalidFormatException):
        parse_snowflake(str(MAX_SNOWFLAKE + 1))


def test_parse_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_snowflake("abc")


def test_construct_parses_given_text():
    assert construct_snowflake("175928847299117063").timestamp == 1462015105796


def test_package_level_operations():
    text = snowflake_codec.generate()

    assert snowflake_codec.parse(text) == snowflake_codec.construct(text)


def test_pack_bit_exact_example():
    assert pack_snowflake(EPOCH + 1, 1, 1, 0) == 4329472


def test_pack_rejects_out_of_range_fields():
    with pytest.raises(ValidationException):
        pack_snowflake(EPOCH, 0, 0, 4096)
    with pytest.raises(ValidationException):
        pack_snowflake(EPOCH, -1, 0, 0)


def test_record_helpers():
    record = unpack_snowflake(pack_snowflake(EPOCH, 0, 0, 0))

    assert record.created_at == datetime(2015, 1, 1, tzinfo=timezone.utc)
    assert str(record) == "0"
    assert record.to_dict() == {
        "snowflake": "0",
        "timestamp": EPOCH,
        "worker_id": 0,
        "process_id": 0,
        "sequence": 0,
    }


def test_record_is_immutable():
    record = parse_snowflake("175928847299117063")

    with pytest.raises(ValidationError):
        record.sequence = 1


@pytest.mark.parametrize(
    "text", ["1" * 5000, "9" * 21, "0" * 5000 + "1" * 21, str(MAX_SNOWFLAKE) + "0"]
)
def test_parse_rejects_overlong_digit_strings(text):
    with pytest.raises(InvalidFormatException) as exc_info:
        parse_snowflake(text)

    assert exc_info.value.details["maximum_digits"] == 20


def test_parse_accepts_leading_zeros():
    record = parse_snowflake("0" * 5000 + "175928847299117063")

    assert record.snowflake_value == 175928847299117063


def test_created_at_keeps_millisecond_precision():
    record = parse_snowflake("175928847299117063")

    assert record.created_at == datetime(
        2016, 4, 30, 11, 18, 25, 796000, tzinfo=timezone.utc
    )

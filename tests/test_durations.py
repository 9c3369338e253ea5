# --------------------------------------------------
# test_durations.py
# --------------------------------------------------
# Purpose:
#   Validate the typed value parsers used by config.load().
#
# Expectations:
#   - parse_int accepts only [+-]digits within int64
#   - parse_duration accepts composed "<number><unit>" tokens
#   - Anything else raises ValueError
# --------------------------------------------------

from datetime import timedelta

import pytest

from dbconfig.durations import INT64_MAX, parse_duration, parse_duration_ns, parse_int


@pytest.mark.parametrize(
    "literal, expected",
    [
        ("45m", timedelta(minutes=45)),
        ("1h", timedelta(hours=1)),
        ("1h30m", timedelta(hours=1, minutes=30)),
        ("2h45m30s", timedelta(hours=2, minutes=45, seconds=30)),
        ("1.5h", timedelta(minutes=90)),
        (".5s", timedelta(milliseconds=500)),
        ("1.s", timedelta(seconds=1)),
        ("300ms", timedelta(milliseconds=300)),
        ("10us", timedelta(microseconds=10)),
        ("10µs", timedelta(microseconds=10)),
        ("10μs", timedelta(microseconds=10)),
        ("-2s", timedelta(seconds=-2)),
        ("+3m", timedelta(minutes=3)),
        ("0", timedelta(0)),
        ("-0", timedelta(0)),
        ("0s", timedelta(0)),
        ("-9223372036854775808ns", -timedelta(microseconds=9223372036854775)),
    ],
)
def test_parse_duration_valid(literal, expected):
    assert parse_duration(literal) == expected


@pytest.mark.parametrize(
    "literal",
    ["", "invalid", "30", "-", ".", "1x", "1h 30m", "h", "1h-30m", "00", "1..5s", "9223372036854775808ns"],
)
def test_parse_duration_invalid(literal):
    with pytest.raises(ValueError):
        parse_duration(literal)


def test_parse_duration_truncates_nanoseconds():
    """
    Sub-microsecond precision is dropped toward zero.
    """
    assert parse_duration_ns("1500ns") == 1500
    assert parse_duration("1500ns") == timedelta(microseconds=1)
    assert parse_duration("-1500ns") == timedelta(microseconds=-1)


def test_parse_duration_overflow():
    """
    Durations beyond the signed 64-bit nanosecond range fail.
    """
    assert parse_duration_ns("2562047h") < INT64_MAX
    with pytest.raises(ValueError):
        parse_duration("2562048h")


@pytest.mark.parametrize(
    "literal, expected",
    [("0", 0), ("8080", 8080), ("+5", 5), ("-1", -1), ("007", 7)],
)
def test_parse_int_valid(literal, expected):
    assert parse_int(literal) == expected


@pytest.mark.parametrize(
    "literal",
    ["", "abc", "1.0", " 1", "1 ", "1_000", "0x10", "+", "١٢", str(INT64_MAX + 1)],
)
def test_parse_int_invalid(literal):
    with pytest.raises(ValueError):
        parse_int(literal)


def test_parse_duration_signed_range_bounds():
    """
    The most negative int64 nanosecond count is valid; its positive mirror is not.
    """
    assert parse_duration_ns("-9223372036854775808ns") == -(1 << 63)
    assert parse_duration_ns("9223372036854775807ns") == INT64_MAX
    with pytest.raises(ValueError):
        parse_duration_ns("9223372036854775808ns")

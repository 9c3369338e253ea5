# --------------------------------------------------
# durations.py
# --------------------------------------------------
# Parsers for the typed environment values:
#
#   parse_int       strict base-10 signed 64-bit integers ("8080", "-1")
#   parse_duration  composed duration literals ("45m", "1h30m", "1.5s")
#
# Both raise ValueError on malformed input. Fallback to
# defaults happens in config.lookup(), never here.
# --------------------------------------------------

import re
from datetime import timedelta

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")

# One "<number><unit>" token. Unit is everything up to the next digit or dot.
_TOKEN_RE = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")

# Nanoseconds per unit
UNITS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # greek small letter mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 60 * 60 * 1_000_000_000,
}


def parse_int(value: str) -> int:
    """
    Parse a base-10 integer with an optional sign.

    Whitespace, underscores and non-ASCII digits are rejected,
    unlike int(). Values outside the signed 64-bit range fail.
    """
    if not _INT_RE.fullmatch(value):
        raise ValueError(f"invalid integer {value!r}")

    number = int(value)
    if number < INT64_MIN or number > INT64_MAX:
        raise ValueError(f"integer out of range {value!r}")
    return number


def parse_duration_ns(value: str) -> int:
    """
    Parse a duration literal into a signed count of nanoseconds.

    Grammar:
        [sign] ( "0" | token+ )
        token  = number unit
        number = digits [ "." digits* ] | "." digits
        unit   = ns | us | µs | μs | ms | s | m | h
    """
    orig = value
    negative = False

    if value and value[0] in "+-":
        negative = value[0] == "-"
        value = value[1:]

    # Bare zero needs no unit
    if value == "0":
        return 0
    if not value:
        raise ValueError(f"invalid duration {orig!r}")

    # -2^63 ns is representable, +2^63 ns is not
    limit = INT64_MAX + 1 if negative else INT64_MAX

    total = 0
    pos = 0
    while pos < len(value):
        match = _TOKEN_RE.match(value, pos)
        whole, frac, unit = match.group(1), match.group(2), match.group(3)

        if not whole and not frac:
            raise ValueError(f"invalid duration {orig!r}")
        if not unit:
            raise ValueError(f"missing unit in duration {orig!r}")
        if unit not in UNITS:
            raise ValueError(f"unknown unit {unit!r} in duration {orig!r}")

        scale = UNITS[unit]
        amount = int(whole or "0") * scale
        if frac:
            amount += int(frac) * scale // (10 ** len(frac))

        total += amount
        if total > limit:
            raise ValueError(f"invalid duration {orig!r}")

        pos = match.end()

    return -total if negative else total


def parse_duration(value: str) -> timedelta:
    """
    Parse a duration literal such as "45m" or "1h30m" into a timedelta.

    Precision below one microsecond is truncated toward zero.
    """
    ns = parse_duration_ns(value)
    magnitude = timedelta(microseconds=abs(ns) // 1_000)
    return -magnitude if ns < 0 else magnitude

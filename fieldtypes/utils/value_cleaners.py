# ABOUTME: Raw cell value helpers for field type detection
# ABOUTME: Recognizes absent values and coerces numbers and numeric strings

import math
import re

# Plain decimal or scientific notation, optional sign and surrounding whitespace
NUMERIC_STRING_PATTERN = re.compile(
    r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*",
    re.ASCII,
)


def is_absent(value) -> bool:
    """
    Check whether a raw cell value counts as missing.

    Examples:
        None -> True
        "" -> True
        float("nan") -> True
        0 -> False
        " " -> False
    """
    if value is None or value == "":
        return True

    if isinstance(value, float) and math.isnan(value):
        return True

    return False


def drop_absent(values) -> list:
    """Return the non-absent values, preserving their original order."""
    return [v for v in values if not is_absent(v)]


def is_number(value) -> bool:
    """True for int and float values. Booleans are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_numeric(value) -> bool:
    """
    Check whether a value is a number or text that reads as one.

    Examples:
        42 -> True
        "12.5" -> True
        " 7 " -> True
        "1,250" -> False
        "2023-01-15" -> False
    """
    if is_number(value):
        return True

    if isinstance(value, str):
        return NUMERIC_STRING_PATTERN.fullmatch(value) is not None

    return False


def to_number(value):
    """
    Coerce a numeric value to int or float.

    Integral text becomes int so that "7" and 7 behave the same way
    in the integer checks.

    Examples:
        "7" -> 7
        "7.0" -> 7.0
        "1e3" -> 1000.0
        12.5 -> 12.5
        "abc" -> None
    """
    if is_number(value):
        return value

    if not is_numeric(value):
        return None

    value_str = value.strip()
    try:
        return int(value_str)
    except ValueError:
        return float(value_str)


def is_integral(number) -> bool:
    """True when a number has no fractional part."""
    if isinstance(number, int):
        return True
    return math.isfinite(number) and number.is_integer()

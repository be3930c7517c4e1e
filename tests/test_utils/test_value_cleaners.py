# ABOUTME: Tests for raw cell value helpers
# ABOUTME: Validates absent value detection and numeric coercion

import math

import pytest


def test_is_absent_recognizes_missing_values():
    """None, empty strings, and NaN are absent; other values are present."""
    from fieldtypes.utils.value_cleaners import is_absent

    assert is_absent(None) is True
    assert is_absent("") is True
    assert is_absent(float("nan")) is True

    # Falsy but present
    assert is_absent(0) is False
    assert is_absent(0.0) is False
    assert is_absent(" ") is False
    assert is_absent("0") is False


def test_drop_absent_preserves_order():
    """Absent values are removed without reordering the rest."""
    from fieldtypes.utils.value_cleaners import drop_absent

    assert drop_absent(["b", None, "a", "", 3, float("nan"), 0]) == ["b", "a", 3, 0]
    assert drop_absent([]) == []
    assert drop_absent([None, ""]) == []


def test_is_numeric_accepts_numbers_and_numeric_text():
    """Numbers and strings that read as numbers are numeric."""
    from fieldtypes.utils.value_cleaners import is_numeric

    assert is_numeric(42) is True
    assert is_numeric(12.5) is True
    assert is_numeric("12.5") is True
    assert is_numeric("-3") is True
    assert is_numeric(" 7 ") is True
    assert is_numeric("1e3") is True
    assert is_numeric(".5") is True


def test_is_numeric_rejects_other_values():
    """Formatted numbers, dates, words, and booleans are not numeric."""
    from fieldtypes.utils.value_cleaners import is_numeric

    assert is_numeric("1,250") is False
    assert is_numeric("2023-01-15") is False
    assert is_numeric("abc") is False
    assert is_numeric("nan") is False
    assert is_numeric("1_000") is False
    assert is_numeric(True) is False
    assert is_numeric(None) is False


def test_to_number_coerces_text():
    """Integral text becomes int, other numeric text becomes float."""
    from fieldtypes.utils.value_cleaners import to_number

    assert to_number("7") == 7
    assert isinstance(to_number("7"), int)
    assert to_number(" 12 ") == 12
    assert to_number("7.0") == 7.0
    assert isinstance(to_number("7.0"), float)
    assert to_number("1e3") == 1000.0

    # Numbers pass through
    assert to_number(12.5) == 12.5
    assert to_number(3) == 3

    # Non-numeric text
    assert to_number("abc") is None


@pytest.mark.parametrize("number,expected", [
    (3, True),
    (3.0, True),
    (3.5, False),
    (-2.0, True),
    (math.inf, False),
])
def test_is_integral(number, expected):
    """Only numbers without a fractional part are integral."""
    from fieldtypes.utils.value_cleaners import is_integral

    assert is_integral(number) is expected

import pytest

from pushswap.numbers import (
    INT_MAX,
    INT_MIN,
    LONG_MAX,
    LONG_MIN,
    atoi,
    atol,
    is_digit,
    is_num_str,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("+5", 5),
        ("-17", -17),
        (" \t\n-17", -17),
        ("12abc", 12),
        ("", 0),
        ("abc", 0),
        ("-", 0),
    ],
)
def test_atol_basic(text, expected):
    assert atol(text) == expected


def test_atol_limits():
    assert atol("9223372036854775807") == LONG_MAX
    assert atol("-9223372036854775808") == LONG_MIN


@pytest.mark.parametrize(
    "text, expected",
    [
        ("9223372036854775808", LONG_MAX),
        ("99999999999999999999", LONG_MAX),
        ("-99999999999999999999", LONG_MIN),
    ],
)
def test_atol_overflow_saturates(text, expected):
    assert atol(text) == expected


@pytest.mark.parametrize("value", [0, 1, -1, 123456, -987654, INT_MAX, INT_MIN])
def test_atol_and_atoi_round_trip_int_range(value):
    assert atol(str(value)) == value
    assert atoi(str(value)) == value


def test_atol_round_trip_beyond_int_range():
    value = INT_MAX + 10
    assert atol(str(value)) == value
    assert atol(str(-value)) == -value


def test_atoi_truncates_to_32_bits():
    assert atoi(str(INT_MAX + 1)) == INT_MIN


def test_atoi_long_overflow():
    assert atoi("99999999999999999999") == -1
    assert atoi("-99999999999999999999") == 0


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi("  +77x9") == 77
    assert atoi("") == 0


@pytest.mark.parametrize("char", list("0123456789"))
def test_is_digit_true(char):
    assert is_digit(char) is True


@pytest.mark.parametrize("char", ["a", "/", ":", " ", "", "12", "-"])
def test_is_digit_false(char):
    assert is_digit(char) is False


@pytest.mark.parametrize("text", ["123", "-1", "+0", "007"])
def test_is_num_str_true(text):
    assert is_num_str(text) is True


@pytest.mark.parametrize("text", ["", "-", "+", "1a", "--1", " 1", "1 ", "+-2"])
def test_is_num_str_false(text):
    assert is_num_str(text) is False
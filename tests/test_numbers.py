import pytest

from minishparse.numbers import INT_MAX, INT_MIN, format_int, parse_int


@pytest.mark.parametrize("value", [0, 5, -1122, 42, -42, INT_MAX, INT_MIN, 1000000])
def test_round_trip(value):
    assert parse_int(format_int(value)) == value


def test_format_int_min():
    assert format_int(-2147483648) == "-2147483648"


def test_format_zero_and_small():
    assert format_int(0) == "0"
    assert format_int(5) == "5"


def test_format_negative_has_single_minus():
    text = format_int(-1122)
    assert text.startswith("-")
    assert text.count("-") == 1
    assert text[1:] == format_int(1122)


def test_format_out_of_range_rejected():
    with pytest.raises(OverflowError):
        format_int(INT_MAX + 1)
    with pytest.raises(OverflowError):
        format_int(INT_MIN - 1)


def test_format_non_integer_rejected():
    with pytest.raises(TypeError):
        format_int("12")


def test_parse_skips_leading_whitespace():
    assert parse_int(" \t\n\v\f\r 123") == 123


def test_parse_stops_at_non_digit():
    assert parse_int("-42abc") == -42
    assert parse_int("17 18") == 17


def test_parse_plus_sign():
    assert parse_int("+7") == 7


def test_parse_only_one_sign():
    assert parse_int("+-5") == 0
    assert parse_int("--5") == 0


def test_parse_without_digits_is_zero():
    assert parse_int("") == 0
    assert parse_int("abc") == 0
    assert parse_int("   ") == 0


def test_parse_space_after_sign_stops():
    assert parse_int("- 5") == 0


def test_parse_beyond_long_range_positive():
    assert parse_int("9223372036854775808") == -1


def test_parse_beyond_long_range_negative():
    assert parse_int("-9223372036854775808") == 0


def test_parse_int_bounds():
    assert parse_int("2147483647") == INT_MAX
    assert parse_int("-2147483648") == INT_MIN


def test_parse_wraps_to_32_bits():
    assert parse_int("2147483648") == INT_MIN
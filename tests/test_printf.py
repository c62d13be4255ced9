import pytest

from solong.printf import (
    FormatError,
    format_int,
    format_pointer,
    format_str,
    format_unsigned,
    printf,
    sprintf,
)


def test_null_pointer_is_nil():
    assert format_pointer(0) == "(nil)"
    assert format_pointer(None) == "(nil)"


@pytest.mark.parametrize("value", [1, 9, 10, 15, 16, 255, 0xDEADBEEF, 2**63])
def test_pointer_round_trip(value):
    text = format_pointer(value)
    assert text.startswith("0x")
    assert text == text.lower()
    assert int(text, 16) == value


@pytest.mark.parametrize("value", [0, 7, 10, 4096, 123456789])
def test_unsigned_decimal_matches_input(value):
    assert format_unsigned(value, "u") == str(value)


def test_unsigned_wraps_negative():
    assert format_unsigned(-1, "u") == "4294967295"


@pytest.mark.parametrize("value", [0, 10, 255, 65535, 3000000000])
def test_hex_round_trip_and_case(value):
    lower = format_unsigned(value, "x")
    upper = format_unsigned(value, "X")
    assert int(lower, 16) == value
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_unsigned_rejects_bad_conversion():
    with pytest.raises(FormatError):
        format_unsigned(5, "o")


@pytest.mark.parametrize("value", [0, 1, -1, 42, -2147483648, 2147483647])
def test_int_in_range(value):
    assert format_int(value) == str(value)


def test_int_wraps_to_32_bits():
    assert format_int(2**31) == "-2147483648"


def test_str_and_null():
    assert format_str("hello") == "hello"
    assert format_str(None) == "(null)"


def test_sprintf_moves_line():
    assert sprintf("Moves:%d\n", 3) == "Moves:3\n"


def test_sprintf_mixed_conversions():
    result = sprintf("%c%s %i %% %u", "a", "bc", -5, 6)
    assert result == "abc -5 % 6"


def test_sprintf_char_from_int():
    assert sprintf("%c", ord("Z")) == "Z"


def test_sprintf_null_string_and_pointer():
    assert sprintf("%s %p", None, 0) == "(null) (nil)"


def test_sprintf_unknown_conversion():
    with pytest.raises(FormatError):
        sprintf("%q", 1)


def test_sprintf_trailing_percent():
    with pytest.raises(FormatError):
        sprintf("abc%")


def test_sprintf_missing_argument():
    with pytest.raises(FormatError):
        sprintf("%d %d", 1)


def test_printf_writes_and_counts(capsys):
    count = printf("GG!%s\n", "?")
    out = capsys.readouterr().out
    assert out == "GG!?\n"
    assert count == len(out)


def test_printf_count_for_nil(capsys):
    count = printf("%p", 0)
    assert capsys.readouterr().out == "(nil)"
    assert count == len("(nil)")
import pytest

from pipex.formatting import format_printf, printf


def test_empty_format_gives_empty_text():
    assert format_printf("") == ""
    assert format_printf(None) == ""


def test_plain_text_passes_through():
    assert format_printf("hello world\n") == "hello world\n"


def test_percent_escape():
    assert format_printf("100%%") == "100%"


def test_unknown_conversion_is_dropped():
    assert format_printf("a%qb") == "ab"


def test_trailing_percent_produces_nothing():
    assert format_printf("abc%") == "abc"


def test_string_conversion():
    assert format_printf("[%s]", "text") == "[text]"


def test_null_string():
    assert format_printf("%s", None) == "(null)"


@pytest.mark.parametrize("value", [0, None])
def test_null_pointer(value):
    assert format_printf("%p", value) == "(nil)"


@pytest.mark.parametrize("address", [1, 0xDEADBEEF, 2**64 - 1])
def test_pointer_round_trip(address):
    out = format_printf("%p", address)
    assert out.startswith("0x")
    assert int(out[2:], 16) == address
    assert out == out.lower()


@pytest.mark.parametrize("value", [0, 7, -42, 2**31 - 1, -(2**31)])
def test_decimal_round_trip(value):
    assert int(format_printf("%d", value)) == value
    assert format_printf("%i", value) == format_printf("%d", value)


def test_decimal_minimum():
    assert format_printf("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_32_bits():
    assert format_printf("%d", 2**31) == "-2147483648"


def test_unsigned_wraps_negative():
    assert int(format_printf("%u", -1)) == 2**32 - 1
    assert int(format_printf("%u", 12345)) == 12345


@pytest.mark.parametrize("value", [0, 10, 255, 2**32 - 1])
def test_hex_round_trip_and_case(value):
    lower = format_printf("%x", value)
    upper = format_printf("%X", value)
    assert int(lower, 16) == value
    assert int(upper, 16) == value
    assert lower == lower.lower()
    assert upper == upper.upper()


def test_hex_negative_wraps():
    assert int(format_printf("%x", -1), 16) == 2**32 - 1


def test_char_conversion():
    assert format_printf("%c", "A") == "A"
    assert ord(format_printf("%c", 65)) == 65
    assert ord(format_printf("%c", 256 + 66)) == 66


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_printf("%c", "ab")


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_extra_arguments_ignored():
    assert format_printf("x", 1, 2) == "x"


def test_mixed_conversions_keep_order():
    out = format_printf("%s=%d%%", "n", 5)
    assert out == "n=5%"


def test_printf_writes_and_counts_bytes(capsys):
    count = printf("%s:%d\n", "héllo", -3)
    out = capsys.readouterr().out
    assert out == format_printf("%s:%d\n", "héllo", -3)
    assert count == len(out.encode("utf-8"))


def test_printf_empty_writes_nothing(capsys):
    assert printf("") == 0
    assert capsys.readouterr().out == ""
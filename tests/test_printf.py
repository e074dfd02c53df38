import io

import pytest

from ftkit.printf import Conversion, printf, sprintf


def test_plain_text_passes_through():
    assert sprintf("hello world") == "hello world"


def test_empty_format():
    assert sprintf("") == ""


def test_char_from_int_and_str():
    assert sprintf("%c%c", ord("A"), "b") == "Ab"


def test_char_uses_low_byte():
    assert sprintf("%c", 256 + ord("z")) == "z"


def test_string_conversion():
    assert sprintf("[%s]", "abc") == "[abc]"


def test_null_string():
    assert sprintf("%s", None) == "(null)"


def test_string_stops_at_terminator():
    assert sprintf("%s", "ab\0cd") == "ab"


def test_null_pointer():
    assert sprintf("%p", None) == "(nil)"
    assert sprintf("%p", 0) == "(nil)"


def test_pointer_is_hex_with_prefix():
    out = sprintf("%p", 48879)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 48879
    assert out[2:] == out[2:].lower()


@pytest.mark.parametrize("n", [0, 7, -7, 2**31 - 1, -(2**31)])
def test_decimal_and_integer_round_trip(n):
    assert sprintf("%d", n) == str(n)
    assert sprintf("%i", n) == str(n)


def test_decimal_wraps_like_c_int():
    assert int(sprintf("%d", 2**31)) == -(2**31)


def test_unsigned_wraps_negative():
    assert int(sprintf("%u", -1)) == 2**32 - 1
    assert sprintf("%u", 42) == "42"


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 4096, 2**32 - 1])
def test_hex_round_trip(n):
    low = sprintf("%x", n)
    up = sprintf("%X", n)
    assert int(low, 16) == n
    assert int(up, 16) == n
    assert low == low.lower()
    assert up == up.upper()
    assert low.upper() == up


def test_hex_pinned():
    assert sprintf("%x %X", 255, 255) == "ff FF"


def test_double_percent():
    assert sprintf("100%%") == "100%"


def test_percent_does_not_consume_argument():
    assert sprintf("%%%d", 5) == "%5"


def test_unknown_conversion_prints_percent_and_skips_letter():
    assert sprintf("a%qb") == "a%b"


def test_trailing_percent():
    assert sprintf("end%") == "end%"


def test_mixed_format():
    assert sprintf("%s=%d (%c)", "x", -3, "y") == "x=-3 (y)"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d")


def test_non_integer_for_decimal_raises():
    with pytest.raises(TypeError):
        sprintf("%d", "12")


def test_non_string_for_s_raises():
    with pytest.raises(TypeError):
        sprintf("%s", 12)


def test_extra_arguments_are_ignored():
    assert sprintf("%d", 1, 2, 3) == "1"


def test_printf_writes_to_stream_and_counts():
    stream = io.StringIO()
    count = printf("%s-%d%%", "ab", 12, stream=stream)
    assert stream.getvalue() == "ab-12%"
    assert count == len(stream.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s", "out")
    assert capsys.readouterr().out == "out"
    assert count == 3


def test_conversion_lookup():
    assert Conversion.lookup("x") is Conversion.LOWER_HEX
    assert Conversion.lookup("X") is Conversion.UPPER_HEX
    assert Conversion.lookup("q") is None
    assert Conversion.lookup(None) is None


def test_only_percent_takes_no_argument():
    letters = "cspdiuxX%"
    without_argument = [
        letter for letter in letters if not Conversion.lookup(letter).takes_argument
    ]
    assert without_argument == ["%"]
    assert sprintf("%%") == "%"
import io

import pytest

from xvtools.fmt import format_message, fprintf, printf


def test_decimal_arguments():
    assert format_message("%d %d\n", 12, 13) == "12 13\n"
    assert format_message("%d", -1) == "-1"


def test_hex_is_uppercase():
    assert format_message("%x", 255) == "FF"


def test_negative_hex_is_unsigned_32_bit():
    assert format_message("%x", -1) == "FFFFFFFF"


def test_pointer_is_zero_padded():
    assert format_message("%p", 0) == "0x0000000000000000"


@pytest.mark.parametrize("value", [0, 1, 0xDEADBEEF, (1 << 64) - 1, 0x80000000])
def test_pointer_round_trip(value):
    text = format_message("%p", value)
    assert text.startswith("0x")
    assert len(text) == 18
    assert int(text[2:], 16) == value


@pytest.mark.parametrize("value", [0, 9, 10, 4096, 65535, 2**31 - 1])
def test_hex_and_decimal_round_trip(value):
    assert int(format_message("%x", value), 16) == value
    assert int(format_message("%d", value)) == value
    assert int(format_message("%l", value)) == value


def test_strings_and_null():
    assert format_message("[%s]", "abc") == "[abc]"
    assert format_message("%s", None) == "(null)"


def test_character_and_percent():
    assert format_message("%c%c", 65, 66) == "AB"
    assert format_message("100%%") == "100%"


def test_unknown_conversion_is_echoed():
    assert format_message("%q") == "%q"


def test_trailing_percent_prints_nothing():
    assert format_message("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_message("%d %d", 1)


def test_fprintf_writes_to_stream():
    stream = io.StringIO()
    fprintf(stream, "%s: %d\n", "count", 3)
    assert stream.getvalue() == "count: 3\n"


def test_printf_writes_to_stdout(capsys):
    printf("%d %d\n", 12, 13)
    assert capsys.readouterr().out == "12 13\n"
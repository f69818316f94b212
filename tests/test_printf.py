import os

import pytest

from ftping.printf import FormatError, format_text, printf_fd


def _read_all(fd):
    chunks = []
    while True:
        chunk = os.read(fd, 4096)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


def test_plain_text_passes_through():
    assert format_text("PING host") == "PING host"


def test_percent_escape():
    assert format_text("100%% loss") == "100% loss"


def test_string_conversion():
    assert format_text("ping: %s", "unknow host") == "ping: unknow host"


def test_null_string():
    assert format_text("%s", None) == "(null)"


def test_char_from_code_and_str():
    assert format_text("%c", ord("A")) == "A"
    assert format_text("%c", "z") == "z"


@pytest.mark.parametrize("n", [0, 7, -42, 123456, 2147483647, -2147483648])
def test_decimal_round_trip(n):
    assert int(format_text("%d", n)) == n
    assert format_text("%i", n) == format_text("%d", n)


def test_decimal_limits():
    assert format_text("%d", 2147483647) == "2147483647"
    assert format_text("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_32_bits():
    assert int(format_text("%d", 2**31)) == -(2**31)


def test_unsigned_wraps_negative():
    assert int(format_text("%u", -1)) == 2**32 - 1


def test_size_conversion_wraps_to_64_bits():
    assert int(format_text("%T", -1)) == 2**64 - 1
    assert int(format_text("%T", 987654321)) == 987654321


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 4096, -1, -255])
def test_hex_round_trip(n):
    text = format_text("%x", n)
    assert int(text, 16) == n & 0xFFFFFFFF
    assert text == text.lower()
    assert format_text("%X", n) == text.upper()


def test_null_pointer():
    assert format_text("%p", 0) == "(nil)"
    assert format_text("%p", None) == "(nil)"


def test_pointer_round_trip():
    text = format_text("%p", 0xDEADBEEF)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0xDEADBEEF


def test_unknown_conversion_kept():
    assert format_text("a%qb") == "a%qb"


def test_mixed_format():
    text = format_text("%s=%d (%c)", "seq", 3, "x")
    assert text == "seq=3 (x)"


def test_extra_arguments_ignored():
    assert format_text("%d", 5, 6, 7) == "5"


def test_trailing_percent_raises():
    with pytest.raises(FormatError):
        format_text("oops %")


def test_missing_format_raises():
    with pytest.raises(FormatError):
        format_text(None)


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        format_text("%d %d", 1)


def test_non_integer_argument_raises():
    with pytest.raises(FormatError):
        format_text("%d", "12")


def test_printf_fd_writes_and_counts():
    read_fd, write_fd = os.pipe()
    try:
        count = printf_fd(write_fd, "%s %d%%\n", "loss", 50)
    finally:
        os.close(write_fd)
    try:
        data = _read_all(read_fd)
    finally:
        os.close(read_fd)
    expected = format_text("%s %d%%\n", "loss", 50)
    assert data == expected.encode("utf-8")
    assert count == len(data)


def test_printf_fd_error_writes_nothing():
    read_fd, write_fd = os.pipe()
    try:
        with pytest.raises(FormatError):
            printf_fd(write_fd, "partial %")
    finally:
        os.close(write_fd)
    try:
        assert _read_all(read_fd) == b""
    finally:
        os.close(read_fd)
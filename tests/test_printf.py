import io

import pytest

from solong.printf import (
    format_pointer,
    format_printf,
    ft_printf,
    itoa,
    to_hex,
    unsigned_itoa,
)


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, -7, 42, 2147483647, -2147483647, 1000000])
def test_itoa_round_trip(n):
    assert int(itoa(n)) == n


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)


@pytest.mark.parametrize("n", [0, 9, 10, 4294967295])
def test_unsigned_itoa_round_trip(n):
    assert int(unsigned_itoa(n)) == n


def test_unsigned_itoa_rejects_negative():
    with pytest.raises(OverflowError):
        unsigned_itoa(-1)


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 4096, 3735928559])
def test_to_hex_round_trip(n):
    lower = to_hex(n)
    upper = to_hex(n, upper=True)
    assert int(lower, 16) == n
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_to_hex_rejects_negative():
    with pytest.raises(ValueError):
        to_hex(-1)


def test_pointer_null():
    assert format_pointer(None) == "0x0"
    assert format_pointer(0) == "0x0"


def test_pointer_prefix():
    text = format_pointer(4096)
    assert text.startswith("0x")
    assert int(text, 16) == 4096


def test_format_movements_line():
    assert format_printf("MOVEMENTS: %d\n", 12) == "MOVEMENTS: 12\n"


def test_format_null_string():
    assert format_printf("%s", None) == "(null)"


def test_format_mixed():
    out = format_printf("%c-%s-%i-%u-%%", "a", "bc", -3, 5)
    assert out == "a-bc--3-5-%"


def test_format_hex_zero_and_case():
    assert format_printf("%x", 0) == "0"
    assert format_printf("%X", 255) == format_printf("%x", 255).upper()


def test_format_negative_as_unsigned():
    assert int(format_printf("%u", -1)) == 2**32 - 1
    assert int(format_printf("%x", -1), 16) == 2**32 - 1


def test_format_int_wraps_to_32_bits():
    assert format_printf("%d", 2**31) == itoa(-(2**31))


def test_format_char_from_code():
    assert format_printf("%c", ord("Z")) == "Z"


def test_trailing_percent():
    assert format_printf("abc%") == "abc%"


def test_unknown_conversion():
    with pytest.raises(ValueError):
        format_printf("%q", 1)


def test_missing_argument():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_ft_printf_writes_and_counts():
    stream = io.StringIO()
    count = ft_printf("%s=%d\n", "moves", 3, stream=stream)
    assert stream.getvalue() == "moves=3\n"
    assert count == len(stream.getvalue())


def test_ft_printf_pointer_count():
    stream = io.StringIO()
    count = ft_printf("%p", None, stream=stream)
    assert stream.getvalue() == "0x0"
    assert count == 3
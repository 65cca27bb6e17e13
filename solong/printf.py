"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, TextIO

CONVERSIONS = "cspdiuxX%"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_UINT_MAX = 2**32 - 1
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"


def _to_int32(value: int) -> int:
    value &= _UINT_MAX
    return value - 2**32 if value > _INT_MAX else value


def _to_uint32(value: int) -> int:
    return value & _UINT_MAX


def itoa(n: int) -> str:
    """Return the decimal text of a signed 32-bit integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)


def unsigned_itoa(n: int) -> str:
    """Return the decimal text of an unsigned 32-bit integer."""
    if not 0 <= n <= _UINT_MAX:
        raise OverflowError(f"{n} does not fit in an unsigned 32-bit integer")
    return str(n)


def to_hex(n: int, upper: bool = False) -> str:
    """Return ``n`` in hexadecimal, without prefix or padding."""
    if n < 0:
        raise ValueError("to_hex takes a non-negative number")
    digits = _HEX_UPPER if upper else _HEX_LOWER
    if n == 0:
        return "0"
    out = []
    while n:
        n, rest = divmod(n, 16)
        out.append(digits[rest])
    return "".join(reversed(out))


def format_pointer(address: int | None) -> str:
    """Return an address as ``0x`` followed by lower-case hex; null is ``0x0``."""
    if not address:
        return "0x0"
    return "0x" + to_hex(address)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c takes a single character")
        return value
    return chr(value & 0xFF)


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return format_pointer(value)
    if spec in "di":
        return itoa(_to_int32(value))
    if spec == "u":
        return unsigned_itoa(_to_uint32(value))
    return to_hex(_to_uint32(value), upper=spec == "X")


def format_printf(text: str, *args: Any) -> str:
    """Return ``text`` with its conversions replaced by ``args`` in order."""
    pieces: list[str] = []
    values = iter(args)
    pos = 0
    length = len(text)
    while pos < length:
        percent = text.find("%", pos)
        if percent < 0:
            pieces.append(text[pos:])
            break
        pieces.append(text[pos:percent])
        if percent + 1 >= length:
            # A lone trailing percent sign is written as it is.
            pieces.append("%")
            break
        spec = text[percent + 1]
        if spec not in CONVERSIONS:
            raise ValueError(f"unsupported conversion %{spec}")
        if spec == "%":
            pieces.append("%")
        else:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            pieces.append(_convert(spec, value))
        pos = percent + 2
    return "".join(pieces)


def ft_printf(text: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default); return its length."""
    out = format_printf(text, *args)
    (stream if stream is not None else sys.stdout).write(out)
    return len(out)
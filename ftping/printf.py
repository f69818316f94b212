"""A small printf: formatting with %c %s %d %i %u %T %p %x %X and %%."""

from __future__ import annotations

import operator
from typing import Any, Iterator, Optional

from .output import putstr_fd

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"


class FormatError(ValueError):
    """The format string or its arguments cannot be rendered."""


def _as_int(value: Any, conversion: str) -> int:
    try:
        return operator.index(value)
    except TypeError as exc:
        raise FormatError(
            f"%{conversion} expects an integer, got {type(value).__name__}"
        ) from exc


def _wrap_signed(value: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return (value + half) % (1 << bits) - half


def _wrap_unsigned(value: int, bits: int) -> int:
    return value % (1 << bits)


def _in_base(value: int, digits: str) -> str:
    radix = len(digits)
    out = []
    while True:
        value, remainder = divmod(value, radix)
        out.append(digits[remainder])
        if not value:
            break
    return "".join(reversed(out))


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c expects a single character, got {len(value)}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise FormatError(f"missing argument for %{conversion}") from None
    if conversion == "c":
        return _char(value)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion in ("d", "i"):
        return str(_wrap_signed(_as_int(value, conversion), 32))
    if conversion == "T":
        return str(_wrap_unsigned(_as_int(value, conversion), 64))
    if conversion == "u":
        return str(_wrap_unsigned(_as_int(value, conversion), 32))
    if conversion == "p":
        address = 0 if value is None else _wrap_unsigned(_as_int(value, conversion), 64)
        if address == 0:
            return "(nil)"
        return "0x" + _in_base(address, _LOWER_HEX)
    if conversion == "x":
        return _in_base(_wrap_unsigned(_as_int(value, conversion), 32), _LOWER_HEX)
    return _in_base(_wrap_unsigned(_as_int(value, conversion), 32), _UPPER_HEX)


_CONVERSIONS = frozenset("cspdiuTxX%")


def format_text(fmt: Optional[str], *args: Any) -> str:
    """Render fmt with args.

    An unknown conversion is kept as written, the percent sign included.
    A missing format, a trailing lone percent sign or a missing argument
    raises FormatError.
    """
    if fmt is None:
        raise FormatError("no format string")
    remaining = iter(args)
    pieces = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conversion = next(chars, None)
        if conversion is None:
            raise FormatError("format ends with a lone '%'")
        if conversion in _CONVERSIONS:
            pieces.append(_convert(conversion, remaining))
        else:
            pieces.append("%" + conversion)
    return "".join(pieces)


def printf_fd(fd: int, fmt: Optional[str], *args: Any) -> int:
    """Render fmt with args, write it to fd and return the number of bytes written."""
    text = format_text(fmt, *args)
    putstr_fd(text, fd)
    return len(text.encode("utf-8"))
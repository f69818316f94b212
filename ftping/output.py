"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

from .strings import itoa

_ULONG_MAX = 2**64 - 1


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _check_base_number(n: int) -> None:
    if n < 0:
        raise ValueError(f"number must not be negative: {n}")
    if n > _ULONG_MAX:
        raise OverflowError(f"{n} does not fit in 64 bits")


def putchar_fd(c: Union[str, int], fd: int) -> None:
    """Write one character (or the low byte of an integer code) to fd."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        _write_all(fd, c.encode("utf-8"))
    else:
        _write_all(fd, bytes([c & 0xFF]))


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write s to fd; a missing string writes nothing."""
    if s is not None:
        _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write s followed by a newline to fd."""
    putstr_fd(s, fd)
    _write_all(fd, b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write a 32-bit signed integer in decimal to fd."""
    putstr_fd(itoa(n), fd)


def putnbr_base_fd(n: int, base: str, fd: int) -> None:
    """Write a non-negative integer to fd using the characters of base as digits."""
    _check_base_number(n)
    if len(base) < 2:
        raise ValueError("base needs at least two digit characters")
    radix = len(base)
    digits = []
    while True:
        n, remainder = divmod(n, radix)
        digits.append(base[remainder])
        if not n:
            break
    putstr_fd("".join(reversed(digits)), fd)


def addr_len(addr: int, base: int) -> int:
    """Return how many digits addr takes when written in the given base."""
    _check_base_number(addr)
    if base < 2:
        raise ValueError(f"base must be at least 2: {base}")
    length = 1
    while addr >= base:
        addr //= base
        length += 1
    return length
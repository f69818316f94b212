"""Byte-buffer operations: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional

_SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer of {len(buffer)} bytes")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with the low byte of value; return buffer."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    memset(buffer, 0, n)


def memcpy(dest: Optional[bytearray], src: Optional[bytes], n: int) -> Optional[bytearray]:
    """Copy the first n bytes of src to the start of dest; return dest."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("both dest and src must be buffers")
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy n bytes within buffer from src_offset to dest_offset, overlap allowed."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, buffer)
    if max(dest_offset, src_offset) + n > len(buffer):
        raise ValueError("range runs past the end of the buffer")
    buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to value within n bytes, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, or 0."""
    _check_count(n, first, second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of nmemb * size bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    total = nmemb * size
    if total > _SIZE_MAX:
        raise OverflowError(f"allocation of {nmemb} x {size} bytes overflows")
    return bytearray(total)
"""String helpers: measuring, copying, searching, converting and splitting text."""

from __future__ import annotations

import re
from itertools import takewhile, zip_longest
from typing import Callable, Iterable, MutableSequence, Optional, Union

CharLike = Union[int, str]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_ATOI_PATTERN = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _char_code(c: CharLike) -> int:
    """Return the byte value of c, truncated the way a char conversion does."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return ord(c)
    return c & 0xFF


def _wrap_int(value: int) -> int:
    """Reduce value to the 32-bit signed range by two's complement wrap-around."""
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(s)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most size - 1 characters of src.

    Returns the copied text and the full length of src, so a truncated copy
    shows as a length at least size.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst so that the result fits a buffer of size characters.

    Returns the resulting text and the length the full concatenation would
    have had, where dst counts for at most size characters.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if size == 0:
        return dst, len(src)
    kept = min(len(dst), size)
    if kept >= size:
        return dst, kept + len(src)
    return dst + src[: size - 1 - kept], kept + len(src)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first c in s, len(s) for the terminator, or None."""
    code = _char_code(c)
    if code == 0:
        return len(s)
    index = s.find(chr(code))
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last c in s, len(s) for the terminator, or None."""
    code = _char_code(c)
    if code == 0:
        return len(s)
    index = s.rfind(chr(code))
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the difference of the first unequal pair."""
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a == "\0" and b == "\0":
            break
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: Optional[str], little: Optional[str], length: int) -> Optional[int]:
    """Find little inside the first length characters of big; return its index or None."""
    if (big is None or little is None) and length == 0:
        return None
    if big is None or little is None:
        raise TypeError("both strings are required when length is not zero")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def atoi(s: str) -> int:
    """Parse a leading decimal integer after optional blanks and one sign.

    Anything unparsable gives 0; values beyond 32 bits wrap around.
    """
    match = _ATOI_PATTERN.match(s)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap_int(value)


def itoa(n: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def strdup(s: str) -> str:
    """Return a copy of s."""
    return "".join(s)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most length characters of s from start; empty if start is past the end."""
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if len(s) < start:
        return ""
    return s[start : start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; None if either is missing."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters found in charset from both ends of s."""
    if s is None or charset is None:
        return None
    return s.strip(charset)


def split(s: Optional[str], sep: str) -> list[str]:
    """Split s on sep, dropping the empty pieces between repeated separators."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {len(sep)}")
    if s is None:
        return []
    return [word for word in s.split(sep) if word]


def strmapi(s: Optional[str], f: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """Build a string from f(index, char) applied to every character of s."""
    if s is None or f is None:
        return None
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(
    s: Optional[MutableSequence[str]],
    f: Optional[Callable[[int, MutableSequence[str]], None]],
) -> None:
    """Call f(index, s) for every position of a mutable character sequence.

    f may change s[index] in place.
    """
    if s is None or f is None:
        return
    for index in range(len(s)):
        f(index, s)


def tab_len(items: Iterable[Optional[str]]) -> int:
    """Count the entries before the first None."""
    return sum(1 for _ in takewhile(lambda item: item is not None, items))
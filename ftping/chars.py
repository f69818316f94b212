"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
Only the ASCII ranges count: any other character is neither a letter nor a
digit, and case conversion leaves it unchanged.
"""

from __future__ import annotations

import operator
from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return ord(c)
    return operator.index(c)


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def isalpha(c: CharLike) -> bool:
    """Tell whether c is an ASCII letter."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def isdigit(c: CharLike) -> bool:
    """Tell whether c is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """Tell whether c is an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """Tell whether c lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """Tell whether c is a printable ASCII character, space included."""
    return 32 <= _code(c) < 127


def toupper(c: CharLike) -> CharLike:
    """Return the upper-case form of an ASCII lower-case letter, else c itself."""
    code = _code(c)
    if not _is_lower(code):
        return c
    upper = code - 32
    return chr(upper) if isinstance(c, str) else upper


def tolower(c: CharLike) -> CharLike:
    """Return the lower-case form of an ASCII upper-case letter, else c itself."""
    code = _code(c)
    if not _is_upper(code):
        return c
    lower = code + 32
    return chr(lower) if isinstance(c, str) else lower
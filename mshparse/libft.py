"""Small string and number helpers used by the shell parser."""

from __future__ import annotations

from itertools import zip_longest

_WHITESPACE = " \f\n\t\v\r"
_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)


def _to_int32(value: int) -> int:
    """Wrap a value to a signed 32-bit integer."""
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Convert the leading integer of ``text``, shell-status style.

    Leading whitespace is skipped, then any run of signs. Two signs in a row
    give 0. Digits are accumulated with saturation at the 64-bit limits and
    the result is narrowed to a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    while rest and rest[0] in "+-":
        if len(rest) > 1 and rest[1] in "+-":
            return 0
        if rest[0] == "-":
            negative = not negative
        rest = rest[1:]

    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)

    value = int("".join(digits)) if digits else 0
    if negative:
        value = max(-value, _LONG_MIN)
    else:
        value = min(value, _LONG_MAX)
    return _to_int32(value)


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    return str(n)


def is_name_char(c: str) -> bool:
    """Tell whether ``c`` is an ASCII letter, digit or '?'."""
    if len(c) != 1:
        return False
    return ("a" <= c <= "z") or ("A" <= c <= "Z") or ("0" <= c <= "9") or c == "?"


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, chars: str) -> str:
    """Remove characters found in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters.

    Returns the index of the match, or None when there is none.
    An empty needle matches at index 0.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the first code difference."""
    if n <= 0:
        return 0
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strchr(text: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for the NUL character yields the length of ``text``.
    """
    if c == "\0":
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for the NUL character yields the length of ``text``.
    """
    if c == "\0":
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index
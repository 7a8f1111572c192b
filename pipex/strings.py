"""String helpers used for command parsing and number conversion."""

from __future__ import annotations

import re
from itertools import chain, islice, repeat

__all__ = [
    "split",
    "strnstr",
    "atoi",
    "atol",
    "itoa",
    "strtrim",
    "substr",
    "strncmp",
    "strchr",
    "strrchr",
]

_INT_BITS = 32
_LONG_BITS = 64
_NUMBER_PREFIX = re.compile(r"[\t\n\x0b\x0c\r ]*([+-]?)([0-9]*)")


def _require_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's complement integer of ``bits`` bits."""
    half = 1 << (bits - 1)
    return (value + half) % (1 << bits) - half


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty parts."""
    _require_char(sep)
    return [part for part in text.split(sep) if part]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of ``needle`` lying wholly within the first ``length``
    characters of ``haystack``, or None when it does not occur there.

    An empty needle is always found at index 0.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def _parse_integer(text: str, bits: int) -> int:
    match = _NUMBER_PREFIX.match(text)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap(value, bits)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 32-bit signed value.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first character that is not an ASCII digit.
    """
    return _parse_integer(text, _INT_BITS)


def atol(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 64-bit signed value."""
    return _parse_integer(text, _LONG_BITS)


def itoa(number: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    low = -(1 << (_INT_BITS - 1))
    high = (1 << (_INT_BITS - 1)) - 1
    if not low <= number <= high:
        raise OverflowError(f"{number} does not fit in a 32-bit signed integer")
    return str(number)


def strtrim(text: str, chars: str) -> str:
    """Remove every character of ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``.

    A start at or past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def strncmp(first: str | bytes, second: str | bytes, count: int) -> int:
    """Compare at most ``count`` bytes of two strings.

    Returns the difference of the first pair of bytes that differ, or that
    meet the end of either string; 0 when the compared parts are equal.
    """
    left = chain(_as_bytes(first), repeat(0))
    right = chain(_as_bytes(second), repeat(0))
    for a, b in islice(zip(left, right), max(count, 0)):
        if a != b or a == 0:
            return a - b
    return 0


def strchr(text: str, char: str) -> int | None:
    """Return the index of the first ``char`` in ``text``.

    Searching for ``"\\0"`` finds the end of the text; a character that does
    not occur gives None.
    """
    _require_char(char)
    index = text.find(char)
    if index >= 0:
        return index
    if char == "\0":
        return len(text)
    return None


def strrchr(text: str, char: str) -> int | None:
    """Return the index of the last ``char`` in ``text``.

    Searching for ``"\\0"`` finds the end of the text; a character that does
    not occur gives None.
    """
    _require_char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None
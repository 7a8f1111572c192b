"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import operator
import re
import sys
from typing import Any, Callable, Iterator

__all__ = ["format_printf", "printf"]

_INT_BITS = 32
_POINTER_BITS = 64
_DIRECTIVE = re.compile(r"%(.?)", re.DOTALL)


def _signed(value: Any, bits: int) -> int:
    half = 1 << (bits - 1)
    return (operator.index(value) + half) % (1 << bits) - half


def _unsigned(value: Any, bits: int) -> int:
    return operator.index(value) % (1 << bits)


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_unsigned(value, 8))


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    address = 0 if value is None else _unsigned(value, _POINTER_BITS)
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _decimal(value: Any) -> str:
    return str(_signed(value, _INT_BITS))


def _unsigned_decimal(value: Any) -> str:
    return str(_unsigned(value, _INT_BITS))


def _hex_lower(value: Any) -> str:
    return format(_unsigned(value, _INT_BITS), "x")


def _hex_upper(value: Any) -> str:
    return format(_unsigned(value, _INT_BITS), "X")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _decimal,
    "i": _decimal,
    "u": _unsigned_decimal,
    "x": _hex_lower,
    "X": _hex_upper,
}


def format_printf(fmt: str | None, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text.

    Integers wrap as the C types they stand for: %d and %i to a 32-bit
    signed value, %u, %x and %X to a 32-bit unsigned one, %p to a 64-bit
    address. An unknown conversion and a lone trailing '%' produce nothing.
    Extra arguments are ignored; a missing one raises TypeError.
    """
    if not fmt:
        return ""
    values: Iterator[Any] = iter(args)

    def replace(match: re.Match[str]) -> str:
        conversion = match.group(1)
        if conversion == "%":
            return "%"
        handler = _CONVERSIONS.get(conversion)
        if handler is None:
            return ""
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{conversion}") from None
        return handler(value)

    return _DIRECTIVE.sub(replace, fmt)


def printf(fmt: str | None, *args: Any) -> int:
    """Write the expanded ``fmt`` to standard output.

    Returns the number of bytes written, encoded as UTF-8.
    """
    text = format_printf(fmt, *args)
    if text:
        sys.stdout.write(text)
        sys.stdout.flush()
    return len(text.encode("utf-8"))
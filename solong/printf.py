"""Formatted output with the conversions ``%c %s %p %d %i %u %x %X %%``."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any

NULL_POINTER = "(nil)"
NULL_STRING = "(null)"

_UINT_MASK = 0xFFFFFFFF
_ULLONG_MASK = 0xFFFFFFFFFFFFFFFF


class FormatError(ValueError):
    """Raised for a conversion that cannot be formatted."""


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def format_pointer(value: int | None) -> str:
    """Format an address as lower-case hex with ``0x``, or ``(nil)`` for zero."""
    if not value:
        return NULL_POINTER
    return f"0x{value & _ULLONG_MASK:x}"


def format_unsigned(value: int, conversion: str) -> str:
    """Format a value as a 32-bit unsigned number for ``u``, ``x`` or ``X``."""
    if conversion not in ("u", "x", "X"):
        raise FormatError(f"unsupported unsigned conversion {conversion!r}")
    number = value & _UINT_MASK
    if conversion == "u":
        return str(number)
    return format(number, conversion)


def format_int(value: int) -> str:
    """Format a value as a signed 32-bit decimal number."""
    return str(_to_int32(value))


def format_str(value: Any) -> str:
    """Format a string argument, showing ``(null)`` for ``None``."""
    if value is None:
        return NULL_STRING
    return str(value)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError("%c needs a single character")
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise FormatError("%c needs a character or an integer")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": format_str,
    "p": format_pointer,
    "d": format_int,
    "i": format_int,
    "u": lambda value: format_unsigned(value, "u"),
    "x": lambda value: format_unsigned(value, "x"),
    "X": lambda value: format_unsigned(value, "X"),
}


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by the next argument."""
    values = iter(args)
    chars = iter(fmt)
    out: list[str] = []
    for char in chars:
        if char != "%":
            out.append(char)
            continue
        spec = next(chars, "")
        if spec == "%":
            out.append("%")
            continue
        handler = _CONVERSIONS.get(spec)
        if handler is None:
            raise FormatError(f"unknown conversion {'%' + spec!r}")
        try:
            value = next(values)
        except StopIteration:
            raise FormatError(f"missing argument for %{spec}") from None
        out.append(handler(value))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)
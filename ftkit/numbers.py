"""Conversion between decimal text and 32-bit signed integers."""

from __future__ import annotations

from ftkit.chars import is_digit, is_space

_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped and one optional sign is accepted; a second
    sign yields 0. Parsing stops at the first non-digit. The result wraps
    around like a 32-bit signed integer.
    """
    chars = iter(text)
    current = next(chars, "")
    while current and is_space(current):
        current = next(chars, "")

    negative = False
    if current in ("-", "+"):
        negative = current == "-"
        current = next(chars, "")
        if current in ("-", "+"):
            return 0

    value = 0
    while current and is_digit(current):
        value = value * 10 + (ord(current) - ord("0"))
        current = next(chars, "")

    return _wrap_int32(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, not {type(n).__name__}")
    return str(n)
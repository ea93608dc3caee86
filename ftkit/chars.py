"""Character classification and case conversion for ASCII code points.

Each function accepts either a one-character string or an integer code
point. The case converters return a value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, not bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected a one-character string or an int, not {type(c).__name__}")


def is_digit(c: Char) -> bool:
    """True for the ASCII digits '0' to '9'."""
    return ord("0") <= _code(c) <= ord("9")


def is_alpha(c: Char) -> bool:
    """True for the ASCII letters 'A'-'Z' and 'a'-'z'."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: Char) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII characters, space through '~'."""
    return 32 <= _code(c) <= 126


def is_space(c: Char) -> bool:
    """True for space and the control characters tab through carriage return."""
    code = _code(c)
    return 9 <= code <= 13 or code == ord(" ")


def _convert(c: Char, low: str, high: str, delta: int) -> Char:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_lower(c: Char) -> Char:
    """Map an ASCII uppercase letter to lowercase; anything else is unchanged."""
    return _convert(c, "A", "Z", ord("a") - ord("A"))


def to_upper(c: Char) -> Char:
    """Map an ASCII lowercase letter to uppercase; anything else is unchanged."""
    return _convert(c, "a", "z", ord("A") - ord("a"))
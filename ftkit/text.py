"""String building blocks: splitting, trimming, filtering, slicing and mapping."""

from __future__ import annotations

from typing import Callable, List


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, not {type(value).__name__}")
    return value


def _require_count(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on runs of the single character ``sep``.

    Leading, trailing and repeated separators produce no empty words.
    """
    _require_str(s, "s")
    _require_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def trim(s: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``s``."""
    _require_str(s, "s")
    _require_str(chars, "chars")
    return s.strip(chars) if chars else s


def filter_chars(s: str, chars: str) -> str:
    """Return ``s`` with every character found in ``chars`` removed."""
    _require_str(s, "s")
    _require_str(chars, "chars")
    unwanted = set(chars)
    return "".join(ch for ch in s if ch not in unwanted)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end of the string yields an empty string.
    """
    _require_str(s, "s")
    _require_count(start, "start")
    _require_count(length, "length")
    if start > len(s):
        return ""
    return s[start:start + length]


def truncate(s: str, length: int) -> str:
    """Return the first ``length`` characters of ``s``."""
    _require_str(s, "s")
    _require_count(length, "length")
    return s[:length]


def join(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    _require_str(s, "s")
    pieces = []
    for index, ch in enumerate(s):
        result = func(index, ch)
        if not isinstance(result, str):
            raise TypeError(f"mapping function must return a str, not {type(result).__name__}")
        pieces.append(result)
    return "".join(pieces)


def iter_indexed(s: str, func: Callable[[int, str], object]) -> None:
    """Call ``func(index, char)`` for each character of ``s`` in order."""
    _require_str(s, "s")
    for index, ch in enumerate(s):
        func(index, ch)
"""Searching, comparing and size-bounded copying of strings.

The end of a string counts as a character with code 0. Searching for
``"\\0"`` therefore finds the end of the string, and a shorter string
compares as if it were padded with that character.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Union

Char = Union[str, int]


class Bounded(NamedTuple):
    """Result of a size-bounded copy or concatenation.

    ``text`` is what the destination holds afterwards. ``length`` is the
    length of the string the operation tried to build, so a ``length`` of
    ``size`` or more means the result was cut short.
    """

    text: str
    length: int


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


def _as_char(c: Char) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, not bool")
    if isinstance(c, int):
        if c < 0:
            raise ValueError("code point must not be negative")
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a one-character string or an int, not {type(c).__name__}")


def _code_at(s: str, index: int) -> int:
    return ord(s[index]) if index < len(s) else 0


def find_bounded(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Return the index of the first ``needle`` lying wholly within the first ``limit`` characters.

    An empty needle is found at index 0. Returns ``None`` if there is no match.
    """
    _require_str(haystack, "haystack")
    _require_str(needle, "needle")
    _require_count(limit, "limit")
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the code points of the first unequal pair, or
    0 if the compared ranges are equal.
    """
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    _require_count(n, "n")
    for index in range(min(n, max(len(s1), len(s2)))):
        a, b = _code_at(s1, index), _code_at(s2, index)
        if a != b:
            return a - b
    return 0


def compare(s1: str, s2: str) -> int:
    """Compare two strings character by character.

    Returns the difference of the code points of the first unequal pair, or
    0 if the strings are equal.
    """
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    return compare_n(s1, s2, max(len(s1), len(s2)))


def find_char(s: str, c: Char) -> Optional[int]:
    """Return the index of the first occurrence of ``c`` in ``s``.

    Searching for ``"\\0"`` returns ``len(s)``. Returns ``None`` if ``c``
    does not occur.
    """
    _require_str(s, "s")
    ch = _as_char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == "\0" else None


def rfind_char(s: str, c: Char) -> Optional[int]:
    """Return the index of the last occurrence of ``c`` in ``s``.

    Searching for ``"\\0"`` returns ``len(s)``. Returns ``None`` if ``c``
    does not occur.
    """
    _require_str(s, "s")
    ch = _as_char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def lcopy(src: str, size: int) -> Bounded:
    """Copy ``src`` into a destination of ``size`` slots, one kept for the terminator.

    At most ``size - 1`` characters are copied; a size of 0 copies nothing.
    The reported length is always ``len(src)``.
    """
    _require_str(src, "src")
    _require_count(size, "size")
    text = src[:size - 1] if size > 0 else ""
    return Bounded(text, len(src))


def lcat(dest: str, src: str, size: int) -> Bounded:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots, one kept for the terminator.

    If ``size`` does not exceed ``len(dest)`` nothing is appended and the
    reported length is ``len(src) + size``; otherwise it is
    ``len(dest) + len(src)``.
    """
    _require_str(dest, "dest")
    _require_str(src, "src")
    _require_count(size, "size")
    dest_len, src_len = len(dest), len(src)
    if size <= dest_len:
        return Bounded(dest, src_len + size)
    room = min(size - dest_len - 1, src_len)
    return Bounded(dest + src[:room], dest_len + src_len)
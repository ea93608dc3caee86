"""Writing characters, strings and numbers to streams or file descriptors.

A target is either a text stream with a ``write`` method or an integer file
descriptor; text sent to a descriptor is encoded as UTF-8.
"""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO, Union

Target = Union[TextIO, int, None]


def _write(text: str, stream: Target) -> None:
    if stream is None:
        stream = sys.stdout
    if isinstance(stream, int):
        data = memoryview(text.encode("utf-8"))
        while data:
            written = os.write(stream, data)
            data = data[written:]
    else:
        stream.write(text)


def put_char(c: str, stream: Target = None) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write(c, stream)


def put_str(s: Optional[str], stream: Target = None) -> None:
    """Write a string; ``None`` writes nothing."""
    if s is None:
        return
    _write(s, stream)


def put_endl(s: Optional[str], stream: Target = None) -> None:
    """Write a string followed by a newline; ``None`` writes nothing."""
    if s is None:
        return
    _write(s + "\n", stream)


def put_nbr(n: int, stream: Target = None) -> None:
    """Write an integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, not {type(n).__name__}")
    _write(str(n), stream)
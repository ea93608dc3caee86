"""Byte-buffer operations: search, compare, fill and overlapping move."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def mem_find(buf: BytesLike, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within the first ``n`` bytes.

    Only the low eight bits of ``value`` are compared. Returns ``None`` if
    the byte does not occur.
    """
    _check_count(n, buf)
    index = bytes(memoryview(buf)[:n]).find(value & 0xFF)
    return None if index < 0 else index


def mem_compare(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first unequal pair of bytes, or 0 if the
    ranges are equal.
    """
    _check_count(n, a, b)
    for x, y in zip(memoryview(a)[:n].tobytes(), memoryview(b)[:n].tobytes()):
        if x != y:
            return x - y
    return 0


def mem_set(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low eight bits of ``value``."""
    _check_count(n, buf)
    memoryview(buf)[:n] = bytes([value & 0xFF]) * n
    return buf


def mem_move(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    The ranges may overlap; the result is as if the source were copied out
    first.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("byte count must not be negative")
    if dst + n > len(buf) or src + n > len(buf):
        raise ValueError("range extends past the end of the buffer")
    if n and dst != src:
        view = memoryview(buf)
        view[dst:dst + n] = bytes(view[src:src + n])
    return buf
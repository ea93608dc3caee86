"""Helpers for ASCII characters, strings, integers, byte buffers and stream output."""

__version__ = "0.1.0"
__all__ = ["chars", "numbers", "output", "memory", "text", "search"]
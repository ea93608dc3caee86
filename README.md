# ftkit

A small library of helpers for ASCII characters, strings, integers, byte
buffers and stream output. The helpers keep the classic low-level rules
(ASCII-only character classes, leading-integer parsing with 32-bit
wrap-around, size-bounded copy and concatenation that report the length they
tried to build, bounded substring search) while working on ordinary Python
`str`, `bytes` and `bytearray` values and raising `TypeError` or `ValueError`
on bad arguments.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ftkit.chars` — `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`,
  `is_print`, `is_space`, `to_lower`, `to_upper`. Each accepts a
  one-character string or an integer code point; `to_lower` and `to_upper`
  return the same kind they were given and change only ASCII letters.
- `ftkit.numbers` — `atoi(text)` skips leading whitespace, accepts one
  optional sign (a second sign gives 0), reads digits up to the first
  non-digit and wraps the result to a 32-bit signed integer.
  `itoa(n)` returns the decimal text of an integer.
- `ftkit.output` — `put_char`, `put_str`, `put_endl`, `put_nbr`. The target
  is a text stream with a `write` method, an integer file descriptor (text is
  written as UTF-8), or omitted for `sys.stdout`. `put_str` and `put_endl`
  write nothing when given `None`.
- `ftkit.memory` — `mem_find(buf, value, n)` returns the index of a byte
  within the first `n` bytes or `None`; `mem_compare(a, b, n)` returns the
  difference of the first unequal bytes or 0; `mem_set(buf, value, n)` fills
  a `bytearray`; `mem_move(buf, dst, src, n)` copies between offsets of one
  `bytearray`, with overlap handled.
- `ftkit.text` — `split(s, sep)` drops empty words; `trim(s, chars)`,
  `filter_chars(s, chars)`, `substr(s, start, length)`,
  `truncate(s, length)`, `join(s1, s2)`, `map_indexed(s, func)` and
  `iter_indexed(s, func)`, where `func` is called as `func(index, char)`.
- `ftkit.search` — `find_bounded(haystack, needle, limit)`,
  `compare(s1, s2)`, `compare_n(s1, s2, n)`, `find_char(s, c)`,
  `rfind_char(s, c)`, `lcopy(src, size)` and `lcat(dest, src, size)`. The
  end of a string counts as the character `"\0"`: searching for it returns
  `len(s)`. `lcopy` and `lcat` return a `Bounded` named tuple of `text` and
  `length`; a `length` of `size` or more means the text was cut short.

## Example

```python
import sys

from ftkit.numbers import atoi, itoa
from ftkit.text import split, trim
from ftkit.search import compare_n, lcopy
from ftkit.output import put_endl

atoi("   -42abc")            # -42
itoa(-7)                     # "-7"
split("  a  b c ", " ")      # ["a", "b", "c"]
trim("xxhixx", "x")          # "hi"
compare_n("abc", "abd", 2)   # 0
lcopy("hello", 3)            # Bounded(text="he", length=5)
put_endl("done", sys.stdout)
```
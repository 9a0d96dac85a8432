# corekit

A small library of low-level helpers: ASCII character classes, operations on byte
buffers, bounded NUL-terminated string routines, string building, writing to file
descriptors, and a singly linked list. It has no dependencies outside the standard
library.

## Installation

Install it from a checkout with pip. The optional `test` extra adds pytest for
running the test suite in `tests/`.

## Modules

### `corekit.chars`

Classification and case conversion on integer character codes, ASCII only.

- `isalpha(c)`, `isdigit(c)`, `isalnum(c)`, `isascii(c)` (0 to 127),
  `isprint(c)` (32 to 126) return `bool`.
- `toupper(c)` and `tolower(c)` convert letters and return any other code unchanged.

### `corekit.memory`

Operations on `bytearray` buffers. A byte count that is negative or larger than a
buffer raises `ValueError`.

- `memset(buf, c, n)` fills the first `n` bytes with the low byte of `c` and returns
  `buf`; `bzero(buf, n)` fills them with zeros.
- `memcpy(dest, src, n)` copies `n` bytes into the start of `dest` and returns `dest`.
- `memmove(buf, dest, src, n)` copies `n` bytes inside one buffer from offset `src`
  to offset `dest`; the regions may overlap.
- `memchr(data, c, n)` returns the index of the first matching byte in the first
  `n` bytes, or `None`.
- `memcmp(a, b, n)` returns the difference of the first unequal byte pair, or 0.
- `calloc(count, size)` returns a zeroed `bytearray` of `count * size` bytes and
  raises `OverflowError` when that total exceeds the largest `size_t`.

### `corekit.cstring`

Routines that treat a NUL character as the end of a `str` or `bytes` value.
Searches return indexes instead of pointers, and `None` when nothing is found.

- `strlen(s)`, `strdup(s)`.
- `strlcpy(dst, src, dsize)` and `strlcat(dst, src, dsize)` write into a
  `bytearray`, always NUL-terminate within `dsize`, and return the length of the
  string they tried to build.
- `strncmp(s1, s2, n)` compares at most `n` characters.
- `strchr(s, c)` and `strrchr(s, c)` find the first and last occurrence; searching
  for NUL returns the string's length.
- `strnstr(haystack, needle, n)` finds `needle` only if it lies wholly within the
  first `n` characters; an empty needle matches at 0.

### `corekit.strtools`

- `atoi(s)` skips leading whitespace, takes one optional sign and reads digits up to
  the first non-digit; the result wraps to a 32-bit signed integer.
- `itoa(n)` returns the decimal text of an integer.
- `split(s, sep)` splits on a single character and drops empty pieces;
  `word_count(s, sep)` counts those pieces.
- `substr(s, start, length)` returns at most `length` characters from `start`, or
  `""` when `start` is past the end.
- `strjoin(s1, s2)` concatenates; `strtrim(s, charset)` strips characters in
  `charset` from both ends.
- `strmapi(s, func)` builds a new string from `func(index, char)`; it returns `None`
  for an empty string.
- `striteri(chars, func)` calls `func(index, char)` on each element of a mutable
  sequence and stores any non-`None` result in its place.

### `corekit.put`

`putchar_fd(c, fd)`, `putstr_fd(s, fd)`, `putendl_fd(s, fd)` and `putnbr_fd(n, fd)`
write UTF-8 text to a raw file descriptor.

### `corekit.linked`

- `Node(content, next)` is one cell; `Node.release(delete)` passes its content to
  `delete` and detaches the node.
- `LinkedList(head)` offers `push_front(node)`, `push_back(node)`, `last()`,
  `len()`, iteration over the contents, `clear(delete)`, `for_each(func)` and
  `map(func, delete)`, which returns a new list. `clear` does nothing when `delete`
  is `None`; if `func` raises inside `map`, the contents built so far go to `delete`.

## Examples

```python
from corekit.chars import isalnum, toupper
from corekit.strtools import split, strtrim, itoa
from corekit.linked import Node, LinkedList

isalnum(ord("5"))                  # True
chr(toupper(ord("a")))             # "A"

split("--Word--Word--", "-")       # ["Word", "Word"]
strtrim("xxxHello Worldxxx", "x")  # "Hello World"
itoa(-2147483648)                  # "-2147483648"

items = LinkedList(Node("one"))
items.push_back(Node("two"))
items.push_front(Node("zero"))
len(items)                         # 3
upper = items.map(str.upper, None)
list(upper)                        # ["ZERO", "ONE", "TWO"]
```

Writing to a descriptor:

```python
import sys
from corekit.put import putendl_fd, putnbr_fd

putnbr_fd(4200, sys.stdout.fileno())
putendl_fd("", sys.stdout.fileno())
```

## What it does not do

corekit is a library only: it has no command-line tool, and it does not manage
memory of its own. The buffer and string routines work on Python `bytearray`,
`bytes` and `str` values.
"""NUL-terminated string operations on ``str`` and ``bytes`` values.

A NUL character ends a string wherever it appears; anything after it is ignored.
Search functions return indexes instead of pointers, and None when nothing is found.
"""

from itertools import chain, islice


def _terminated(s):
    """Return ``s`` cut at its first NUL character."""
    nul = "\0" if isinstance(s, str) else b"\0"
    index = s.find(nul)
    return s if index < 0 else s[:index]


def _codes(s) -> list[int]:
    s = _terminated(s)
    if isinstance(s, str):
        return [ord(ch) for ch in s]
    return list(s)


def _char_code(s, c) -> int:
    code = ord(c) if isinstance(c, str) else int(c)
    if not isinstance(s, str):
        code &= 0xFF
    return code


def _as_bytes(src) -> bytes:
    if isinstance(src, str):
        src = src.encode("utf-8")
    return bytes(_terminated(bytes(src)))


def strlen(s) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(s))


def strlcpy(dst: bytearray, src, dsize: int) -> int:
    """Copy at most ``dsize - 1`` bytes of ``src`` into ``dst`` and NUL-terminate.

    Returns the length of ``src``; a result of ``dsize`` or more means truncation.
    """
    if dsize < 0 or dsize > len(dst):
        raise ValueError(f"dsize {dsize} does not fit a buffer of {len(dst)} bytes")
    data = _as_bytes(src)
    if dsize == 0:
        return len(data)
    count = min(len(data), dsize - 1)
    dst[:count] = data[:count]
    dst[count] = 0
    return len(data)


def strlcat(dst: bytearray, src, dsize: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dst``, bounded by ``dsize``.

    Returns the length of the string it tried to build.
    """
    if dsize < 0 or dsize > len(dst):
        raise ValueError(f"dsize {dsize} does not fit a buffer of {len(dst)} bytes")
    data = _as_bytes(src)
    end = dst.find(0, 0, dsize)
    dst_len = dsize if end < 0 else end
    if dst_len == dsize:
        return dsize + len(data)
    count = min(len(data), dsize - dst_len - 1)
    dst[dst_len:dst_len + count] = data[:count]
    dst[dst_len + count] = 0
    return dst_len + len(data)


def strdup(s):
    """Return a copy of ``s`` up to its first NUL."""
    t = _terminated(s)
    return t[:] if isinstance(t, str) else type(s)(t)


def strncmp(s1, s2, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first unequal pair."""
    pairs = zip(chain(_codes(s1), (0,)), chain(_codes(s2), (0,)))
    for a, b in islice(pairs, max(n, 0)):
        if a != b or a == 0:
            return a - b
    return 0


def strchr(s, c) -> int | None:
    """Return the index of the first ``c`` in ``s``; searching for NUL finds the end."""
    code = _char_code(s, c)
    codes = _codes(s)
    if code == 0:
        return len(codes)
    try:
        return codes.index(code)
    except ValueError:
        return None


def strrchr(s, c) -> int | None:
    """Return the index of the last ``c`` in ``s``; searching for NUL finds the end."""
    code = _char_code(s, c)
    codes = _codes(s)
    if code == 0:
        return len(codes)
    for index in reversed(range(len(codes))):
        if codes[index] == code:
            return index
    return None


def strnstr(haystack, needle, n: int) -> int | None:
    """Return the index of ``needle`` in the first ``n`` characters of ``haystack``.

    The match must lie entirely within those ``n`` characters.
    """
    h = _terminated(haystack)
    nd = _terminated(needle)
    for start in range(min(n, len(h))):
        if start + len(nd) <= n and h.startswith(nd, start):
            return start
    return None
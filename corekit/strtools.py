"""String building and conversion helpers: parsing, formatting, splitting, trimming."""

from typing import Callable, MutableSequence

_INT_BITS = 32
_WHITESPACE = " \t\n\v\f\r"


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to the range of a 32-bit signed integer, wrapping around."""
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def atoi(s: str) -> int:
    """Parse the leading integer of ``s``.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Returns 0 when no digits follow. The result
    wraps to a 32-bit signed integer.
    """
    text = s.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    result = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return _wrap_int(result * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)


def _words(s: str, sep: str) -> list[str]:
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def word_count(s: str, sep: str) -> int:
    """Count the non-empty runs of characters between occurrences of ``sep``."""
    return len(_words(s, sep))


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces between repeated separators."""
    return _words(s, sep)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end of ``s`` gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of ``s1`` and ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def strmapi(s: str, func: Callable[[int, str], str]) -> str | None:
    """Build a new string from ``func(index, char)`` applied to every character.

    Returns None for an empty input string.
    """
    if not s:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Apply ``func(index, char)`` to each element of ``chars`` in place.

    When ``func`` returns a value, it replaces the character; None leaves it as is.
    """
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement
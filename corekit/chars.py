"""Character classification and case conversion on integer character codes."""

_LOWER_A = ord("a")
_LOWER_Z = ord("z")
_UPPER_A = ord("A")
_UPPER_Z = ord("Z")
_DIGIT_0 = ord("0")
_DIGIT_9 = ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def isalpha(c: int) -> bool:
    """Return True if ``c`` is an ASCII letter."""
    return _LOWER_A <= c <= _LOWER_Z or _UPPER_A <= c <= _UPPER_Z


def isdigit(c: int) -> bool:
    """Return True if ``c`` is a decimal digit."""
    return _DIGIT_0 <= c <= _DIGIT_9


def isalnum(c: int) -> bool:
    """Return True if ``c`` is a letter or a digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: int) -> bool:
    """Return True if ``c`` fits in the 7-bit ASCII range."""
    return 0 <= c <= 127


def isprint(c: int) -> bool:
    """Return True if ``c`` is printable, space included."""
    return 32 <= c <= 126


def toupper(c: int) -> int:
    """Convert a lowercase letter to uppercase; other codes are returned as-is."""
    if _LOWER_A <= c <= _LOWER_Z:
        return c - _CASE_OFFSET
    return c


def tolower(c: int) -> int:
    """Convert an uppercase letter to lowercase; other codes are returned as-is."""
    if _UPPER_A <= c <= _UPPER_Z:
        return c + _CASE_OFFSET
    return c
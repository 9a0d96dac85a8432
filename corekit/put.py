"""Write characters, strings and numbers to raw file descriptors."""

import os

from corekit.strtools import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: str, fd: int) -> None:
    """Write the single character ``c`` to ``fd``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode("utf-8"))


def putstr_fd(s: str, fd: int) -> None:
    """Write the string ``s`` to ``fd``."""
    _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: str, fd: int) -> None:
    """Write the string ``s`` followed by a newline to ``fd``."""
    putstr_fd(s + "\n", fd)


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of ``n`` to ``fd``."""
    putstr_fd(itoa(n), fd)
"""Character classes, byte-buffer helpers, string utilities, descriptor output and a linked list."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "cstring", "strtools", "put", "linked"]
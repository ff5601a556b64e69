"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

from typing import TextIO

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def _until_nul(s: str) -> str:
    """Return the part of ``s`` before the first NUL character."""
    return s.split("\0", 1)[0]


def put_char(c: str, stream: TextIO) -> None:
    """Write a single character to ``stream``."""
    if not isinstance(c, str):
        raise TypeError(f"expected a str, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)} characters")
    stream.write(c)


def put_str(s: str, stream: TextIO) -> None:
    """Write ``s`` to ``stream``, stopping at the first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    stream.write(_until_nul(s))


def put_endl(s: str, stream: TextIO) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    put_str(s, stream)
    stream.write("\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write the decimal form of the integer ``n`` to ``stream``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    stream.write(str(n))
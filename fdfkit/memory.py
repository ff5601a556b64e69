"""Byte-level helpers working on mutable byte buffers.

Buffers passed in for writing must be mutable (``bytearray`` or a writable
``memoryview``). Every function checks that the requested byte count fits
the buffers it touches and raises ``ValueError`` when it does not.
"""

from __future__ import annotations

from typing import Optional, Union

__all__ = ["memset", "bzero", "memcpy", "memmove", "memchr", "memcmp", "calloc"]

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

_CALLOC_LIMIT = 2147483647


def _check_count(n: int, *lengths: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"byte count must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"byte count {n} exceeds buffer length {length}")


def _check_offset(name: str, offset: int, n: int, length: int) -> None:
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise TypeError(f"{name} must be an int, got {type(offset).__name__}")
    if offset < 0 or offset + n > length:
        raise ValueError(f"{name} range [{offset}, {offset + n}) lies outside a buffer of {length} bytes")


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buffer`` to the low byte of ``value``."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: Buffer, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    return memset(buffer, 0, n)


def memcpy(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were first
    copied to a temporary area.
    """
    _check_count(n)
    _check_offset("dest", dest, n, len(buffer))
    _check_offset("src", src, n, len(buffer))
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns 0 when they are equal, otherwise 1 or -1 according to the first
    differing byte compared as unsigned values.
    """
    _check_count(n, len(a), len(b))
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return 1 if x > y else -1
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes each.

    Raises ``MemoryError`` when the total would exceed the signed 32-bit limit.
    """
    for name, value in (("count", count), ("size", size)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")
    if size and count > _CALLOC_LIMIT // size:
        raise MemoryError(f"cannot allocate {count} elements of {size} bytes")
    return bytearray(count * size)
"""Operations on NUL-terminated text.

A string ends at its first NUL character (``"\\0"``) or, when it has none,
at its real end. Searches return indices rather than references. Copying
and appending return the new text together with the length the operation
tried to produce.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strlcat",
    "strdup",
]

CharLike = Union[str, int]

_NUL = "\0"


def _check_str(name: str, value: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")


def _check_count(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _visible(s: str) -> str:
    """Return the part of ``s`` before its first NUL character."""
    return s.split(_NUL, 1)[0]


def _as_char(c: CharLike) -> str:
    """Turn a one-character string or an integer code into a character."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, got bool")
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a one-character string or an int, got {type(c).__name__}")


def strlen(s: str) -> int:
    """Return the number of characters before the terminating NUL."""
    _check_str("s", s)
    return len(_visible(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL gives the index of the terminator.
    """
    _check_str("s", s)
    ch = _as_char(c)
    text = _visible(s)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL gives the index of the terminator.
    """
    _check_str("s", s)
    ch = _as_char(c)
    text = _visible(s)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    Returns zero when they match, otherwise the difference between the
    codes of the first differing characters (the terminator counts as 0).
    """
    _check_str("a", a)
    _check_str("b", b)
    _check_count("n", n)
    left, right = _visible(a), _visible(b)
    for i in range(n):
        x = ord(left[i]) if i < len(left) else 0
        y = ord(right[i]) if i < len(right) else 0
        if x != y or x == 0:
            return x - y
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return where ``needle`` first occurs within the first ``length`` characters.

    The whole of ``needle`` must lie inside that window. An empty needle
    is found at index 0; otherwise None means no match.
    """
    _check_str("haystack", haystack)
    _check_str("needle", needle)
    _check_count("length", length)
    target = _visible(needle)
    if not target:
        return 0
    index = _visible(haystack)[:length].find(target)
    return None if index < 0 else index


def strlcpy(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters holding ``dest``.

    Returns the new buffer text and the length of ``src``. With a size of
    zero the buffer is left as it was; otherwise at most ``size - 1``
    characters are copied.
    """
    _check_str("dest", dest)
    _check_str("src", src)
    _check_count("size", size)
    source = _visible(src)
    if size == 0:
        return _visible(dest), len(source)
    return source[:size - 1], len(source)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` in a buffer of ``size`` characters.

    Returns the new buffer text and the length the full result would have
    had: ``len(src) + size`` when ``size`` is smaller than ``dest``,
    ``len(dest) + len(src)`` otherwise.
    """
    _check_str("dest", dest)
    _check_str("src", src)
    _check_count("size", size)
    head, tail = _visible(dest), _visible(src)
    if size < 1:
        return head, len(tail) + size
    room = max(0, size - 1 - len(head))
    result = head + tail[:room]
    if size < len(head):
        return result, len(tail) + size
    return result, len(head) + len(tail)


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its terminating NUL."""
    _check_str("s", s)
    return _visible(s)
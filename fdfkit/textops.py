"""Building new strings from existing ones.

As elsewhere in the package, a string ends at its first NUL character
(``"\\0"``) or at its real end when it has none.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

from fdfkit.cstrings import strdup

__all__ = [
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "itoa",
    "atoi",
    "strmapi",
    "striteri",
]

CharLike = Union[str, int]

_WHITESPACE = " \t\n\v\f\r"
_SIGNS = "+-"
_NUL = "\0"


def _check_str(name: str, value: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")


def _check_count(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _as_char(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, got bool")
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a one-character string or an int, got {type(c).__name__}")


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end of ``s`` gives an empty string.
    """
    _check_str("s", s)
    _check_count("start", start)
    _check_count("length", length)
    text = strdup(s)
    start = min(start, len(text))
    return text[start:start + length]


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    _check_str("a", a)
    _check_str("b", b)
    return strdup(a) + strdup(b)


def strtrim(s: str, charset: str) -> str:
    """Return ``s`` without the characters of ``charset`` at its start and end."""
    _check_str("s", s)
    _check_str("charset", charset)
    return strdup(s).strip(strdup(charset))


def split(s: str, sep: CharLike) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    _check_str("s", s)
    delimiter = _as_char(sep)
    return [piece for piece in strdup(s).split(delimiter) if piece]


def itoa(n: int) -> str:
    """Return the decimal form of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def atoi(s: str) -> int:
    """Parse a leading decimal integer from ``s``.

    Leading whitespace is skipped and one sign is accepted; two signs in a
    row give 0. Parsing stops at the first non-digit, and a string with no
    digits gives 0. The result wraps around to a signed 32-bit value.
    """
    _check_str("s", s)
    text = strdup(s).lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in _SIGNS and text[:1]:
        if text[1:2] and text[1:2] in _SIGNS:
            return 0
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = []
    for ch in text:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap_int32(value * sign)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string whose characters are ``f(index, char)`` for each of ``s``."""
    _check_str("s", s)
    return "".join(_as_char(f(index, ch)) for index, ch in enumerate(strdup(s)))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Apply ``f(index, char)`` to each character of ``chars`` in place.

    A character returned by ``f`` replaces the one at that index; None leaves
    it unchanged. Processing stops at the first NUL character.
    """
    for index, ch in enumerate(list(chars)):
        if ch == _NUL:
            break
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = _as_char(replacement)
"""Character classification and case conversion on single characters.

Every function accepts either a one-character string or an integer code.
The letter and digit tests look only at the low byte of an integer code;
the ASCII and printable tests look at the whole value.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_upper",
    "to_lower",
]

_CASE_OFFSET = 32


def _code(c: CharLike) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, got bool")
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a one-character string or an int, got {type(c).__name__}")


def _low_byte(c: CharLike) -> int:
    return _code(c) & 0xFF


def _is_lower_byte(v: int) -> bool:
    return ord("a") <= v <= ord("z")


def _is_upper_byte(v: int) -> bool:
    return ord("A") <= v <= ord("Z")


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    v = _low_byte(c)
    return _is_lower_byte(v) or _is_upper_byte(v)


def is_digit(c: CharLike) -> bool:
    """True for a decimal digit 0 through 9."""
    return ord("0") <= _low_byte(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or a decimal digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True when the code lies in the 7-bit ASCII table (0 to 127)."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _restore(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Convert a lower-case ASCII letter to upper case; return anything else unchanged."""
    code = _code(c)
    if _is_lower_byte(code & 0xFF):
        code -= _CASE_OFFSET
    return _restore(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Convert an upper-case ASCII letter to lower case; return anything else unchanged."""
    code = _code(c)
    if _is_upper_byte(code & 0xFF):
        code += _CASE_OFFSET
    return _restore(c, code)
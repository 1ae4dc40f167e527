"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a one-character
string. The predicates only recognise 7-bit ASCII; codes outside that range
are never letters, digits or printable.
"""

from __future__ import annotations

from typing import TypeVar

CharLike = TypeVar("CharLike", int, str)

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    """Return ``code`` as the same kind of value as ``original``."""
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: int | str) -> bool:
    """Whether ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """Whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """Whether ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """Whether ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """Whether ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII capital letter; anything else comes back unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + _CASE_OFFSET)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else comes back unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - _CASE_OFFSET)
    return c
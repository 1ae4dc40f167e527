"""Conversions between text and integers, and splitting text into words."""

from __future__ import annotations

from typing import List, Optional

_INT_BITS = 32
_INT_RANGE = 1 << _INT_BITS
_INT_MIN = -(1 << (_INT_BITS - 1))

# Characters skipped before a number: space and the codes 7 to 13.
_LEADING_BLANKS = frozenset(" ") | frozenset(chr(code) for code in range(7, 14))


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a 32-bit two's-complement integer."""
    return (value - _INT_MIN) % _INT_RANGE + _INT_MIN


def atoi(text: str) -> int:
    """Read a decimal integer from the start of ``text``.

    Leading blanks are skipped, then one optional ``+`` or ``-``, then as many
    digits as follow. Anything after the digits is ignored, and text with no
    digits gives 0. The result wraps around as a 32-bit signed integer.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _LEADING_BLANKS:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    start = position
    while position < length and "0" <= text[position] <= "9":
        position += 1
    digits = text[start:position]
    value = int(digits) if digits else 0
    return _wrap_int(sign * value)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def split(text: Optional[str], sep: str) -> Optional[List[str]]:
    """Split ``text`` on the character ``sep``, dropping empty words.

    Returns ``None`` when ``text`` is ``None``.
    """
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if text is None:
        return None
    return [word for word in text.split(sep) if word]
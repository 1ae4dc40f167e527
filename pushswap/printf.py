"""A small formatter for the conversions ``%c %s %d %i %u %p %x %X %%``.

Integers are treated as a C ``int`` or ``unsigned int`` of 32 bits and
pointers as 64-bit addresses. Unknown conversions produce nothing and take
no argument.
"""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_CONSUMING = frozenset("csdiupxX")


def _signed32(value: int) -> int:
    return (value + 0x80000000) % 0x100000000 - 0x80000000


def _digits(value: int, alphabet: str) -> str:
    """Render a non-negative ``value`` in the base given by ``alphabet``."""
    base = len(alphabet)
    out = []
    while True:
        value, rest = divmod(value, base)
        out.append(alphabet[rest])
        if not value:
            break
    return "".join(reversed(out))


def to_hex(num: int, upper: bool = False) -> str:
    """Return ``num`` as an unsigned 32-bit hexadecimal string."""
    return _digits(num & _UINT_MASK, UPPER_HEX if upper else LOWER_HEX)


def pointer_repr(ptr: Optional[int]) -> str:
    """Return an address as ``0x`` and lower-case hex, or ``(nil)`` for null."""
    if not ptr:
        return "(nil)"
    return "0x" + _digits(ptr & _POINTER_MASK, LOWER_HEX)


def format_spec(spec: str, arg: Any = None) -> str:
    """Render one conversion character ``spec`` with its argument."""
    if spec == "c":
        if isinstance(arg, int):
            return chr(arg & 0xFF)
        if isinstance(arg, str) and len(arg) == 1:
            return arg
        raise TypeError(f"%c needs an int or a single character, got {arg!r}")
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec in ("d", "i"):
        return str(_signed32(_require_int(spec, arg)))
    if spec == "u":
        return str(_require_int(spec, arg) & _UINT_MASK)
    if spec == "p":
        return pointer_repr(None if arg is None else _require_int(spec, arg))
    if spec in ("x", "X"):
        return to_hex(_require_int(spec, arg), upper=spec == "X")
    if spec == "%":
        return "%"
    return ""


def _require_int(spec: str, arg: Any) -> int:
    if not isinstance(arg, int):
        raise TypeError(f"%{spec} needs an int, got {arg!r}")
    return arg


def cformat(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by its rendered argument.

    A ``%`` at the very end of ``fmt`` is dropped. Missing arguments raise
    ``ValueError``; surplus ones are ignored.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    pieces = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec in _CONSUMING:
            try:
                arg = next(remaining)
            except StopIteration:
                raise ValueError(f"no argument left for %{spec}") from None
            pieces.append(format_spec(spec, arg))
        else:
            pieces.append(format_spec(spec))
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any, out: Optional[TextIO] = None) -> int:
    """Write the formatted text and return its length; -1 when ``fmt`` is ``None``."""
    if fmt is None:
        return -1
    text = cformat(fmt, *args)
    (sys.stdout if out is None else out).write(text)
    return len(text)
"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union


def _stream(out: Optional[TextIO]) -> TextIO:
    return sys.stdout if out is None else out


def put_char(c: Union[int, str], out: Optional[TextIO] = None) -> None:
    """Write one character, given as a string or a byte code."""
    if isinstance(c, int):
        c = chr(c & 0xFF)
    elif len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _stream(out).write(c)


def put_str(s: Optional[str], out: Optional[TextIO] = None) -> None:
    """Write ``s``; nothing is written when it is ``None``."""
    if s is None:
        return
    _stream(out).write(s)


def put_endl(s: Optional[str], out: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; nothing when ``s`` is ``None``."""
    if s is None:
        return
    _stream(out).write(s + "\n")


def put_nbr(n: int, out: Optional[TextIO] = None) -> None:
    """Write ``n`` in decimal."""
    _stream(out).write(str(n))
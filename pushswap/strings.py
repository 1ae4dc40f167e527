"""String helpers: searching, comparing, joining, trimming and bounded copies.

Searches report positions as indices, with ``None`` where nothing is found.
Asking for the NUL character (code 0) finds the end of the string, index
``len(s)``, the place a terminator would sit. The bounded copies
:func:`strlcpy` and :func:`strlcat` work on NUL-terminated byte buffers.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, TypeVar, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
Element = TypeVar("Element")


def _char_code(c: Union[int, str]) -> int:
    """Return the code of ``c`` truncated to one byte, as a C ``char`` would be."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return c & 0xFF
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _until_nul(data: ReadableBuffer) -> bytes:
    """Return the bytes of ``data`` that precede its first NUL byte."""
    return bytes(data).split(b"\0", 1)[0]


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strdup(s: Optional[str]) -> Optional[str]:
    """Return a copy of ``s``, or ``None`` when ``s`` is ``None``."""
    if s is None:
        return None
    return "".join(s)


def strchr(s: Optional[str], c: Union[int, str]) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or ``None``."""
    if s is None:
        return None
    code = _char_code(c)
    if code == 0:
        return len(s)
    index = s.find(chr(code))
    return None if index < 0 else index


def strrchr(s: Optional[str], c: Union[int, str]) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or ``None``."""
    if s is None:
        return None
    if c == 0 or c == "\0":
        return len(s)
    code = _char_code(c)
    if code == 0:
        return None
    index = s.rfind(chr(code))
    return None if index < 0 else index


def strnstr(big: Optional[str], little: str, length: int) -> Optional[int]:
    """Return where ``little`` first lies wholly within ``big[:length]``.

    An empty ``little`` is found at index 0.
    """
    if big is None:
        return None
    if not little:
        return 0
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    index = big[:length].find(little)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch.

    The end of a string compares as the character code 0.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for position in range(n):
        a = ord(s1[position]) if position < len(s1) else 0
        b = ord(s2[position]) if position < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strlcpy(dest: bytearray, src: ReadableBuffer, size: int) -> int:
    """Copy ``src`` into ``dest``, writing at most ``size`` bytes with the NUL.

    Returns the length of ``src``, so a result of ``size`` or more means the
    copy was cut short.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    data = _until_nul(src)
    if size == 0:
        return len(data)
    count = min(size - 1, len(data))
    if count >= len(dest):
        raise ValueError(f"destination holds {len(dest)} bytes, {count + 1} needed")
    dest[:count] = data[:count]
    dest[count] = 0
    return len(data)


def strlcat(dest: bytearray, src: ReadableBuffer, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dest``.

    ``size`` is the full size of the destination; at most ``size - 1`` bytes
    end up in front of the terminator. Returns the length the joined string
    would have had: the current length of ``dest`` (capped at ``size``) plus
    the length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    data = _until_nul(src)
    terminator = bytes(dest[:size]).find(0)
    if terminator < 0:
        if size > len(dest):
            raise ValueError("destination string is not terminated")
        current = size
    else:
        current = terminator
    if current < size:
        count = max(0, min(len(data), size - current - 1))
        end = current + count
        if end >= len(dest):
            raise ValueError(f"destination holds {len(dest)} bytes, {end + 1} needed")
        dest[current:end] = data[:count]
        dest[end] = 0
    return current + len(data)


def strmapi(
    s: Optional[str], func: Optional[Callable[[int, str], str]]
) -> str:
    """Return a string built from ``func(index, char)`` for each character.

    A missing string or function gives an empty string.
    """
    if s is None or func is None:
        return ""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(
    s: Optional[MutableSequence[Element]],
    func: Optional[Callable[[int, Element], Element]],
) -> None:
    """Replace each element of ``s`` in place with ``func(index, element)``."""
    if s is None or func is None:
        return
    for index, element in enumerate(s):
        s[index] = func(index, element)


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Strip every character found in ``charset`` from both ends of ``s``."""
    if s is None:
        return None
    return s.strip(charset or "")


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start at or beyond the end gives an empty string.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]
"""Byte-buffer helpers: zeroing, filling, copying, searching and comparing.

Buffers are mutable byte sequences (``bytearray`` or a writable
``memoryview``); read-only arguments may also be ``bytes``. Byte values are
reduced modulo 256, as a C ``unsigned char`` would be.
"""

from __future__ import annotations

from typing import Optional, Union

MutableBuffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_length(buf: ReadableBuffer, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > len(buf):
        raise ValueError(f"{name} holds {len(buf)} bytes, {n} requested")


def bzero(buf: MutableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_length(buf, n, "buffer")
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes.

    A zero or negative count or size gives a one-byte buffer. A total beyond
    the size of the address space raises ``OverflowError``.
    """
    if nmemb <= 0 or size <= 0:
        nmemb = size = 1
    total = nmemb * size
    if total > SIZE_MAX:
        raise OverflowError(f"cannot allocate {nmemb} x {size} bytes")
    return bytearray(total)


def memchr(buf: Optional[ReadableBuffer], c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` in the first ``n`` bytes.

    Gives ``None`` when the byte is absent or ``buf`` is ``None``.
    """
    if buf is None:
        return None
    _check_length(buf, n, "buffer")
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first mismatch."""
    _check_length(a, n, "first buffer")
    _check_length(b, n, "second buffer")
    return next(
        (x - y for x, y in zip(bytes(a[:n]), bytes(b[:n])) if x != y),
        0,
    )


def memcpy(
    dest: Optional[MutableBuffer], src: Optional[ReadableBuffer], n: int
) -> Optional[MutableBuffer]:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    if dest is src or n == 0:
        return dest
    if dest is None or src is None:
        return None
    _check_length(src, n, "source")
    _check_length(dest, n, "destination")
    dest[:n] = src[:n]
    return dest


def memmove(dest: MutableBuffer, src: ReadableBuffer, n: int) -> MutableBuffer:
    """Copy ``n`` bytes from ``src`` to ``dest``; the two may overlap."""
    _check_length(src, n, "source")
    _check_length(dest, n, "destination")
    dest[:n] = bytes(src[:n])
    return dest


def memset(buf: Optional[MutableBuffer], c: int, n: int) -> Optional[MutableBuffer]:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` and return ``buf``."""
    if buf is None:
        return None
    _check_length(buf, n, "buffer")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf
"""Byte buffer operations over bytes and bytearray objects."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]

_SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``value``."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: Optional[bytearray], n: int) -> Optional[bytearray]:
    """Zero the first ``n`` bytes of ``buf``; ``None`` is passed through."""
    if buf is None:
        return None
    return memset(buf, 0, n)


def memcpy(dest: Optional[bytearray], src: Buffer, n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes from ``src`` into the start of ``dest``."""
    if dest is None:
        return None
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``dest`` from ``src_offset`` to ``dest_offset``.

    The regions may overlap; the result is as if the source was copied first.
    """
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if max(dest_offset, src_offset) + n > len(dest):
        raise ValueError("move runs past the end of the buffer")
    dest[dest_offset:dest_offset + n] = dest[src_offset:src_offset + n]
    return dest


def memchr(data: Buffer, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of ``value`` within ``n`` bytes."""
    _check_count(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Difference of the first unequal bytes among the first ``n``, or 0."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Allocate ``count * size`` zeroed bytes.

    A zero count or size yields a one-byte buffer. A total beyond the
    platform size limit raises OverflowError.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray(1)
    total = count * size
    if total > _SIZE_MAX:
        raise OverflowError(f"{count} * {size} bytes overflows the size limit")
    return bytearray(total)
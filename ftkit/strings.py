"""Searching, copying and comparing text with bounded-buffer semantics."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Tuple, Union

Char = Union[int, str]

_NUL = "\0"


def _as_char(c: Char) -> str:
    """Return ``c`` as a one-character string; ints keep only their low byte."""
    if isinstance(c, bool):
        raise TypeError("expected an int code or a single character, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected an int code or a single character, got {type(c).__name__}")


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strlcpy(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the resulting destination text and the full length of ``src``.
    A size of 0 leaves ``dst`` as it was.
    """
    _check_size(size)
    if size == 0:
        return dst, len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting destination text and the length it tried to create:
    ``min(len(dst), size) + len(src)``.
    """
    _check_size(size)
    dst_len = len(dst)
    result = dst
    if size > 0:
        room = max(0, size - 1 - dst_len)
        result = dst + src[:room]
    return result, min(dst_len, size) + len(src)


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Searching for the terminator (``"\\0"`` or 0) gives ``len(s)``; a missing
    character gives None.
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``, ``len(s)`` for the terminator, else None."""
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference of the first unequal pair, the end of a
    string counting as code 0, or 0 when they agree.
    """
    _check_size(n)
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` lying wholly within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    _check_size(length)
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strdup(s: Optional[str]) -> Optional[str]:
    """A copy of ``s``; None gives None."""
    if s is None:
        return None
    return str(s)
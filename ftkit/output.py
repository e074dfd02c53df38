"""Writing characters, text, lines and integers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from ftkit.conversions import itoa


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar_fd(c: Union[int, str], stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream``; an int writes the character of its low byte."""
    if isinstance(c, bool):
        raise TypeError("expected an int code or a single character, got bool")
    if isinstance(c, int):
        ch = chr(c & 0xFF)
    elif isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        ch = c
    else:
        raise TypeError(f"expected an int code or a single character, got {type(c).__name__}")
    _stream(stream).write(ch)


def putstr_fd(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` to ``stream``; None writes nothing."""
    if s is None:
        return
    _stream(stream).write(s)


def putendl_fd(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; None writes only the newline."""
    out = _stream(stream)
    if s is not None:
        out.write(s)
    out.write("\n")


def putnbr_fd(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of a 32-bit signed integer."""
    _stream(stream).write(itoa(n))
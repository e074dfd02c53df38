"""Formatted output supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import operator
import sys
from enum import Enum
from typing import Any, Iterator, List, Optional, TextIO

from ftkit.conversions import itoa

_UINT_MASK = 2**32 - 1
_ULONG_MASK = 2**64 - 1


class Conversion(Enum):
    """The conversion characters recognised after a ``%``."""

    CHAR = "c"
    STR = "s"
    PTR = "p"
    DEC = "d"
    INT = "i"
    UINT = "u"
    LOWER_HEX = "x"
    UPPER_HEX = "X"
    PERCENT = "%"

    @classmethod
    def lookup(cls, spec: Optional[str]) -> Optional["Conversion"]:
        """The conversion named by ``spec``, or None if it names none."""
        if spec is None:
            return None
        try:
            return cls(spec)
        except ValueError:
            return None

    @property
    def takes_argument(self) -> bool:
        """Whether the conversion consumes an argument."""
        return self is not Conversion.PERCENT


def _as_int(value: Any, spec: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"%{spec} expects an integer, got {type(value).__name__}"
        ) from None


def _as_c_int(value: Any, spec: str) -> int:
    """Reduce ``value`` to a 32-bit signed integer, wrapping as a C int would."""
    n = _as_int(value, spec) & _UINT_MASK
    return n - 2**32 if n >= 2**31 else n


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {len(value)} characters")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value.split("\0", 1)[0]


def _format_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    address &= _ULONG_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _convert(conversion: Conversion, value: Any) -> str:
    if conversion is Conversion.CHAR:
        return _format_char(value)
    if conversion is Conversion.STR:
        return _format_string(value)
    if conversion is Conversion.PTR:
        return _format_pointer(value)
    if conversion in (Conversion.DEC, Conversion.INT):
        return itoa(_as_c_int(value, conversion.value))
    if conversion is Conversion.UINT:
        return str(_as_int(value, "u") & _UINT_MASK)
    if conversion is Conversion.LOWER_HEX:
        return format(_as_int(value, "x") & _UINT_MASK, "x")
    if conversion is Conversion.UPPER_HEX:
        return format(_as_int(value, "X") & _UINT_MASK, "X")
    return "%"


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt.split("\0", 1)[0])
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        conversion = Conversion.lookup(spec)
        if conversion is None:
            # An unknown conversion prints a lone percent sign and skips its letter.
            yield "%"
            continue
        if not conversion.takes_argument:
            yield "%"
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        yield _convert(conversion, value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return the text that ``printf`` would write for ``fmt`` and ``args``."""
    pieces: List[str] = list(_pieces(fmt, args))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)
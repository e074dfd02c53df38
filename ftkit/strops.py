"""Building new strings from existing ones: slicing, joining, trimming, splitting, mapping."""

from __future__ import annotations

from typing import Any, Callable, List, MutableSequence, Optional


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Up to ``length`` characters of ``s`` from ``start``.

    A start past the end gives an empty string; None gives None.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    start = min(start, len(s))
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """``s1`` followed by ``s2``; None if either is None."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """``s`` without leading and trailing characters found in ``charset``."""
    if s is None or charset is None:
        return None
    return s.strip(charset)


def split(s: Optional[str], sep: str) -> Optional[List[str]]:
    """Words of ``s`` separated by runs of the single character ``sep``.

    Empty words are dropped; None gives None.
    """
    if s is None:
        return None
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strmapi(s: Optional[str], f: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """Apply ``f(index, char)`` to each character of ``s`` and join the results.

    A ``"\\0"`` returned by ``f`` ends the result there.
    """
    if s is None or f is None:
        return None
    mapped = []
    for index, ch in enumerate(s):
        new = f(index, ch)
        if new == "\0":
            break
        mapped.append(new)
    return "".join(mapped)


def striteri(chars: Optional[MutableSequence[Any]], f: Optional[Callable[[int, Any], Any]]) -> None:
    """Replace each element of ``chars`` with ``f(index, element)``, in place.

    Iteration stops at a terminator element (``"\\0"`` or 0).
    """
    if chars is None or f is None:
        return
    for index, ch in enumerate(chars):
        if ch == "\0" or ch == 0:
            break
        chars[index] = f(index, ch)
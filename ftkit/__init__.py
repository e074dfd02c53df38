"""Character, buffer and string helpers, a linked list and a printf-style formatter."""

__version__ = "0.1.0"
__all__ = [
    "conversions",
    "ctype",
    "linkedlist",
    "memory",
    "output",
    "printf",
    "strings",
    "strops",
]
# ftkit

A small library of everyday helpers for characters, byte buffers, strings,
a singly linked list and a printf-style formatter.

## Modules

- `ftkit.ctype`: ASCII classification and case mapping: `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`.
  Each takes an int code or a one-character string; `to_upper` and
  `to_lower` return the same kind they were given.
- `ftkit.memory`: operations on byte buffers: `memset`, `bzero`, `memcpy`,
  `memmove` (overlapping moves within one `bytearray`), `memchr` (returns an
  index or `None`), `memcmp`, `calloc` (returns a zeroed `bytearray`). Counts
  that are negative or run past a buffer raise `ValueError`.
- `ftkit.conversions`: `atoi` parses a leading decimal integer after optional
  whitespace and one sign; `itoa` gives the decimal text of a 32-bit signed
  integer and raises `OverflowError` outside that range.
- `ftkit.strings`: `strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`,
  `strncmp`, `strnstr`, `strdup`. Searches return an index or `None`;
  `strlcpy` and `strlcat` return a pair of the resulting text and the length
  they tried to create.
- `ftkit.strops`: `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, and
  `striteri`, which replaces the elements of a mutable sequence in place.
- `ftkit.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`, which
  write to a text stream (standard output when none is given).
- `ftkit.linkedlist`: `LinkedList` made of `Node` objects, with
  `push_front`, `push_back`, `last`, `clear`, `iterate`, `map`, `len()` and
  iteration over contents.
- `ftkit.printf`: `sprintf` and `printf` with the conversions
  `%c %s %p %d %i %u %x %X %%`, listed in the `Conversion` enum. An unknown
  conversion letter prints a lone `%` and drops the letter; too few arguments
  raise `TypeError`.

## Installation

```
pip install .
```

## Examples

```python
from ftkit.conversions import atoi, itoa
from ftkit.strops import split, strtrim
from ftkit.printf import sprintf

atoi("   -42abc")          # -42
itoa(-2147483648)          # "-2147483648"
split("  a  b c ", " ")    # ["a", "b", "c"]
strtrim("xxhixx", "x")     # "hi"
sprintf("%s is %d (%x)", "answer", 42, 42)   # "answer is 42 (2a)"
```

`printf` writes to a stream and returns the number of characters written:

```python
import sys
from ftkit.printf import printf

count = printf("%u%%\n", 100, stream=sys.stdout)   # writes "100%\n", returns 5
```

A linked list:

```python
from ftkit.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
doubled = items.map(lambda x: x * 2, None)
list(doubled)              # [0, 2, 4, 6]
len(doubled)               # 4
```

## What it does not do

ftkit is a library only: it installs no command-line program. The formatter
supports no flags, field widths or precision, only the conversions listed
above.

## Running the tests

```
pip install .[test]
pytest
```
"""
The Code Space: every code of a given length over a given alphabet.

Codes are plain strings, one character per symbol. The enumeration is
lexicographic over the alphabet's own ordering ("AAAA", "AAAB", ...), has no
duplicates, and is cached for the lifetime of the process so every component
samples from / filters over the same read-only tuple.
"""

from __future__ import annotations

from functools import lru_cache
from itertools import product
from typing import Tuple

# Symbol pool; an alphabet of size M is the first M characters.
SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"


def make_alphabet(size: int) -> str:
    """Return the first `size` symbols, e.g. make_alphabet(6) -> "ABCDEF"."""
    if size <= 0 or size > len(SYMBOLS):
        raise ValueError(f"alphabet size must be in 1..{len(SYMBOLS)}; got {size}")
    return SYMBOLS[:size]


@lru_cache(maxsize=None)
def enumerate_codes(alphabet: str, length: int) -> Tuple[str, ...]:
    """
    Enumerate all len(alphabet) ** length codes in lexicographic order.

    Examples:
      enumerate_codes("AB", 2) -> ("AA", "AB", "BA", "BB")
    """
    if length <= 0:
        raise ValueError(f"code length must be positive; got {length}")
    if len(set(alphabet)) != len(alphabet):
        raise ValueError(f"alphabet has repeated symbols: {alphabet!r}")
    return tuple("".join(p) for p in product(alphabet, repeat=length))

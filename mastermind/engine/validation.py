"""
Lightweight code validation.

A code is valid iff:
  - it is a string
  - it has exact length N
  - every symbol belongs to the alphabet
"""

from __future__ import annotations

from .errors import InvalidCode


def validate_code(code: object, alphabet: str, N: int) -> bool:
    """Return True if `code` is a well-formed code for (alphabet, N)."""
    if not isinstance(code, str):
        return False
    if len(code) != N:
        return False
    return all(ch in alphabet for ch in code)


def require_code(code: object, alphabet: str, N: int) -> str:
    """Like validate_code, but raise InvalidCode instead of returning False."""
    if not validate_code(code, alphabet, N):
        raise InvalidCode(f"{code!r} is not a length-{N} code over {alphabet!r}")
    return code  # type: ignore[return-value]

"""
Mastermind scoring (feedback) for a single (guess, reference) pair.

Conventions:
  - exact   : same symbol at the same position (black / red peg)
  - partial : symbol present elsewhere in the reference (white / yellow peg)

Algorithm (two-pass, order matters with repeated symbols):
  1) First pass marks every exact position as consumed.
  2) Second pass walks the remaining guess positions left to right; each one
     takes the FIRST unconsumed reference position holding the same symbol.

The result always satisfies exact + partial <= len(guess).
"""

from __future__ import annotations

from typing import NamedTuple


class Feedback(NamedTuple):
    exact: int
    partial: int

    def __str__(self) -> str:
        return f"{self.exact}-{self.partial}"


def score(guess: str, reference: str) -> Feedback:
    """
    Compare `guess` against `reference`.

    Preconditions:
      - len(guess) == len(reference)

    Examples:
      score("ABCD", "AEFB") -> Feedback(exact=1, partial=1)
      score("AABB", "ABCD") -> Feedback(exact=1, partial=1)
    """
    assert len(guess) == len(reference), "Guess and reference must be the same length"

    n = len(guess)
    consumed = [False] * n
    exact = 0

    # Pass 1: exact hits consume the position on both sides.
    for i in range(n):
        if guess[i] == reference[i]:
            exact += 1
            consumed[i] = True

    # Pass 2: first unconsumed matching reference position wins.
    partial = 0
    for i in range(n):
        if guess[i] == reference[i]:
            continue
        for j in range(n):
            if not consumed[j] and guess[i] == reference[j]:
                partial += 1
                consumed[j] = True
                break

    return Feedback(exact, partial)

"""
Guess Selector: pick the most discriminating code from an eligible set.

For each candidate guess g, with S = eligible minus g:
  for every reference r in S, base = score(g, r)
  for every other k in S minus r, count a split when score(k, r) != base
The split total estimates how well g tells pairs of remaining codes apart.
The highest total wins; ties keep the earliest code in the set's order.
"""

from __future__ import annotations

from typing import Sequence

from mastermind.engine.scoring import score


def split_count(guess: str, eligible: Sequence[str]) -> int:
    others = [c for c in eligible if c != guess]
    # localize for speed
    _score = score
    total = 0
    for r in others:
        base = _score(guess, r)
        for k in others:
            if k != r and _score(k, r) != base:
                total += 1
    return total


def choose_next_guess(eligible: Sequence[str]) -> str:
    if not eligible:
        raise ValueError("cannot choose a guess from an empty eligible set")
    if len(eligible) == 1:
        return eligible[0]

    best, best_sum = eligible[0], 0
    for g in eligible:
        s = split_count(g, eligible)
        if s > best_sum:
            best, best_sum = g, s
    return best

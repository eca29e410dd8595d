"""
Variation operators over string codes.

All operators are pure: they take codes (and a seeded random.Random) and
return new strings, leaving their inputs untouched.
"""

from __future__ import annotations

import random
from typing import Tuple


def crossover_point(length: int, rng: random.Random) -> int:
    """Uniform cut in 1..length-2 (degenerates to 1 for codes shorter than 3)."""
    return rng.randint(1, max(1, length - 2))


def crossover(first: str, second: str, rng: random.Random) -> Tuple[str, str]:
    """Single-point crossover; returns both children."""
    cut = crossover_point(len(first), rng)
    return first[:cut] + second[cut:], second[:cut] + first[cut:]


def mutate(code: str, alphabet: str, rng: random.Random) -> str:
    """Replace one random position with a different symbol from the alphabet."""
    pos = rng.randrange(len(code))
    others = [s for s in alphabet if s != code[pos]]
    if not others:
        return code  # single-symbol alphabet
    return code[:pos] + rng.choice(others) + code[pos + 1:]


def permutate(code: str, rng: random.Random) -> str:
    """Swap two distinct random positions."""
    if len(code) < 2:
        return code
    i, j = rng.sample(range(len(code)), 2)
    chars = list(code)
    chars[i], chars[j] = chars[j], chars[i]
    return "".join(chars)


def invert(code: str) -> str:
    """Reverse the whole code."""
    return code[::-1]


def should_do(probability: float, rng: random.Random) -> bool:
    """One Bernoulli trial."""
    return rng.random() < probability

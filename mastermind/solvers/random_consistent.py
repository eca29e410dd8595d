"""
Random Consistent solver.

Strategy:
  - Filter the whole Code Space down to codes consistent with every feedback
    seen so far, then choose one uniformly at random.

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - Baseline for the harness; exhaustive filtering is affordable for small
    alphabets/lengths and gives the evolutionary solver something to beat.
"""

from __future__ import annotations

from typing import List

from mastermind.engine.codespace import enumerate_codes
from mastermind.engine.constraints import filter_candidates
from mastermind.engine.errors import EmptyEligibleSet
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        """
        Pick any consistent code uniformly at random (seeded RNG).

        Args:
            state: dict with keys:
                - "history": GuessRecord list so far (oldest first)
                - "turn":    1-based turn number

        Returns:
            A single code string of length N.
        """
        space = enumerate_codes(self.alphabet, self.N)
        candidates: List[str] = filter_candidates(space, state["history"])

        # Only possible if the recorded feedback contradicts itself.
        if not candidates:
            raise EmptyEligibleSet("no code is consistent with the recorded feedback")

        return candidates[self.rng.randrange(len(candidates))]

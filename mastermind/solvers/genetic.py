"""
Evolutionary solver.

Each turn a fresh PopulationEngine evolves a population of codes toward
consistency with the full history and collects every fully consistent code
it meets. The Guess Selector then reduces that eligible set to the single
code that best splits the remaining possibilities.

The opening move (empty history) is a uniformly random code.
"""

from __future__ import annotations

import logging
from typing import Sequence

from mastermind.engine.codespace import enumerate_codes
from mastermind.engine.constraints import GuessRecord
from mastermind.engine.errors import EmptyEligibleSet
from mastermind.evolution import PopulationEngine, RoundResult, choose_next_guess
from .base import BaseSolver, register

log = logging.getLogger(__name__)


@register
class GeneticSolver(BaseSolver):
    id = "genetic"
    name = "Genetic Algorithm"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self.last_round: RoundResult | None = None
        self.total_generations = 0

    def reset(self, **kwargs) -> None:
        super().reset(**kwargs)
        self.last_round = None
        self.total_generations = 0

    def engine_for(self, history: Sequence[GuessRecord]) -> PopulationEngine:
        """A fresh engine for one round; drive it with generations() to stay responsive."""
        space = enumerate_codes(self.alphabet, self.N)
        return PopulationEngine(history, self.config, rng=self.rng, space=space)

    def start_round(self, history: Sequence[GuessRecord]) -> str:
        """Return the next guess for `history` (oldest record first)."""
        if not history:
            self.last_round = None
            return self.rng.choice(enumerate_codes(self.alphabet, self.N))

        result = self.engine_for(history).run()
        self.last_round = result
        self.total_generations += result.generations
        if not result.eligible:
            raise EmptyEligibleSet(
                f"no consistent code found after {result.generations} generation(s)")

        guess = choose_next_guess(result.eligible)
        log.debug("turn %d: %d eligible, guessing %s",
                  len(history) + 1, len(result.eligible), guess)
        return guess

    def next_guess(self, state: dict) -> str:
        return self.start_round(state["history"])

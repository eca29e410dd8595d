"""
Solver/game configuration.

A single dataclass carries every tunable of the guessing engine. Values are
checked once, at construction, so the hot loops never re-validate.
"""

from __future__ import annotations

from dataclasses import dataclass

from .codespace import SYMBOLS, make_alphabet
from .errors import InvalidConfiguration


@dataclass(frozen=True)
class SolverConfig:
    alphabet_size: int = 6
    code_length: int = 4
    population_size: int = 150
    max_generations: int = 250
    eligible_cap: int = 110
    mutation_prob: float = 0.2
    permutation_prob: float = 0.05
    inversion_prob: float = 0.05
    fitness_weight_a: int = 1
    fitness_weight_b: int = 2
    # Absolute stop for the "keep searching" override (see PopulationEngine).
    generation_ceiling: int = 5000

    def __post_init__(self) -> None:
        if self.alphabet_size <= 0 or self.alphabet_size > len(SYMBOLS):
            raise InvalidConfiguration(
                f"alphabet_size must be in 1..{len(SYMBOLS)}; got {self.alphabet_size}")
        if self.code_length <= 0:
            raise InvalidConfiguration(f"code_length must be positive; got {self.code_length}")
        if self.population_size < 2:
            raise InvalidConfiguration(
                f"population_size must be at least 2; got {self.population_size}")
        for name in ("max_generations", "eligible_cap"):
            if getattr(self, name) <= 0:
                raise InvalidConfiguration(f"{name} must be positive; got {getattr(self, name)}")
        if self.generation_ceiling < self.max_generations:
            raise InvalidConfiguration(
                f"generation_ceiling ({self.generation_ceiling}) must be >= "
                f"max_generations ({self.max_generations})")
        for name in ("mutation_prob", "permutation_prob", "inversion_prob"):
            p = getattr(self, name)
            if not 0.0 <= p <= 1.0:
                raise InvalidConfiguration(f"{name} must be within [0, 1]; got {p}")
        if self.fitness_weight_a <= 0 or self.fitness_weight_b <= 0:
            raise InvalidConfiguration("fitness weights must be positive")

    @property
    def alphabet(self) -> str:
        return make_alphabet(self.alphabet_size)

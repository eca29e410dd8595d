"""
Population Engine: the generational search for codes consistent with history.

One round of search (one call to run(), or one pass over generations()):

  evaluate   score every member against the history; eligible codes go into
             the EligibleSet (deduplicated, capped)
  terminate? generation budget spent OR EligibleSet full; unless the history
             has more than one guess and nothing eligible was found yet, in
             which case the search keeps going up to `generation_ceiling`
  select     sort ascending by fitness; the two WORST members are the parents
  recombine  single-point crossover, then independent mutation / permutation /
             inversion trials on each child
  replace    the children overwrite the first two slots
  refill     drop duplicate codes and top up with unused codes from the
             Code Space, so the population size never changes

Each generation is one step(); generations() yields after every step so an
interactive caller can interleave its own work or abandon the round.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, Iterator, List, Sequence, Tuple

from mastermind.engine.codespace import enumerate_codes
from mastermind.engine.config import SolverConfig
from mastermind.engine.constraints import GuessRecord
from mastermind.engine.errors import ExhaustedCodeSpace
from .candidate import Candidate
from .operators import crossover, invert, mutate, permutate, should_do

log = logging.getLogger(__name__)


class EligibleSet:
    """Insertion-ordered, deduplicated, capped set of eligible codes."""

    def __init__(self, cap: int):
        self.cap = cap
        self._codes: Dict[str, None] = {}

    def add(self, code: str) -> bool:
        if self.full or code in self._codes:
            return False
        self._codes[code] = None
        return True

    @property
    def full(self) -> bool:
        return len(self._codes) >= self.cap

    def codes(self) -> List[str]:
        return list(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._codes)

    def __contains__(self, code: object) -> bool:
        return code in self._codes


class Population:
    """Fixed-size list of unique Candidates drawn from the Code Space."""

    def __init__(self, config: SolverConfig, rng: random.Random,
                 space: Sequence[str] | None = None):
        self.config = config
        self.rng = rng
        self.alphabet = config.alphabet
        self.size = config.population_size
        self.space = space if space is not None else enumerate_codes(self.alphabet,
                                                                     config.code_length)
        if self.size > len(self.space):
            raise ExhaustedCodeSpace(
                f"population of {self.size} needs more codes than the "
                f"{len(self.space)} in the Code Space")
        self.members: List[Candidate] = [Candidate(c) for c in rng.sample(self.space, self.size)]

    def evaluate(self, history: Sequence[GuessRecord], eligible: EligibleSet) -> int:
        """Recompute every member's fitness; return how many new codes became eligible."""
        cfg = self.config
        added = 0
        for member in self.members:
            member.evaluate(history, weight_a=cfg.fitness_weight_a, weight_b=cfg.fitness_weight_b)
            if member.eligible and eligible.add(member.code):
                added += 1
        return added

    def sort(self) -> None:
        self.members.sort(key=lambda m: m.fitness)

    def breed(self) -> Tuple[str, str]:
        """Recombine the two worst members and put the children in slots 0 and 1."""
        cfg = self.config
        worst, runner_up = self.members[-1], self.members[-2]
        children = []
        for child in crossover(worst.code, runner_up.code, self.rng):
            if should_do(cfg.mutation_prob, self.rng):
                child = mutate(child, self.alphabet, self.rng)
            if should_do(cfg.permutation_prob, self.rng):
                child = permutate(child, self.rng)
            if should_do(cfg.inversion_prob, self.rng):
                child = invert(child)
            children.append(child)
        self.members[0:2] = [Candidate(c) for c in children]
        return children[0], children[1]

    def refill(self) -> int:
        """Deduplicate by code and top up from unused codes; return how many were added."""
        unique = list(dict.fromkeys(m.code for m in self.members))
        missing = self.size - len(unique)
        added = max(missing, 0)
        if missing > 0:
            present = set(unique)
            free = len(self.space) - len(present)
            if missing > free:
                raise ExhaustedCodeSpace(
                    f"need {missing} unused codes but only {free} remain")
            if missing * 4 <= free:
                # sparse: rejection-sample instead of scanning the whole space
                while missing:
                    code = self.rng.choice(self.space)
                    if code not in present:
                        present.add(code)
                        unique.append(code)
                        missing -= 1
            else:
                pool = [c for c in self.space if c not in present]
                unique.extend(self.rng.sample(pool, missing))
        self.members = [Candidate(c) for c in unique]
        return added

    def codes(self) -> List[str]:
        return [m.code for m in self.members]

    def __len__(self) -> int:
        return len(self.members)


@dataclass
class GenerationReport:
    generation: int      # generations completed so far (1-based)
    best_fitness: int
    worst_fitness: int
    eligible: int        # EligibleSet size after this generation
    done: bool


@dataclass
class RoundResult:
    eligible: List[str]
    generations: int
    hit_ceiling: bool = False


class PopulationEngine:
    """
    One search round over a fixed history.

    Build a fresh engine for every round; the engine is single-use and must
    not be stepped from two places at once.
    """

    def __init__(self, history: Sequence[GuessRecord], config: SolverConfig | None = None, *,
                 rng: random.Random | None = None, space: Sequence[str] | None = None):
        self.config = config or SolverConfig()
        self.history: List[GuessRecord] = list(history)
        self.rng = rng or random.Random()
        self.population = Population(self.config, self.rng, space)
        self.eligible = EligibleSet(self.config.eligible_cap)
        self.generation = 0
        self.done = False
        self.hit_ceiling = False
        self._busy = False

    def _should_stop(self) -> bool:
        cfg = self.config
        if self.eligible.full:
            return True
        keep_searching = len(self.history) > 1 and len(self.eligible) == 0
        if self.generation >= cfg.max_generations and not keep_searching:
            return True
        if self.generation >= cfg.generation_ceiling:
            self.hit_ceiling = True
            log.warning("no eligible code after %d generations; giving up", self.generation)
            return True
        return False

    def step(self) -> GenerationReport:
        """Run exactly one generation."""
        if self.done:
            raise RuntimeError("search round already finished")
        if self._busy:
            raise RuntimeError("PopulationEngine.step() re-entered")
        self._busy = True
        try:
            pop = self.population
            pop.evaluate(self.history, self.eligible)
            self.generation += 1
            pop.sort()
            best, worst = pop.members[0].fitness, pop.members[-1].fitness
            if self._should_stop():
                self.done = True
            else:
                pop.breed()
                pop.refill()
        finally:
            self._busy = False

        if self.generation % 50 == 0 or self.done:
            log.debug("generation %d: best=%d worst=%d eligible=%d",
                      self.generation, best, worst, len(self.eligible))
        return GenerationReport(self.generation, best, worst, len(self.eligible), self.done)

    def generations(self) -> Iterator[GenerationReport]:
        """Yield after every generation until the round terminates."""
        while not self.done:
            yield self.step()

    def result(self) -> RoundResult:
        return RoundResult(self.eligible.codes(), self.generation, self.hit_ceiling)

    def run(self) -> RoundResult:
        for _ in self.generations():
            pass
        res = self.result()
        log.info("round over after %d generation(s): %d eligible code(s)",
                 res.generations, len(res.eligible))
        return res

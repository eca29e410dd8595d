"""
A candidate code and its fitness against the guess history.

fitness = A * exact_diff + partial_diff + B * N * index_sum

  exact_diff   : sum over history of |predicted.exact   - recorded.exact|
  partial_diff : sum over history of |predicted.partial - recorded.partial|
  index_sum    : 0 + 1 + ... + (len(history) - 1)

index_sum only depends on the history length, so within one generation it is
the same constant for every candidate and never changes the ordering.
Lower fitness means more consistent; `eligible` is True iff both diff totals
are zero.
"""

from __future__ import annotations

from dataclasses import dataclass

from mastermind.engine.constraints import History
from mastermind.engine.scoring import score


@dataclass
class Candidate:
    code: str
    fitness: int = 0
    eligible: bool = False

    def evaluate(self, history: History, *, weight_a: int = 1, weight_b: int = 2) -> int:
        exact_diff = 0
        partial_diff = 0
        index_sum = 0
        for i, (guess, feedback) in enumerate(history):
            predicted = score(guess, self.code)
            exact_diff += abs(predicted.exact - feedback.exact)
            partial_diff += abs(predicted.partial - feedback.partial)
            index_sum += i

        self.eligible = exact_diff == 0 and partial_diff == 0
        self.fitness = weight_a * exact_diff + partial_diff + weight_b * len(self.code) * index_sum
        return self.fitness

"""
Candidate filtering given game history.

Given:
  - a pool of codes (usually the whole Code Space)
  - a history of (guess, feedback) records

Return:
  - codes that are consistent with ALL feedback seen so far.

The evolutionary solver reaches the same notion of consistency through
Candidate.eligible; this exhaustive filter is what the baseline solver and the
tests use as ground truth.
"""

from typing import Iterable, List, NamedTuple, Sequence

from .scoring import Feedback, score


class GuessRecord(NamedTuple):
    """One played round: the code guessed and the feedback it received."""
    guess: str
    feedback: Feedback


# History is the ordered sequence of records produced by the game loop.
History = Sequence[GuessRecord]


def is_consistent(code: str, history: Iterable[GuessRecord]) -> bool:
    """True iff `code`, had it been the secret, reproduces every recorded feedback."""
    for guess, feedback in history:
        if score(guess, code) != feedback:
            return False
    return True


def filter_candidates(codes: Iterable[str], history: History) -> List[str]:
    """
    Keep only codes that would produce exactly the recorded feedback for every
    (guess, feedback) in `history`.

    Returns:
      List[str] of consistent codes (order preserved as in `codes`).
    """
    return [c for c in codes if is_consistent(c, history)]

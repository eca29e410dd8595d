"""
Experiment harness core primitives.

- run_case:  play a single game (one hidden secret) with a given solver.
- run_batch: play many games in sequence (optionally a sample prefix).
- Enforces the turn limit at the harness layer.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations
import logging
import time
from typing import Dict, Iterable, List

from mastermind.engine import GuessRecord, Session, SolverConfig
from mastermind.engine.errors import EmptyEligibleSet

log = logging.getLogger(__name__)

# Default turn budget per game.
MAX_TURNS = 10


def _assert_turns(max_turns: int) -> None:
    """Guardrail: a game needs at least one turn."""
    if max_turns < 1:
        raise ValueError(f"max_turns must be at least 1; got {max_turns}")


def run_case(
        solver,
        secret: str,
        *,
        config: SolverConfig | None = None,
        max_turns: int = MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the solver wins or the turn budget is exhausted.

    Args:
        solver:    an object implementing BaseSolver with next_guess(state)
        secret:    the hidden code for this case
        config:    alphabet/length and search settings shared by solver and session
        max_turns: turn budget (default 10)
        seed:      RNG seed to make the solver's random choices reproducible

    Returns:
        dict with keys:
            secret (str), success (bool), guesses (int), time_ms (float),
            history (list[GuessRecord]), outcome (str), generations (int)
    """
    _assert_turns(max_turns)
    config = config or SolverConfig()

    solver.reset(config=config, seed=seed)
    session = Session(config, secret=secret)

    history: List[GuessRecord] = []
    outcome = "turn_limit"

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        state = {"turn": turn, "history": list(history)}
        try:
            guess = solver.next_guess(state)
        except EmptyEligibleSet as e:
            log.info("secret %s: %s", secret, e)
            outcome = "no_candidates"
            break

        fb = session.score(guess)
        history.append(GuessRecord(guess, fb))

        if session.won:
            outcome = "win"
            break

    dt = (time.perf_counter() - t0) * 1000.0
    if not session.concluded:
        session.conclude()
    return {
        "secret": session.secret,
        "success": outcome == "win",
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
        "outcome": outcome,
        "generations": getattr(solver, "total_generations", 0),
    }


def run_batch(
        solver,
        secrets: Iterable[str],
        *,
        config: SolverConfig | None = None,
        max_turns: int = MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    secrets are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    _assert_turns(max_turns)

    pool = list(secrets)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, secret in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, secret, config=config, max_turns=max_turns, seed=case_seed))
    return out

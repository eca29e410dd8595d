"""
Aggregate statistics over a batch of game results.

Guess-count statistics are computed over won games only; a lost game has no
meaningful "guesses to solve".
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np


def summarize(results: List[Dict]) -> Dict:
    games = len(results)
    wins = np.array([r["guesses"] for r in results if r["success"]], dtype=float)
    times = np.array([r["time_ms"] for r in results], dtype=float)

    out = {
        "games": games,
        "wins": int(wins.size),
        "win_rate": float(wins.size / games) if games else 0.0,
        "mean_guesses": None,
        "median_guesses": None,
        "p90_guesses": None,
        "max_guesses": None,
        "mean_time_ms": float(times.mean()) if times.size else 0.0,
    }
    if wins.size:
        out.update(
            mean_guesses=float(wins.mean()),
            median_guesses=float(np.median(wins)),
            p90_guesses=float(np.percentile(wins, 90)),
            max_guesses=int(wins.max()),
        )
    return out


def pretty_stats(stats: Dict) -> str:
    """
    One-liner for the console, e.g.
        games=100 | wins=100 (100.0%) | guesses mean=4.71 median=5.0 p90=6.0 max=7 | 212.4 ms/game
    """
    head = f"games={stats['games']} | wins={stats['wins']} ({100.0 * stats['win_rate']:.1f}%)"
    if stats["mean_guesses"] is None:
        guesses = "guesses n/a"
    else:
        guesses = (f"guesses mean={stats['mean_guesses']:.2f} median={stats['median_guesses']:.1f} "
                   f"p90={stats['p90_guesses']:.1f} max={stats['max_guesses']}")
    return f"{head} | {guesses} | {stats['mean_time_ms']:.1f} ms/game"

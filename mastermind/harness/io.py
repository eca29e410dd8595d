"""
Run outputs: one CSV row per game plus a JSON manifest per run.

Feedback is written as "<exact>-<partial>" behind an apostrophe so
spreadsheet apps don't turn "1-2" into a date.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _excel_safe_feedback(fb) -> str:
    """
    Render feedback as text that spreadsheets leave alone.
    Example: Feedback(1, 2) -> "'1-2"
    """
    return f"'{fb.exact}-{fb.partial}"


def write_csv(results: List[Dict], path: str, max_turns: int, N: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, N, secret, success, outcome, guesses, generations, time_ms,
      guess_1, fb_1, guess_2, fb_2, ..., guess_max_turns, fb_max_turns

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "N", "secret", "success", "outcome", "guesses", "generations", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"fb_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "N": N,
                "secret": r["secret"],
                "success": r["success"],
                "outcome": r.get("outcome", ""),
                "guesses": r["guesses"],
                "generations": r.get("generations", 0),
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, fb = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"fb_{i}"] = _excel_safe_feedback(fb)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"fb_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """Dump the run manifest (config, secrets report, stats) as indented JSON."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    # e.g. 20261019T111200Z
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short HEAD hash, or 'unknown' outside a git checkout."""
    try:
        out = subprocess.run(["git", "rev-parse", "--short", "HEAD"],
                             capture_output=True, text=True, check=True)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.stdout.strip()

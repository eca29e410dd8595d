# apps/cli/run.py
"""
CLI entry point for running mastermindAI experiments.

This script:
  1) Picks the secrets: a validated secrets file (prints counts + SHA) or
     `--games` random codes drawn with the base seed.
  2) Instantiates the requested solver with a SolverConfig built from the flags.
  3) Plays every game with a live progress indicator and writes:
       - CSV:  per-game results + guess/feedback history columns
       - JSON: manifest with config, secrets report, stats, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from dataclasses import asdict
from pathlib import Path

from tqdm import tqdm

from mastermind.datasets import pretty_summary, read_secrets, validate_secrets
from mastermind.engine import SolverConfig, enumerate_codes
from mastermind.engine.errors import InvalidConfiguration
from mastermind.harness import pretty_stats, run_case, summarize
from mastermind.harness.core import MAX_TURNS
from mastermind.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from mastermind.solvers import create_solver, get_solver_ids


def _config_from_args(args) -> SolverConfig:
    return SolverConfig(
        alphabet_size=args.alphabet_size,
        code_length=args.length,
        population_size=args.population,
        max_generations=args.max_generations,
        eligible_cap=args.eligible_cap,
        mutation_prob=args.mutation,
        permutation_prob=args.permutation,
        inversion_prob=args.inversion,
        fitness_weight_a=args.weight_a,
        fitness_weight_b=args.weight_b,
        generation_ceiling=args.ceiling,
    )


def main():
    """
    Parse CLI args, pick secrets, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())
    defaults = SolverConfig()

    ap = argparse.ArgumentParser(description="mastermindAI: run solver experiments")
    ap.add_argument("--solver", default="genetic", help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--alphabet-size", type=int, default=defaults.alphabet_size,
                    help="number of symbols (M)")
    ap.add_argument("--length", type=int, default=defaults.code_length, help="code length (N)")
    ap.add_argument("--population", type=int, default=defaults.population_size)
    ap.add_argument("--max-generations", type=int, default=defaults.max_generations)
    ap.add_argument("--eligible-cap", type=int, default=defaults.eligible_cap)
    ap.add_argument("--mutation", type=float, default=defaults.mutation_prob)
    ap.add_argument("--permutation", type=float, default=defaults.permutation_prob)
    ap.add_argument("--inversion", type=float, default=defaults.inversion_prob)
    ap.add_argument("--weight-a", type=int, default=defaults.fitness_weight_a)
    ap.add_argument("--weight-b", type=int, default=defaults.fitness_weight_b)
    ap.add_argument("--ceiling", type=int, default=defaults.generation_ceiling,
                    help="absolute generation limit per turn")
    ap.add_argument("--secrets", help="path to a secrets file (one code per line)")
    ap.add_argument("--games", type=int, default=50,
                    help="number of random secrets when --secrets is not given")
    ap.add_argument("--max-turns", type=int, default=MAX_TURNS, help="turn budget per game")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="Show run progress (auto=bar on a terminal, else plain text).")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = _config_from_args(args)
    except InvalidConfiguration as e:
        ap.error(str(e))

    # 1) Secrets: validated file, or a deterministic random sample
    rng = random.Random(args.seed)
    rep = None
    if args.secrets:
        rep = validate_secrets(args.secrets, config.alphabet_size, config.code_length)
        print(pretty_summary(rep))
        if not rep["passed"]:
            raise SystemExit("Secrets file failed validation: " + "; ".join(rep["issues"]))
        cases = read_secrets(args.secrets)
    else:
        space = enumerate_codes(config.alphabet, config.code_length)
        cases = [rng.choice(space) for _ in range(args.games)]

    # 2) Instantiate solver by id
    solver = create_solver(args.solver)

    total = len(cases)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    # 4) Run batch with live progress
    for idx, secret in enumerate(iterator, 1):
        # Derive a per-game seed so runs are reproducible and independent
        per_seed = args.seed + idx * 1013904223
        r = run_case(solver, secret, config=config, max_turns=args.max_turns, seed=per_seed)
        r["solver_id"] = solver.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    stats = summarize(results)
    print(pretty_stats(stats))

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns, N=config.code_length)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": {**vars(args), "solver_config": asdict(config)},
        "secrets": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "stats": stats,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()

"""
Write a reproducible secrets file for batch runs.

Features:
- Draws codes uniformly from the Code Space with a fixed seed.
- Optional --unique to sample without replacement (capped at the space size).
- Writes one code per line.

Usage:
    python -m script.make_secrets --out data/secrets_6x4.txt --count 200 --seed 7
"""

import argparse
import random

from mastermind.datasets import write_secrets
from mastermind.engine import enumerate_codes, make_alphabet


def main():
    ap = argparse.ArgumentParser(description="Generate a secrets file for mastermindAI runs.")
    ap.add_argument("--out", required=True, help="output .txt file")
    ap.add_argument("--count", type=int, default=100, help="number of secrets")
    ap.add_argument("--alphabet-size", type=int, default=6)
    ap.add_argument("--length", type=int, default=4)
    ap.add_argument("--seed", type=int, default=7)
    ap.add_argument("--unique", action="store_true", help="no repeated secrets")
    args = ap.parse_args()

    space = enumerate_codes(make_alphabet(args.alphabet_size), args.length)
    rng = random.Random(args.seed)
    if args.unique:
        codes = rng.sample(space, min(args.count, len(space)))
    else:
        codes = [rng.choice(space) for _ in range(args.count)]

    path = write_secrets(codes, args.out)
    print(f"Wrote {len(codes)} secrets -> {path}")


if __name__ == "__main__":
    main()

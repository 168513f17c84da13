#!/usr/bin/env python3
"""
Die uniformity check.

Rolls the die many times through reroll() and reports:
1. Count and frequency per face
2. Chi-square statistic against the uniform distribution

Usage:
    python scripts/check_uniformity.py [--rolls N] [--seed S]
"""

import argparse
import random
import sys
from collections import Counter
from pathlib import Path

# Add project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.backend.models.die import FACES
from src.backend.services.dice import initialize, reroll

# Critical value for 5 degrees of freedom at p = 0.05
CHI_SQUARE_CRITICAL = 11.07


def print_header(title: str) -> None:
    print(f"\n{'=' * 40}")
    print(f"  {title}")
    print(f"{'=' * 40}\n")


def roll_many(rolls: int, seed: int | None) -> Counter:
    rng = random.Random(seed)
    state = initialize()
    counts: Counter = Counter()
    for _ in range(rolls):
        state = reroll(state, rng)
        counts[state.current_face] += 1
    return counts


def chi_square(counts: Counter, rolls: int) -> float:
    expected = rolls / len(FACES)
    return sum((counts[face] - expected) ** 2 / expected for face in FACES)


def main() -> int:
    parser = argparse.ArgumentParser(description="Check that die rolls are uniform")
    parser.add_argument("--rolls", type=int, default=10_000, help="number of rolls")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random source")
    args = parser.parse_args()

    if args.rolls <= 0:
        parser.error("--rolls must be positive")

    print_header(f"{args.rolls} rolls (seed={args.seed})")
    counts = roll_many(args.rolls, args.seed)

    for face in FACES:
        print(f"  {face}: {counts[face]:>7}  ({counts[face] / args.rolls:.3%})")

    statistic = chi_square(counts, args.rolls)
    print(f"\n  chi-square = {statistic:.3f} (critical {CHI_SQUARE_CRITICAL} at p=0.05)")

    if statistic > CHI_SQUARE_CRITICAL:
        print("❌ Distribution deviates from uniform")
        return 1
    print("✅ Distribution is consistent with uniform")
    return 0


if __name__ == "__main__":
    sys.exit(main())

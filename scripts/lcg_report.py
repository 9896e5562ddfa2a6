#!/usr/bin/env python3
"""
report the rotation parameters for a pool size.

usage:
    python scripts/lcg_report.py                  # uses data/targets.json
    python scripts/lcg_report.py --pool-size 337

checks that every pool slot is hit exactly once over N consecutive days
and prints the first few slots so the rotation can be eyeballed.
"""

import argparse
import sys
from pathlib import Path

# add parent dir to path so we can import wordrank
sys.path.insert(0, str(Path(__file__).parent.parent))

from wordrank import Config, InitializationError, WordPool
from wordrank.embeddings import load_targets
from wordrank.lcg import (
    calculate_overall_score,
    evaluate_lcg_quality,
    find_optimal_lcg_params,
    generate_direct_sequence,
)
from wordrank.logging_config import configure_logging


def main():
    parser = argparse.ArgumentParser(description="report LCG rotation parameters")
    parser.add_argument("--pool-size", type=int, default=None, help="pool size N (default: from targets.json)")
    parser.add_argument("--data-dir", type=Path, default=Path("data"), help="data directory")
    parser.add_argument("--days", type=int, default=10, help="number of slots to print")
    parser.add_argument("--log-level", type=str, default=None, help="logging level")

    args = parser.parse_args()
    configure_logging(args.log_level)

    n = args.pool_size
    if n is None:
        config = Config(data_dir=args.data_dir)
        try:
            history, pool = load_targets(config.targets_path)
        except InitializationError as e:
            print(f"error: {e}")
            sys.exit(1)
        n = WordPool(history, pool).remaining_pool_count()
        print(f"active pool from {config.targets_path}: {n:,} words")

    if n < 2:
        print(f"pool size {n} needs no rotation")
        return

    params = find_optimal_lcg_params(n)
    quality = evaluate_lcg_quality(params)

    print(f"\nparameters: n={params.n} a={params.a} b={params.b}")
    print(f"  hull-dobell compliant: {quality.hull_dobell_compliant}")
    print(f"  period (direct form):  {quality.period}")
    print(f"  multiplier quality:    {quality.multiplier_quality:.1f}")
    print(f"  overall score:         {calculate_overall_score(quality):.1f}")

    sequence = generate_direct_sequence(params, n)
    distinct = len(set(sequence))
    status = "ok" if distinct == n else "BROKEN"
    print(f"\nbijection over {n:,} days: {distinct:,} distinct slots ({status})")

    print(f"\nfirst {min(args.days, n)} slots:")
    for day, slot in enumerate(sequence[: args.days]):
        print(f"  day {day:4d} -> slot {slot}")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Time full discard solves.

The crib-inclusive solve is the only expensive path (roughly 680k hand
evaluations per deal); this script reports wall-clock time per deal.

Usage:
    python scripts/benchmark.py --deals 10 --workers 4
"""

import argparse
import random
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from cribbage.shared.config_loader import load_config  # noqa: E402
from cribbage.solver.discard import DiscardSolver  # noqa: E402
from cribbage.solver.practice import deal_practice_hand  # noqa: E402


def main():
    parser = argparse.ArgumentParser(description="Benchmark the cribbage discard solver")
    parser.add_argument("--deals", type=int, default=5, help="Number of random deals")
    parser.add_argument("--workers", type=int, default=1, help="Worker processes per solve")
    parser.add_argument("--seed", type=int, default=0, help="Deal seed")
    parser.add_argument("--no-crib", action="store_true", help="Skip crib averaging")
    parser.add_argument("--config", type=Path, default=None, help="Optional YAML config")
    args = parser.parse_args()

    config = load_config(args.config, solver__num_workers=args.workers)
    solver = DiscardSolver(config.solver)
    rng = random.Random(args.seed)
    include_crib = not args.no_crib

    # Warm up the JIT so compile time is not counted
    solver.evaluate(deal_practice_hand(rng), False, include_crib)

    timings = []
    for i in range(args.deals):
        six = deal_practice_hand(rng)
        start = time.perf_counter()
        best = solver.evaluate(six, is_dealer=i % 2 == 0, include_crib=include_crib)[0]
        elapsed = time.perf_counter() - start
        timings.append(elapsed)
        print(
            f"{' '.join(card.id for card in six):<24} "
            f"keep {' '.join(card.id for card in best.keep):<16} "
            f"EV {best.expected_value:6.2f}  {elapsed:6.3f}s"
        )

    print("=" * 60)
    print(f"Mean: {sum(timings) / len(timings):.3f}s  Max: {max(timings):.3f}s")


if __name__ == "__main__":
    main()

"""
Parallel split evaluation.

The 15 keep/discard splits are independent, so they can be scored in separate
processes. Results come back in split order, which keeps the final ranking
identical to the serial path.
"""

import logging
import multiprocessing as mp

from tqdm import tqdm

from cribbage.shared.config import SolverConfig

logger = logging.getLogger(__name__)


def _evaluate_split(args):
    """
    Worker function: evaluate one split in a separate process.

    Args:
        args: Tuple of (keep, discards, pool, is_dealer, include_crib, config)

    Returns:
        DiscardSuggestion for the split
    """
    from cribbage.solver.discard import DiscardSolver

    keep, discards, pool, is_dealer, include_crib, config = args
    return DiscardSolver(config).evaluate_keep(keep, discards, pool, is_dealer, include_crib)


def evaluate_splits_parallel(splits, pool, is_dealer: bool, include_crib: bool, config: SolverConfig):
    """
    Evaluate splits with a process pool.

    Args:
        splits: List of (keep, discards) tuples
        pool: Unseen cards
        is_dealer: Whether we own the crib
        include_crib: Whether to average the crib
        config: Solver configuration (num_workers, show_progress)

    Returns:
        List of DiscardSuggestion in the same order as `splits`
    """
    num_workers = min(config.num_workers, len(splits)) or 1
    logger.info(f"Evaluating {len(splits)} splits with {num_workers} workers...")

    work_args = [
        (keep, discards, list(pool), is_dealer, include_crib, config) for keep, discards in splits
    ]

    with mp.Pool(processes=num_workers) as worker_pool:
        # imap preserves submission order
        return list(
            tqdm(
                worker_pool.imap(_evaluate_split, work_args),
                total=len(work_args),
                desc="Discard splits",
                unit="split",
                disable=not config.show_progress,
            )
        )

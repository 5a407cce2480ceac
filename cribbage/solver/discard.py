"""
Discard solver: rank every 4-of-6 keep by expected value.

For each keep/discard split the solver averages the keep's score over every
unseen starter and, optionally, the crib's score over every unseen pair that
could join our discards in the crib and every remaining starter.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from cribbage.game.cards import Card, remaining_cards
from cribbage.game.combinatorics import choose_k
from cribbage.shared.config import SolverConfig
from cribbage.solver.kernels import (
    ORDER_TABLE,
    PIP_TABLE,
    SUIT_TABLE,
    card_indices,
    crib_totals,
    hand_scores,
)

logger = logging.getLogger(__name__)

DEAL_SIZE = 6
KEEP_SIZE = 4


class InvalidCardsError(ValueError):
    """Raised when a card selection has duplicates or cards outside the deal."""


@dataclass(frozen=True)
class StarterScore:
    """A candidate starter and the keep's total if it were cut."""

    card: Card
    score: int


@dataclass(frozen=True)
class DiscardSuggestion:
    """
    Evaluation of one keep/discard split.

    Attributes:
        keep: The four cards kept
        discards: The two cards thrown to the crib
        hand_average: Mean hand score over the unseen starters
        crib_average: Mean crib score (0 when the crib is ignored)
        expected_value: hand_average plus (dealer) or minus (pone) crib_average
        best_starters: Highest scoring starters, best first
        min_hand_score: Worst hand score over the unseen starters
    """

    keep: tuple[Card, ...]
    discards: tuple[Card, ...]
    hand_average: float
    crib_average: float
    expected_value: float
    best_starters: tuple[StarterScore, ...]
    min_hand_score: int

    def to_dict(self) -> dict:
        return {
            "keep": [card.id for card in self.keep],
            "discards": [card.id for card in self.discards],
            "hand_average": self.hand_average,
            "crib_average": self.crib_average,
            "expected_value": self.expected_value,
            "best_starters": [
                {"card": entry.card.id, "score": entry.score} for entry in self.best_starters
            ],
            "min_hand_score": self.min_hand_score,
        }


def average_hand_scores(
    keep: Sequence[Card],
    pool: Sequence[Card],
    num_best: int = 3,
) -> tuple[float, tuple[StarterScore, ...], int]:
    """
    Score `keep` against every starter in `pool`.

    Args:
        keep: Four kept cards
        pool: Candidate starters
        num_best: How many top starters to report

    Returns:
        (average score, best starters, minimum score); (0.0, (), 0) for an
        empty pool
    """
    if not pool:
        return 0.0, (), 0

    k0, k1, k2, k3 = (card.index for card in keep)
    scores = hand_scores(PIP_TABLE, ORDER_TABLE, SUIT_TABLE, k0, k1, k2, k3, card_indices(pool))

    # Stable sort keeps pool order among equal scores
    ranked = np.argsort(-scores, kind="stable")[:num_best]
    best = tuple(StarterScore(card=pool[i], score=int(scores[i])) for i in ranked)

    return int(scores.sum()) / len(pool), best, int(scores.min())


def expected_crib_value(discards: Sequence[Card], pool: Sequence[Card], is_dealer: bool) -> float:
    """
    Average crib score for our two discards.

    When we are not the dealer, opponent pairs containing a five or a pair of
    the same rank are assumed never to be thrown and are skipped.
    """
    if not pool:
        return 0.0

    d0, d1 = (card.index for card in discards)
    total, count = crib_totals(
        PIP_TABLE,
        ORDER_TABLE,
        SUIT_TABLE,
        d0,
        d1,
        card_indices(pool),
        not is_dealer,
    )
    return int(total) / int(count) if count else 0.0


def combine_expected_value(
    hand_average: float, crib_average: float, is_dealer: bool, include_crib: bool
) -> float:
    if not include_crib:
        return hand_average
    if is_dealer:
        return hand_average + crib_average
    return hand_average - crib_average


def rank_suggestions(suggestions: Sequence[DiscardSuggestion]) -> list[DiscardSuggestion]:
    """Sort by expected value, best first; ties keep their original order."""
    return sorted(suggestions, key=lambda suggestion: suggestion.expected_value, reverse=True)


def check_distinct(cards: Sequence[Card]) -> None:
    ids = [card.id for card in cards]
    if len(set(ids)) != len(ids):
        duplicates = sorted({card_id for card_id in ids if ids.count(card_id) > 1})
        raise InvalidCardsError(f"Duplicate cards: {', '.join(duplicates)}")


class DiscardSolver:
    """
    Exhaustive keep/discard evaluator.

    Usage:
        solver = DiscardSolver()
        top = solver.evaluate(six_cards, is_dealer=True, include_crib=True)
    """

    def __init__(self, config: SolverConfig | None = None):
        self.config = config or SolverConfig()

    def evaluate_keep(
        self,
        keep: Sequence[Card],
        discards: Sequence[Card],
        pool: Sequence[Card],
        is_dealer: bool,
        include_crib: bool,
    ) -> DiscardSuggestion:
        """Evaluate a single split against the unseen pool."""
        hand_average, best, minimum = average_hand_scores(
            keep, pool, num_best=self.config.best_starters
        )
        crib_average = expected_crib_value(discards, pool, is_dealer) if include_crib else 0.0

        suggestion = DiscardSuggestion(
            keep=tuple(keep),
            discards=tuple(discards),
            hand_average=hand_average,
            crib_average=crib_average,
            expected_value=combine_expected_value(
                hand_average, crib_average, is_dealer, include_crib
            ),
            best_starters=best,
            min_hand_score=minimum,
        )
        logger.debug(
            "keep=%s discards=%s ev=%.4f",
            " ".join(card.id for card in suggestion.keep),
            " ".join(card.id for card in suggestion.discards),
            suggestion.expected_value,
        )
        return suggestion

    def splits(self, six_cards: Sequence[Card]) -> list[tuple[tuple[Card, ...], tuple[Card, ...]]]:
        """All 15 (keep, discards) splits in enumeration order."""
        splits = []
        for chosen in choose_k(range(len(six_cards)), KEEP_SIZE):
            keep = tuple(six_cards[i] for i in chosen)
            discards = tuple(card for i, card in enumerate(six_cards) if i not in chosen)
            splits.append((keep, discards))
        return splits

    def evaluate_all(
        self, six_cards: Sequence[Card], is_dealer: bool, include_crib: bool
    ) -> list[DiscardSuggestion]:
        """
        Evaluate every split of a six-card deal.

        Returns:
            All suggestions ranked by expected value, or [] unless exactly six
            cards are given
        """
        if len(six_cards) != DEAL_SIZE:
            return []
        if self.config.reject_duplicates:
            check_distinct(six_cards)

        six_cards = tuple(six_cards)
        pool = remaining_cards(six_cards)
        splits = self.splits(six_cards)

        logger.info(
            f"Evaluating {len(splits)} splits against {len(pool)} unseen cards "
            f"(dealer={is_dealer}, crib={include_crib})"
        )

        if self.config.num_workers > 1:
            from cribbage.solver.parallel import evaluate_splits_parallel

            suggestions = evaluate_splits_parallel(
                splits, pool, is_dealer, include_crib, self.config
            )
        else:
            suggestions = [
                self.evaluate_keep(keep, discards, pool, is_dealer, include_crib)
                for keep, discards in splits
            ]

        return rank_suggestions(suggestions)

    def evaluate(
        self, six_cards: Sequence[Card], is_dealer: bool, include_crib: bool
    ) -> list[DiscardSuggestion]:
        """Top `config.top_n` suggestions (three by default)."""
        return self.evaluate_all(six_cards, is_dealer, include_crib)[: self.config.top_n]


# Global solver instance for the module-level helper
_solver_instance = None


def get_solver() -> DiscardSolver:
    """
    Get the global solver instance (default configuration).

    Returns:
        Shared DiscardSolver instance
    """
    global _solver_instance
    if _solver_instance is None:
        _solver_instance = DiscardSolver()
    return _solver_instance


def evaluate_discards(
    six_cards: Sequence[Card], is_dealer: bool, include_crib: bool
) -> list[DiscardSuggestion]:
    """Top three suggestions for a six-card deal using the default solver."""
    return get_solver().evaluate(six_cards, is_dealer, include_crib)

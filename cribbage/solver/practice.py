"""Practice mode: deal a random six and grade a player's discard against the solver."""

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass

from cribbage.game.cards import DECK, Card, sort_cards
from cribbage.solver.discard import (
    DEAL_SIZE,
    DiscardSolver,
    DiscardSuggestion,
    InvalidCardsError,
    check_distinct,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PracticeGrade:
    """
    How a chosen discard compares with the best one.

    Attributes:
        best: The solver's top suggestion
        choice: The evaluation of the player's split
        ev_gap: best.expected_value - choice.expected_value (>= 0)
        rank: 1-based position of the player's split among all 15
        is_best: Whether the player's split has the best expected value
    """

    best: DiscardSuggestion
    choice: DiscardSuggestion
    ev_gap: float
    rank: int
    is_best: bool


def deal_practice_hand(rng: random.Random | None = None) -> list[Card]:
    """Deal six distinct random cards, sorted for display."""
    rng = rng or random.Random()
    return sort_cards(rng.sample(DECK, DEAL_SIZE))


def grade_discard(
    six_cards: Sequence[Card],
    discards: Sequence[Card],
    is_dealer: bool,
    include_crib: bool,
    solver: DiscardSolver | None = None,
) -> PracticeGrade:
    """
    Grade the player's two discards.

    Args:
        six_cards: The dealt hand
        discards: The two cards the player threw
        is_dealer: Whether the player owns the crib
        include_crib: Whether crib value counts toward expected value
        solver: Solver to use (default configuration if omitted)

    Returns:
        PracticeGrade comparing the player's split with the best split
    """
    if len(six_cards) != DEAL_SIZE:
        raise InvalidCardsError(f"Practice hand must have {DEAL_SIZE} cards, got {len(six_cards)}")
    if len(discards) != 2:
        raise InvalidCardsError(f"Choose exactly 2 discards, got {len(discards)}")
    check_distinct(six_cards)
    check_distinct(discards)
    outside = [card.id for card in discards if card not in six_cards]
    if outside:
        raise InvalidCardsError(f"Discards not in hand: {', '.join(outside)}")

    solver = solver or DiscardSolver()
    ranked = solver.evaluate_all(six_cards, is_dealer, include_crib)

    chosen = {card.id for card in discards}
    position, suggestion = next(
        (position, suggestion)
        for position, suggestion in enumerate(ranked, start=1)
        if {card.id for card in suggestion.discards} == chosen
    )

    best = ranked[0]
    ev_gap = best.expected_value - suggestion.expected_value
    logger.info(f"Practice discard ranked {position}/{len(ranked)} (gap {ev_gap:.3f})")

    return PracticeGrade(
        best=best,
        choice=suggestion,
        ev_gap=ev_gap,
        rank=position,
        is_best=ev_gap == 0,
    )

"""
Cribbage hand scorer and discard solver.

Scores 4-card hands with a starter and ranks the 15 ways to keep four cards
from a six-card deal by expected value.
"""

from cribbage.game.cards import DECK, Card, Rank, Suit, all_cards
from cribbage.game.scoring import ScoreBreakdown, ScorePart, score_hand, score_hand_without_starter
from cribbage.solver.discard import DiscardSolver, DiscardSuggestion, StarterScore, evaluate_discards

__all__ = [
    "DECK",
    "Card",
    "Rank",
    "Suit",
    "all_cards",
    "ScoreBreakdown",
    "ScorePart",
    "score_hand",
    "score_hand_without_starter",
    "DiscardSolver",
    "DiscardSuggestion",
    "StarterScore",
    "evaluate_discards",
]

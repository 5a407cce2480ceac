"""
Discard solver module.

Evaluates every keep/discard split of a six-card deal by expected hand and
crib value.
"""

from cribbage.solver.discard import DiscardSolver, InvalidCardsError, evaluate_discards

__all__ = ["DiscardSolver", "InvalidCardsError", "evaluate_discards"]

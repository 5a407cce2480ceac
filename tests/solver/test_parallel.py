"""Tests for multi-process split evaluation."""

import pytest

from cribbage.game.cards import parse_cards
from cribbage.shared.config import SolverConfig
from cribbage.solver.discard import DiscardSolver


@pytest.mark.parametrize("include_crib", [False, True])
def test_parallel_matches_serial(include_crib):
    """Worker processes produce the same ranked suggestions as the serial path."""
    six = parse_cards("3s 4h 5d 6c Jd Qd")

    serial = DiscardSolver(SolverConfig(num_workers=1)).evaluate_all(six, False, include_crib)
    parallel = DiscardSolver(SolverConfig(num_workers=2)).evaluate_all(six, False, include_crib)

    assert [s.to_dict() for s in parallel] == [s.to_dict() for s in serial]


def test_parallel_cards_are_deck_instances():
    six = parse_cards("As 2h 7d 8c 9s Kh")
    suggestions = DiscardSolver(SolverConfig(num_workers=3)).evaluate(six, True, False)

    for suggestion in suggestions:
        for card in suggestion.keep:
            assert any(card is dealt for dealt in six)

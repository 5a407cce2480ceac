"""Tests for practice mode."""

import random

import pytest

from cribbage.game.cards import parse_cards
from cribbage.solver.discard import DiscardSolver, InvalidCardsError
from cribbage.solver.practice import deal_practice_hand, grade_discard

SIX = "5s 5c 5d Jh Ks Qs"


class TestDealPracticeHand:
    def test_six_distinct_sorted_cards(self):
        six = deal_practice_hand(random.Random(3))

        assert len(six) == 6
        assert len({card.id for card in six}) == 6
        assert [card.order for card in six] == sorted(card.order for card in six)

    def test_seeded_deal_is_repeatable(self):
        assert deal_practice_hand(random.Random(42)) == deal_practice_hand(random.Random(42))


class TestGradeDiscard:
    """Test grading a player's discard."""

    def test_best_discard(self):
        six = parse_cards(SIX)
        grade = grade_discard(six, parse_cards("Ks Qs"), is_dealer=False, include_crib=False)

        assert grade.is_best
        assert grade.rank == 1
        assert grade.ev_gap == 0
        assert grade.choice == grade.best

    def test_worse_discard(self):
        six = parse_cards(SIX)
        grade = grade_discard(six, parse_cards("5s 5c"), is_dealer=False, include_crib=False)

        assert not grade.is_best
        assert grade.rank > 1
        assert grade.ev_gap > 0
        assert {card.id for card in grade.choice.discards} == {"5♠", "5♣"}

    def test_discard_order_does_not_matter(self):
        six = parse_cards(SIX)
        first = grade_discard(six, parse_cards("Jh 5d"), True, False)
        second = grade_discard(six, parse_cards("5d Jh"), True, False)
        assert first.rank == second.rank

    def test_uses_given_solver(self):
        solver = DiscardSolver()
        grade = grade_discard(parse_cards(SIX), parse_cards("Ks Qs"), True, False, solver)
        assert grade.best.keep == grade.choice.keep

    @pytest.mark.parametrize(
        "discards,message",
        [
            ("Ks", "exactly 2"),
            ("Ks Qs 5s", "exactly 2"),
            ("Ks Ks", "Duplicate"),
            ("Ks 2h", "not in hand"),
        ],
    )
    def test_invalid_discards(self, discards, message):
        with pytest.raises(InvalidCardsError, match=message):
            grade_discard(parse_cards(SIX), parse_cards(discards), True, False)

    def test_wrong_hand_size(self):
        with pytest.raises(InvalidCardsError, match="6 cards"):
            grade_discard(parse_cards("5s 5c 5d Jh"), parse_cards("5s 5c"), True, False)

"""
Tests for the card model.

Covers the deck universe, card parsing and interning, and sorting helpers.
"""

import pickle

import pytest

from cribbage.game.cards import (
    DECK,
    Card,
    Rank,
    Suit,
    all_cards,
    card_id,
    card_label,
    parse_cards,
    remaining_cards,
    sort_cards,
)


class TestDeck:
    """Test the 52-card universe."""

    def test_deck_has_52_distinct_cards(self):
        """Every rank/suit combination appears exactly once."""
        assert len(DECK) == 52
        assert len({card_id(card) for card in DECK}) == 52

    def test_all_cards_is_shared(self):
        """all_cards() returns the same immutable tuple every call."""
        assert all_cards() is all_cards()
        assert isinstance(all_cards(), tuple)

    def test_deck_order_is_stable(self):
        """Ranks outer, suits inner."""
        assert [card.id for card in DECK[:5]] == ["A♠", "A♥", "A♦", "A♣", "2♠"]
        assert DECK[-1].id == "K♣"

    def test_index_matches_position(self):
        for position, card in enumerate(DECK):
            assert card.index == position

    def test_cards_are_immutable(self):
        card = DECK[0]
        with pytest.raises(AttributeError):
            card.rank = Rank.KING  # type: ignore[misc]


class TestRankTable:
    """Test pip values and run order."""

    @pytest.mark.parametrize(
        "rank,pip,order",
        [
            (Rank.ACE, 1, 1),
            (Rank.FIVE, 5, 5),
            (Rank.TEN, 10, 10),
            (Rank.JACK, 10, 11),
            (Rank.QUEEN, 10, 12),
            (Rank.KING, 10, 13),
        ],
    )
    def test_pip_and_order(self, rank, pip, order):
        assert rank.pip_value == pip
        assert rank.order == order

    def test_orders_are_one_to_thirteen(self):
        assert sorted(rank.order for rank in Rank) == list(range(1, 14))


class TestCardNew:
    """Test parsing card text."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("5s", "5♠"),
            ("5♠", "5♠"),
            ("10h", "10♥"),
            ("Th", "10♥"),
            ("jd", "J♦"),
            ("Kc", "K♣"),
            ("aS", "A♠"),
        ],
    )
    def test_parse_variants(self, text, expected):
        assert Card.new(text).id == expected

    def test_cards_are_interned(self):
        """Parsing the same card twice returns the deck instance."""
        assert Card.new("Qh") is Card.new("Q♥")
        assert Card.new("Qh") is DECK[Card.new("Qh").index]

    @pytest.mark.parametrize("text", ["", "5", "1s", "11h", "5x", "Zz"])
    def test_invalid_text(self, text):
        with pytest.raises(ValueError, match="Invalid card"):
            Card.new(text)

    def test_pickle_round_trip_keeps_identity(self):
        """Cards sent to worker processes come back as deck instances."""
        card = Card.new("7d")
        assert pickle.loads(pickle.dumps(card)) is card


class TestHelpers:
    """Test list helpers."""

    def test_parse_cards(self):
        cards = parse_cards("5s, 5c 10h")
        assert [card.id for card in cards] == ["5♠", "5♣", "10♥"]

    def test_card_label(self):
        assert card_label(Card.new("10s")) == "10♠"
        assert str(Card.new("As")) == "A♠"

    def test_sort_cards(self):
        cards = parse_cards("Kc 2h As 2s 10d")
        assert [card.id for card in sort_cards(cards)] == ["A♠", "2♠", "2♥", "10♦", "K♣"]

    def test_remaining_cards(self):
        excluded = parse_cards("As Ah 5d Kc")
        remaining = remaining_cards(excluded)
        assert len(remaining) == 48
        assert not set(remaining) & set(excluded)

    def test_suit_positions(self):
        assert [suit.position for suit in Suit] == [0, 1, 2, 3]

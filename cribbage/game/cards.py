"""
Card model for cribbage.

This module defines the closed set of suits and ranks, the immutable Card value
type and the fixed 52-card deck shared by the scorer and the discard solver.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple


class Suit(Enum):
    """The four suits, in deck order."""

    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"

    def __str__(self) -> str:
        return self.value

    @property
    def position(self) -> int:
        """Position in deck order (♠=0, ♥=1, ♦=2, ♣=3)."""
        return _SUIT_POSITION[self]


class Rank(Enum):
    """Ranks, Ace low. Values are display labels."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    def __str__(self) -> str:
        return self.value

    @property
    def pip_value(self) -> int:
        """Value used when counting fifteens (face cards = 10, Ace = 1)."""
        return _RANK_TABLE[self][0]

    @property
    def order(self) -> int:
        """Position 1-13 in the Ace-low sequence, used for runs."""
        return _RANK_TABLE[self][1]


# Rank -> (pip_value, order)
_RANK_TABLE = {
    Rank.ACE: (1, 1),
    Rank.TWO: (2, 2),
    Rank.THREE: (3, 3),
    Rank.FOUR: (4, 4),
    Rank.FIVE: (5, 5),
    Rank.SIX: (6, 6),
    Rank.SEVEN: (7, 7),
    Rank.EIGHT: (8, 8),
    Rank.NINE: (9, 9),
    Rank.TEN: (10, 10),
    Rank.JACK: (10, 11),
    Rank.QUEEN: (10, 12),
    Rank.KING: (10, 13),
}

_SUIT_POSITION = {suit: position for position, suit in enumerate(Suit)}

# ASCII aliases accepted by Card.new()
_SUIT_ALIASES = {
    "s": Suit.SPADES,
    "h": Suit.HEARTS,
    "d": Suit.DIAMONDS,
    "c": Suit.CLUBS,
    "♠": Suit.SPADES,
    "♥": Suit.HEARTS,
    "♦": Suit.DIAMONDS,
    "♣": Suit.CLUBS,
}
_RANK_ALIASES = {rank.value: rank for rank in Rank}
_RANK_ALIASES["T"] = Rank.TEN


@dataclass(frozen=True)
class Card:
    """
    Immutable playing card.

    Cards are interned: every card in the process is one of the 52 DECK
    instances, so identity, equality and hashing all agree.

    Attributes:
        rank: Card rank
        suit: Card suit
    """

    rank: Rank
    suit: Suit

    @property
    def pip_value(self) -> int:
        return self.rank.pip_value

    @property
    def order(self) -> int:
        return self.rank.order

    @property
    def id(self) -> str:
        """Unique key, rank label followed by suit symbol (e.g. '10♠')."""
        return f"{self.rank.value}{self.suit.value}"

    @property
    def index(self) -> int:
        """Position of this card in DECK."""
        return (self.rank.order - 1) * 4 + self.suit.position

    @classmethod
    def new(cls, card_str: str) -> "Card":
        """
        Look up a card from its text form.

        Accepts a rank ('A', '2'-'10', 'T', 'J', 'Q', 'K', case-insensitive)
        followed by a suit letter ('s', 'h', 'd', 'c') or symbol.

        Args:
            card_str: Card text such as '5s', '10♥' or 'Jd'

        Returns:
            The shared deck instance for that card
        """
        text = card_str.strip()
        if len(text) < 2:
            raise ValueError(f"Invalid card: {card_str!r}")

        rank = _RANK_ALIASES.get(text[:-1].upper())
        suit = _SUIT_ALIASES.get(text[-1].lower())
        if rank is None or suit is None:
            raise ValueError(f"Invalid card: {card_str!r}")

        return DECK[(rank.order - 1) * 4 + suit.position]

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"Card({self.id})"

    def __reduce__(self):
        # Unpickle to the interned deck instance
        return (Card.new, (self.rank.value + _PICKLE_SUIT[self.suit],))


_PICKLE_SUIT = {Suit.SPADES: "s", Suit.HEARTS: "h", Suit.DIAMONDS: "d", Suit.CLUBS: "c"}

# The 52-card universe: ranks outer (A..K), suits inner (♠♥♦♣).
DECK: Tuple[Card, ...] = tuple(Card(rank, suit) for rank in Rank for suit in Suit)


def all_cards() -> Tuple[Card, ...]:
    """Return the 52-card deck (shared, read-only)."""
    return DECK


def card_id(card: Card) -> str:
    return card.id


def card_label(card: Card) -> str:
    return f"{card.rank.value}{card.suit.value}"


def parse_cards(text: str) -> List[Card]:
    """
    Parse a whitespace or comma separated list of cards.

    Examples:
        >>> [c.id for c in parse_cards("5s, 5c 10h")]
        ['5♠', '5♣', '10♥']
    """
    tokens = text.replace(",", " ").split()
    return [Card.new(token) for token in tokens]


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Sort by rank order, then by suit order (♠, ♥, ♦, ♣)."""
    return sorted(cards, key=lambda card: (card.order, card.suit.position))


def remaining_cards(excluded: Iterable[Card]) -> List[Card]:
    """Deck cards not in `excluded`, in deck order."""
    excluded_ids = {card.id for card in excluded}
    return [card for card in DECK if card.id not in excluded_ids]

"""
Hand scoring for cribbage.

Scores a 4-card hand plus starter into a per-category breakdown. Each category
carries a list of human-readable detail lines explaining where the points came
from; the solver uses the numba kernels in ``cribbage.solver.kernels`` for
totals and this module for anything shown to a player.
"""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from cribbage.game.cards import Card, Rank, card_label
from cribbage.game.combinatorics import non_empty_subsets

FIFTEENS = "Fifteens"
PAIRS = "Pairs"
RUNS = "Runs"
FLUSH = "Flush"
HIS_NOBS = "His Nobs"

_ORDER_LABELS = {rank.order: rank.value for rank in Rank}


@dataclass(frozen=True)
class ScorePart:
    """
    Points scored in one category.

    Attributes:
        label: Category name (Fifteens, Pairs, Runs, Flush, His Nobs)
        points: Non-negative points for the category
        detail: Explanation lines
    """

    label: str
    points: int
    detail: tuple[str, ...] = ()


@dataclass(frozen=True)
class ScoreBreakdown:
    """Total score and the ordered category parts it is made of."""

    total: int
    parts: tuple[ScorePart, ...]

    @classmethod
    def from_parts(cls, parts: Sequence[ScorePart]) -> "ScoreBreakdown":
        return cls(total=sum(part.points for part in parts), parts=tuple(parts))

    def points_for(self, label: str) -> int:
        """Points for a category label (0 if the category is absent)."""
        for part in self.parts:
            if part.label == label:
                return part.points
        return 0


def find_fifteens(cards: Sequence[Card]) -> ScorePart:
    """2 points for every subset of two or more cards whose pips sum to 15."""
    hits = []
    for combo in non_empty_subsets(cards):
        if len(combo) >= 2 and sum(card.pip_value for card in combo) == 15:
            hits.append(" + ".join(card_label(card) for card in combo) + " = 15")

    return ScorePart(
        label=FIFTEENS,
        points=2 * len(hits),
        detail=tuple(f"{hit} (2 pts)" for hit in hits) or ("No combinations totaled 15.",),
    )


def find_pairs(cards: Sequence[Card]) -> ScorePart:
    """c * (c - 1) points for each rank held c >= 2 times."""
    counts = Counter(card.rank for card in cards)
    points = 0
    detail = []

    for rank, count in counts.items():
        if count < 2:
            continue
        rank_points = count * (count - 1)
        name = "Pair" if count == 2 else f"{count} of a kind"
        detail.append(f"{name} of {rank.value}s -> {rank_points} pts")
        points += rank_points

    return ScorePart(label=PAIRS, points=points, detail=tuple(detail) or ("No pairs.",))


def find_runs(cards: Sequence[Card]) -> ScorePart:
    """
    Score runs of three or more consecutive ranks.

    Each maximal range of occupied orders of length L >= 3 is worth L times
    the product of the per-order counts inside it (double and triple runs).
    Only ranges of the longest length found score; equal-length ranges add up.
    """
    counts = Counter(card.order for card in cards)
    best_length = 0
    points = 0
    detail: list[str] = []

    order = 1
    while order <= 13:
        if not counts[order]:
            order += 1
            continue

        end = order
        product = 1
        while counts[end]:
            product *= counts[end]
            end += 1

        length = end - order
        if length >= 3:
            score = length * product
            span = "-".join(_ORDER_LABELS[o] for o in range(order, end))
            line = f"Run of {length} ({span}) x{product} = {score} pts"
            if length > best_length:
                best_length = length
                points = score
                detail = [line]
            elif length == best_length:
                points += score
                detail.append(line)

        order = end + 1

    return ScorePart(
        label=RUNS,
        points=points,
        detail=tuple(detail) or ("No runs (need 3+ consecutive ranks).",),
    )


def find_flush(hand: Sequence[Card], starter: Card | None = None) -> ScorePart:
    """
    4 points when every hand card shares a suit, 5 when the starter matches too.

    The starter never creates a flush on its own. With no starter the hand
    can score at most 4.
    """
    suit = hand[0].suit
    if any(card.suit != suit for card in hand):
        return ScorePart(
            label=FLUSH,
            points=0,
            detail=("No flush (all 4 hand cards must share a suit).",),
        )

    if starter is None:
        return ScorePart(label=FLUSH, points=4, detail=("4-card flush (no starter) = 4 pts",))
    if starter.suit == suit:
        return ScorePart(label=FLUSH, points=5, detail=("5-card flush (hand + starter) = 5 pts",))
    return ScorePart(label=FLUSH, points=4, detail=("4-card flush (hand only) = 4 pts",))


def find_nobs(hand: Sequence[Card], starter: Card) -> ScorePart:
    """1 point for holding the Jack of the starter's suit."""
    for card in hand:
        if card.rank is Rank.JACK and card.suit == starter.suit:
            return ScorePart(
                label=HIS_NOBS,
                points=1,
                detail=(f"Jack of {starter.suit.value} in hand matches starter suit = 1 pt",),
            )
    return ScorePart(label=HIS_NOBS, points=0, detail=("No matching Jack for starter suit.",))


def _check_hand(hand: Sequence[Card]) -> None:
    if len(hand) != 4:
        raise ValueError(f"Hand must have exactly 4 cards, got {len(hand)}")


def score_hand(hand: Sequence[Card], starter: Card) -> ScoreBreakdown:
    """
    Score a 4-card hand with its starter.

    Cards are scored literally; duplicates are not rejected here.

    Args:
        hand: The four hand (or crib) cards
        starter: The cut card

    Returns:
        Breakdown with Fifteens, Pairs, Runs, Flush and His Nobs parts
    """
    _check_hand(hand)
    cards = [*hand, starter]
    return ScoreBreakdown.from_parts(
        [
            find_fifteens(cards),
            find_pairs(cards),
            find_runs(cards),
            find_flush(hand, starter),
            find_nobs(hand, starter),
        ]
    )


def score_hand_without_starter(hand: Sequence[Card]) -> ScoreBreakdown:
    """Score the four hand cards alone (no His Nobs, flush capped at 4)."""
    _check_hand(hand)
    return ScoreBreakdown.from_parts(
        [
            find_fifteens(hand),
            find_pairs(hand),
            find_runs(hand),
            find_flush(hand),
        ]
    )

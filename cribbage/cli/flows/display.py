"""Text rendering of scoring and solver results."""

from cribbage.game.scoring import ScoreBreakdown
from cribbage.solver.discard import DiscardSuggestion


def cards_text(cards) -> str:
    return " ".join(card.id for card in cards)


def format_breakdown(breakdown: ScoreBreakdown) -> list[str]:
    """One line per category plus its detail lines, then the total."""
    lines = []
    for part in breakdown.parts:
        lines.append(f"{part.label:<10} {part.points:>3}")
        lines.extend(f"    {line}" for line in part.detail)
    lines.append(f"{'Total':<10} {breakdown.total:>3}")
    return lines


def format_suggestion(position: int, suggestion: DiscardSuggestion, include_crib: bool) -> list[str]:
    lines = [
        f"#{position}  keep {cards_text(suggestion.keep)}  "
        f"throw {cards_text(suggestion.discards)}  EV {suggestion.expected_value:.2f}",
        f"    hand avg {suggestion.hand_average:.2f}  worst {suggestion.min_hand_score}",
    ]
    if include_crib:
        lines.append(f"    crib avg {suggestion.crib_average:.2f}")
    if suggestion.best_starters:
        starters = ", ".join(
            f"{entry.card.id} ({entry.score})" for entry in suggestion.best_starters
        )
        lines.append(f"    best starters: {starters}")
    return lines

"""Count a hand, with or without a starter."""

from cribbage.cli.flows.display import cards_text, format_breakdown
from cribbage.cli.ui import prompts, ui
from cribbage.cli.ui.context import CliContext
from cribbage.game.scoring import score_hand, score_hand_without_starter


def count_hand(ctx: CliContext) -> None:
    """Score a 4-card hand and show the breakdown."""
    ui.header("Count a Hand")

    hand = prompts.prompt_cards(ctx, "Hand (4 cards, e.g. 5s 5c 5d Jh):", count=4)
    if hand is None:
        return

    with_starter = prompts.confirm(ctx, "Add a starter card?", default=True)
    if with_starter is None:
        return

    if with_starter:
        starter = prompts.prompt_cards(ctx, "Starter:", count=1, exclude=hand)
        if starter is None:
            return
        breakdown = score_hand(hand, starter[0])
        ui.subheader(f"{cards_text(hand)} | starter {starter[0].id}")
    else:
        breakdown = score_hand_without_starter(hand)
        ui.subheader(f"{cards_text(hand)} (hand only)")

    ui.lines(format_breakdown(breakdown))
    ui.pause()

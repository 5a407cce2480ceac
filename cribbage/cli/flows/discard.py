"""Suggest discards for a six-card deal."""

from cribbage.cli.flows.display import format_suggestion
from cribbage.cli.ui import prompts, ui
from cribbage.cli.ui.context import CliContext
from cribbage.solver.discard import DiscardSolver


def prompt_role(ctx: CliContext, default_dealer: bool, default_crib: bool) -> tuple[bool, bool] | None:
    """Ask for the dealer flag and whether to include the crib."""
    is_dealer = prompts.confirm(ctx, "Are you the dealer?", default=default_dealer)
    if is_dealer is None:
        return None
    include_crib = prompts.confirm(ctx, "Include crib impact?", default=default_crib)
    if include_crib is None:
        return None
    return is_dealer, include_crib


def suggest_discards(ctx: CliContext) -> None:
    """Rank the best keeps for a dealt six."""
    ui.header("Suggest Discards")

    six = prompts.prompt_cards(ctx, "Dealt cards (6):", count=6)
    if six is None:
        return

    role = prompt_role(ctx, ctx.config.practice.is_dealer, ctx.config.practice.include_crib)
    if role is None:
        return
    is_dealer, include_crib = role

    if include_crib:
        ui.info("Averaging crib over every unseen pair; this can take a few seconds.")

    suggestions = DiscardSolver(ctx.config.solver).evaluate(six, is_dealer, include_crib)

    ui.subheader("Suggestions")
    for position, suggestion in enumerate(suggestions, start=1):
        ui.lines(format_suggestion(position, suggestion, include_crib))
    ui.pause()

"""Practice: deal a random six, pick two discards, compare with the solver."""

import random

from questionary import Choice

from cribbage.cli.flows.display import format_suggestion
from cribbage.cli.ui import prompts, ui
from cribbage.cli.ui.context import CliContext
from cribbage.solver.discard import DiscardSolver
from cribbage.solver.practice import deal_practice_hand, grade_discard


def practice(ctx: CliContext) -> None:
    """Run practice rounds until the player stops."""
    settings = ctx.config.practice
    rng = random.Random(settings.seed)
    solver = DiscardSolver(ctx.config.solver)

    while True:
        ui.header("Practice")
        six = deal_practice_hand(rng)
        ui.hand("Dealt", six)
        print(f"Dealer: {'you' if settings.is_dealer else 'opponent'}")

        discards = prompts.checkbox(
            ctx,
            "Pick two cards to throw:",
            choices=[Choice(title=card.id, value=card) for card in six],
            validate=lambda picked: len(picked) == 2 or "Pick exactly two cards",
        )
        if discards is None:
            return

        grade = grade_discard(six, discards, settings.is_dealer, settings.include_crib, solver)
        if grade.is_best:
            ui.info("Best discard!")
        else:
            ui.warn(f"Ranked {grade.rank} of 15, {grade.ev_gap:.2f} points behind the best line.")

        ui.subheader("Your line")
        ui.lines(format_suggestion(grade.rank, grade.choice, settings.include_crib))
        ui.subheader("Best line")
        ui.lines(format_suggestion(1, grade.best, settings.include_crib))

        again = prompts.confirm(ctx, "Deal another?", default=True)
        if not again:
            return

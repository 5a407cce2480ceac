"""CLI entrypoint and top-level menu."""

import logging

from cribbage.cli.flows.config import settings
from cribbage.cli.flows.count import count_hand
from cribbage.cli.flows.discard import suggest_discards
from cribbage.cli.flows.practice import practice
from cribbage.cli.ui import ui
from cribbage.cli.ui.context import CliContext
from cribbage.cli.ui.menu import MenuItem, run_menu


def main() -> None:
    ctx = CliContext.from_project_root()
    logging.basicConfig(
        level=ctx.config.system.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    ui.header("CRIBBAGE SOLVER")

    items = [
        MenuItem("Count a Hand", count_hand),
        MenuItem("Suggest Discards", suggest_discards),
        MenuItem("Practice", practice),
        MenuItem("Settings", settings),
    ]

    run_menu(ctx, "What would you like to do?", items, exit_label="Exit")
    print("\nGoodbye!")


if __name__ == "__main__":
    main()

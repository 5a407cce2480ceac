"""Top-level menu loop."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from questionary import Choice

from cribbage.cli.ui import prompts, ui
from cribbage.cli.ui.context import CliContext
from cribbage.solver.discard import InvalidCardsError

logger = logging.getLogger(__name__)

Handler = Callable[[CliContext], None]


@dataclass(frozen=True)
class MenuItem:
    label: str
    handler: Handler


def run_action(ctx: CliContext, handler: Handler) -> None:
    """Run one menu action; a failure returns to the menu instead of exiting."""
    try:
        handler(ctx)
    except KeyboardInterrupt:
        ui.warn("Cancelled")
    except InvalidCardsError as exc:
        ui.error(str(exc))
    except Exception as exc:
        logger.exception("Menu action failed")
        ui.error(str(exc))
        ui.pause()


def run_menu(ctx: CliContext, title: str, items: list[MenuItem], exit_label: str = "Back") -> None:
    choices = [Choice(title=item.label, value=item.handler) for item in items]
    choices.append(Choice(title=exit_label, value=None))

    while (handler := prompts.select(ctx, title, choices)) is not None:
        run_action(ctx, handler)

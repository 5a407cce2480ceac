"""Questionary prompt helpers."""

from collections.abc import Sequence
from typing import Any

import questionary
from questionary import Choice

from cribbage.cli.ui.context import CliContext
from cribbage.game.cards import Card, parse_cards


def select(
    ctx: CliContext,
    message: str,
    choices: Sequence[str | Choice],
    default: str | None = None,
) -> Any:
    return questionary.select(
        message,
        choices=list(choices),
        default=default,
        style=ctx.style,
    ).ask()


def checkbox(
    ctx: CliContext,
    message: str,
    choices: Sequence[str | Choice],
    validate=None,
) -> list[Any] | None:
    kwargs = {} if validate is None else {"validate": validate}
    return questionary.checkbox(
        message,
        choices=list(choices),
        style=ctx.style,
        **kwargs,
    ).ask()


def confirm(ctx: CliContext, message: str, default: bool = False) -> bool | None:
    return questionary.confirm(
        message,
        default=default,
        style=ctx.style,
    ).ask()


def text(
    ctx: CliContext,
    message: str,
    default: str = "",
    validate=None,
) -> str | None:
    return questionary.text(
        message,
        default=default,
        validate=validate,
        style=ctx.style,
    ).ask()


def prompt_cards(
    ctx: CliContext,
    message: str,
    count: int,
    exclude: Sequence[Card] = (),
) -> list[Card] | None:
    """Ask for `count` distinct cards typed as text, e.g. '5s 5c Jh 10d'."""
    excluded = {card.id for card in exclude}

    def _validate(value: str) -> bool | str:
        try:
            cards = parse_cards(value)
        except ValueError as exc:
            return str(exc)
        if len(cards) != count:
            return f"Enter exactly {count} card(s)"
        ids = [card.id for card in cards]
        if len(set(ids)) != len(ids):
            return "Cards must be distinct"
        if excluded.intersection(ids):
            return "Card already used"
        return True

    answer = text(ctx, message, validate=_validate)
    if answer is None:
        return None
    return parse_cards(answer)

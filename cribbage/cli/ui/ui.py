"""Console output helpers."""

from collections.abc import Iterable

from cribbage.game.cards import Card

WIDTH = 56


def header(title: str) -> None:
    print(f"\n{'=' * WIDTH}\n{title.center(WIDTH)}\n{'=' * WIDTH}")


def subheader(title: str) -> None:
    print(f"\n{title}\n{'-' * WIDTH}")


def lines(rows: Iterable[str]) -> None:
    for row in rows:
        print(row)


def hand(label: str, cards: Iterable[Card]) -> None:
    print(f"{label}: {' '.join(card.id for card in cards)}")


def pause() -> None:
    input("\nPress Enter to continue...")


def info(message: str) -> None:
    print(f"\n[INFO] {message}")


def warn(message: str) -> None:
    print(f"\n[!] {message}")


def error(message: str) -> None:
    print(f"\n[ERROR] {message}")

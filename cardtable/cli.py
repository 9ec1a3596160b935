"""Menu to choose and start a card game at the terminal."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence, TextIO

from .bataille import Bataille
from .briscola import Briscola
from .errors import CardGameError
from .game import Game
from .huit_americain import HuitAmericain
from .movement import MovementKind, parse_movement
from .scopa import Scopa
from .uno import Uno

__all__ = ["format_choices", "create_game", "main"]

CHOICES: tuple[tuple[str, type[Game]], ...] = (
    ("Bataille", Bataille),
    ("Uno", Uno),
    ("Scopa", Scopa),
    ("Briscola", Briscola),
    ("8 Americain", HuitAmericain),
)


def format_choices() -> str:
    """The numbered list of games, one per line."""
    return "".join(f" {number}. {name}\n" for number, (name, _) in enumerate(CHOICES, 1))


def create_game(
    choice: int,
    n_players: int,
    ai: int,
    input_fn: Callable[[], str] | None = None,
    output: TextIO | None = None,
) -> Game:
    """Start game number ``choice`` (from 1).

    ``ai`` is the answer to "play with the computer?": 1 means no, and every
    seat is then a human; any other answer fills seats after the first with
    computer players.
    """
    if not 1 <= choice <= len(CHOICES):
        raise ValueError(f"unknown game choice {choice}")
    _, game_class = CHOICES[choice - 1]
    return game_class(n_players, ai == 1, input_fn=input_fn, output=output)


def _ask_number(prompt: str) -> int:
    while True:
        words = input(prompt).split()
        if words:
            return parse_movement(words[0], MovementKind.ONE)[0]
        prompt = ""


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="cardtable", description="Play a card game.")
    parser.parse_args(argv)

    print("\x1b[2J\x1b[1;1H", end="")
    print("---------------------------------------")
    print("-------------- Card Game --------------")
    print("---------------------------------------")
    print(format_choices())

    try:
        choice = _ask_number("Choice : ")
        n_players = _ask_number("Number of player : ")
        print("Jouer avec une IA ?")
        print("\t1. Non\n\t2. Oui")
        ai = _ask_number("")
        create_game(choice, n_players, ai).run()
    except EOFError:
        print()
        return 1
    except (CardGameError, ValueError) as error:
        print(error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""The common frame of every card game: setup and the main loop."""

from __future__ import annotations

import random
import sys
from abc import ABC, abstractmethod
from typing import Any, Callable, TextIO

from .deck import create_deck
from .piles import DiscardPile, DrawPile
from .players import Players

__all__ = ["Game", "GameWithPioche"]


class Game(ABC):
    """A game played with one kind of deck by a table of players.

    When ``humans`` is true every seat is a human; otherwise only seat 0 is
    and the others are played by the computer.
    """

    deck_kind = "Fr"
    deck_copies = 1
    header = ""
    # One discard pile per seat instead of a single shared table.
    discard_pile_per_player = False

    def __init__(
        self,
        n_players: int,
        humans: bool,
        input_fn: Callable[[], str] | None = None,
        output: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.output = output if output is not None else sys.stdout
        self._check_number_of_players(n_players)
        self.players = Players(n_players, humans, input_fn=input_fn, output=self.output)
        n_piles = n_players if self.discard_pile_per_player else 1
        self.discard_piles = [DiscardPile() for _ in range(n_piles)]
        self.deck = create_deck(self.deck_kind, self.deck_copies, rng)
        self._init_players_hand()

    def _say(self, *parts: object, end: str = "\n") -> None:
        print(*parts, end=end, file=self.output)

    def _print_header(self) -> None:
        self._say(self.header)

    @abstractmethod
    def _check_number_of_players(self, n_players: int) -> None:
        """Raise IllegalNumberOfPlayer when the game cannot seat n players."""

    @abstractmethod
    def _init_players_hand(self) -> None:
        """Deal the opening hands."""

    @abstractmethod
    def is_finished(self) -> bool:
        """Whether the game is over."""

    @abstractmethod
    def play(self) -> None:
        """Play one round."""

    @abstractmethod
    def the_winner_is(self) -> Any:
        """Announce and return the winner."""

    def run(self) -> Any:
        """Play rounds until the game is over, then announce the winner."""
        while not self.is_finished():
            self.play()
        return self.the_winner_is()


class GameWithPioche(Game):
    """A game in which players may draw from a face-down pile."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.pioche: DrawPile | None = None
        super().__init__(*args, **kwargs)
"""Huit americain: match the suit or the rank; eights change the suit."""

from __future__ import annotations

import random
import sys
from typing import Callable, TextIO

from .actions import CardAction, Question
from .cards import Card, FrenchRank, FrenchSuit
from .errors import IllegalNumberOfPlayer
from .game import GameWithPioche
from .movement import MovementKind
from .piles import DiscardPile, DrawPile

__all__ = ["HuitAmericain"]


class HuitAmericain(GameWithPioche):
    """Crazy eights with a French deck and a draw pile."""

    deck_kind = "Fr"
    header = "-------------- Huit Americain --------------"
    HAND_SIZE = 8
    COLOR_QUESTION = "Choisir une couleur: " + "".join(
        f"\n{int(suit)}.{suit.name}" for suit in FrenchSuit
    )

    def __init__(
        self,
        n_players: int,
        humans: bool,
        input_fn: Callable[[], str] | None = None,
        output: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        out = output if output is not None else sys.stdout
        print("Jouons aux 8 Americain", file=out)
        self.color_of_pile: int | None = None
        super().__init__(n_players, humans, input_fn, out, rng)
        self._say("Jeu 8 Americain initialise")

    @property
    def table(self) -> DiscardPile:
        return self.discard_piles[0]

    def _check_number_of_players(self, n_players: int) -> None:
        if n_players < 2 or n_players > 5:
            raise IllegalNumberOfPlayer()

    def _init_players_hand(self) -> None:
        n = len(self.players)
        for _ in range(self.HAND_SIZE):
            for seat in range(n):
                self.players.add_to(seat, self.deck.deal())
        self.pioche = DrawPile(self.deck.remove_all())
        self.table.add(self.pioche.draw())
        self.color_of_pile = self.table.look().suit

    def _draw(self) -> Card:
        return self.pioche.draw()

    def _top_is(self, rank: FrenchRank) -> bool:
        return self.table.look().rank == rank

    def is_finished(self) -> bool:
        return any(self.players.empty_hand(seat) for seat in range(len(self.players)))

    def the_winner_is(self) -> int | None:
        """Announce every player without cards; return the first of them."""
        winners = [seat for seat in range(len(self.players)) if self.players.empty_hand(seat)]
        for seat in winners:
            self._say(f"The winner is {seat}")
        return winners[0] if winners else None

    def _ask_color(self) -> None:
        while True:
            question = Question(self.COLOR_QUESTION)
            self.players.ask_question(question)
            answer = question.response()
            if 0 <= answer <= 3:
                self.color_of_pile = FrenchSuit(answer)
                return

    def _single_turn(self) -> None:
        while True:
            action = CardAction()
            action.set_to(self.table)
            self.players.ask(action, MovementKind.PIOCHE | MovementKind.ONE, 1)
            if action.is_pioche():
                self.players.add(self._draw())
                self.players.next()
                return
            if action.same_rank(FrenchRank.Eight):
                # The player who changes the suit keeps the turn.
                self._ask_color()
                action.apply()
                return
            if action.same_rank() or action.same_color(self.color_of_pile):
                action.apply()
                self.color_of_pile = self.table.look().suit
                self.players.next()
                return
            action.reset()

    def _take_turn(self) -> None:
        while True:
            self._single_turn()
            if not self._top_is(FrenchRank.Ten):
                return

    def play(self) -> None:
        """Apply the effect of the top card, then let the current player move."""
        self._print_header()
        self._say(f"\nTable : {self.table}")
        if self._top_is(FrenchRank.Jack):
            self.players.reverse_order()
            self.players.next()
        elif self._top_is(FrenchRank.Seven):
            self.players.next()
        elif self._top_is(FrenchRank.Ace) or self._top_is(FrenchRank.Deuce):
            self._say("Vous piochez 2 fois")
            for _ in range(2):
                self.players.add(self._draw())
            self.players.next()
        self._take_turn()
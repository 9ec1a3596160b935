"""Uno: match the colour or the symbol of the top card."""

from __future__ import annotations

from typing import Any

from .actions import CardAction, Question
from .cards import Card, UnoRank, UnoSuit
from .errors import IllegalNumberOfPlayer
from .game import GameWithPioche
from .movement import MovementKind
from .piles import DiscardPile, DrawPile

__all__ = ["Uno"]

_COLOURS = [UnoSuit.Blue, UnoSuit.Green, UnoSuit.Red, UnoSuit.Yellow]


class Uno(GameWithPioche):
    """Uno with the 108-card deck and a draw pile."""

    deck_kind = "Uno"
    header = "------------- Uno --------------"
    HAND_SIZE = 7
    COLOR_QUESTION = "Choisir une couleur: " + "".join(
        f"\n{int(colour)}.{colour.name}" for colour in _COLOURS
    )

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.color_of_pile: int | None = None
        super().__init__(*args, **kwargs)

    @property
    def table(self) -> DiscardPile:
        return self.discard_piles[0]

    def _check_number_of_players(self, n_players: int) -> None:
        if n_players < 2 or n_players > 7:
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

    def _top_is(self, rank: UnoRank) -> bool:
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
                self.color_of_pile = UnoSuit(answer)
                return

    def _take_turn(self) -> None:
        while True:
            action = CardAction()
            action.set_to(self.table)
            self.players.ask(action, MovementKind.PIOCHE | MovementKind.ONE, 1)
            if action.is_pioche():
                self.players.add(self._draw())
                self.players.next()
                return
            if action.same_color(UnoSuit.NoColor):
                self._ask_color()
                action.apply()
                self.players.next()
                return
            if action.same_rank() or action.same_color(self.color_of_pile):
                action.apply()
                self.color_of_pile = self.table.look().suit
                self.players.next()
                return
            action.reset()

    def play(self) -> None:
        """Apply the effect of the top card, then let the current player move."""
        self._print_header()
        self._say(f"\nTable : {self.table}")
        if self._top_is(UnoRank.Reverse):
            self.players.reverse_order()
            self.players.next()
        elif self._top_is(UnoRank.PlusTwo):
            self._say("Vous piocher 2 fois")
            for _ in range(2):
                self.players.add(self._draw())
            self.players.next()
        elif self._top_is(UnoRank.Skip):
            self.players.next()
        elif self._top_is(UnoRank.SuperJoker):
            self._say("Vous piocher 4 fois")
            for _ in range(4):
                self.players.add(self._draw())
            self.players.next()
        self._take_turn()
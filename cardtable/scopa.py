"""Scopa: capture a table card whose rank equals the one played."""

from __future__ import annotations

from typing import Any

from .actions import CardAction
from .cards import ItalianRank
from .errors import IllegalMovement, IllegalNumberOfPlayer
from .game import Game
from .movement import MovementKind
from .piles import DiscardPile
from .settings import ScoreSettings

__all__ = ["Scopa"]

_POINTS = {
    ItalianRank.Seven: 20,
    ItalianRank.Six: 18,
    ItalianRank.Ace: 16,
    ItalianRank.Five: 15,
    ItalianRank.Four: 14,
    ItalianRank.Three: 13,
    ItalianRank.Deuce: 12,
    ItalianRank.Re: 10,
    ItalianRank.Cavallo: 10,
    ItalianRank.Fante: 10,
}


class Scopa(Game):
    """Scopa with an Italian deck and four cards laid out on the table."""

    deck_kind = "It"
    header = "-- Scopa --"
    TABLE_CARDS = 4
    TURNS_PER_ROUND = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.scores = ScoreSettings()
        for rank, value in _POINTS.items():
            self.scores.set_score(rank, value)
        super().__init__(*args, **kwargs)

    @property
    def table(self) -> DiscardPile:
        """The cards laid out in the middle."""
        return self.discard_piles[0]

    def _check_number_of_players(self, n_players: int) -> None:
        if n_players < 2 or n_players > 4:
            raise IllegalNumberOfPlayer(">1 and <5")

    def _cards_per_player(self, n_players: int) -> int:
        return 3

    def deal(self) -> None:
        """Give each player three cards from the deck."""
        n = len(self.players)
        for seat in range(n):
            for _ in range(self._cards_per_player(n)):
                if len(self.deck):
                    self.players.add_to(seat, self.deck.deal())

    def _init_players_hand(self) -> None:
        self.deal()
        for _ in range(self.TABLE_CARDS):
            self.table.add(self.deck.deal())

    def is_finished(self) -> bool:
        return len(self.deck) == 0

    def _one_action(self) -> None:
        while True:
            action = CardAction()
            action.set_to(self.table)
            self.players.ask(action, MovementKind.ONE)
            try:
                action.count_moving_cards(1)
                cards = action.take_cards()
                if self.table.contains_sum(cards):
                    self.players.discard(self.table.remove_sum(cards))
                    self.players.discard(cards)
                else:
                    action.apply()
                return
            except IllegalMovement as error:
                self._say(error)

    def play(self) -> None:
        """Every player plays three cards in turn, then new cards are dealt."""
        self._say("-- Debut de manche --")
        self.players.set_current(0)
        for _ in range(self.TURNS_PER_ROUND):
            while True:
                self._say(f"\nTable : {self.table}")
                self._one_action()
                if self.table.is_empty():
                    self._say("Scopa!")
                self.players.next()
                if self.players.current_index == 0:
                    break
        self.deal()

    def the_winner_is(self) -> int:
        """Score the captured cards; the first highest score wins."""
        n = len(self.players)
        for seat in range(n):
            for card in self.players.take_discard_pile_of(seat):
                self.players.increment_score_of(seat, self.scores.score_of(card.rank))
        best = max(range(n), key=self.players.score_of)
        self._say(f"Player {best} win")
        return best
"""Briscola: tricks won by trumps or by the highest value, scored at the end."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .actions import CardAction
from .cards import ItalianRank
from .errors import IllegalMovement, IllegalNumberOfPlayer
from .game import Game
from .movement import MovementKind
from .piles import DiscardPile
from .settings import SameOrTrumpSettings, ScoreSettings

if TYPE_CHECKING:
    from .cards import Card

__all__ = ["Briscola"]

_POINTS = {
    ItalianRank.Seven: 0,
    ItalianRank.Six: 0,
    ItalianRank.Five: 0,
    ItalianRank.Four: 0,
    ItalianRank.Three: 10,
    ItalianRank.Deuce: 0,
    ItalianRank.Re: 4,
    ItalianRank.Cavallo: 3,
    ItalianRank.Fante: 2,
    ItalianRank.Ace: 11,
}

_STRENGTH = {
    ItalianRank.Deuce: 1,
    ItalianRank.Four: 2,
    ItalianRank.Five: 3,
    ItalianRank.Six: 4,
    ItalianRank.Seven: 5,
    ItalianRank.Fante: 6,
    ItalianRank.Cavallo: 7,
    ItalianRank.Re: 8,
    ItalianRank.Three: 9,
    ItalianRank.Ace: 11,
}


class Briscola(Game):
    """Briscola with an Italian deck; the card under the deck sets the trump."""

    deck_kind = "It"
    header = "-- Briscola --"
    discard_pile_per_player = True
    HAND_SIZE = 3
    TRICKS_PER_ROUND = 3

    def __init__(self, *args, **kwargs) -> None:
        self.settings = SameOrTrumpSettings()
        for rank, value in _STRENGTH.items():
            self.settings.set_value(rank, value)
        self.scores = ScoreSettings()
        for rank, value in _POINTS.items():
            self.scores.set_score(rank, value)
        self.last: Card | None = None
        self._last_dealt = False
        super().__init__(*args, **kwargs)

    @property
    def table(self) -> DiscardPile:
        """The pile the tricks are played on."""
        return self.discard_piles[0]

    def _check_number_of_players(self, n_players: int) -> None:
        if n_players < 2 or n_players > 5:
            raise IllegalNumberOfPlayer(">1 and <6")

    def deal(self) -> None:
        """Deal each player up to three cards; the trump card goes last."""
        n = len(self.players)
        for seat in range(n):
            for _ in range(self.HAND_SIZE):
                if len(self.deck):
                    self.players.add_to(seat, self.deck.deal())
        if not len(self.deck) and self.last is not None and not self._last_dealt:
            self.players.add_to(n - 1, self.last)
            self._last_dealt = True

    def _init_players_hand(self) -> None:
        self.deal()
        self.last = self.deck.deal()
        self.settings.set_trump(self.last.suit)

    def is_finished(self) -> bool:
        return len(self.deck) == 0

    def _one_action(self) -> None:
        while True:
            action = CardAction()
            action.set_to(self.table)
            self.players.ask(action, MovementKind.ONE)
            try:
                action.count_moving_cards(1)
                action.apply()
                return
            except IllegalMovement as error:
                self._say(error)

    def play(self) -> None:
        """Play three tricks, each led by the winner of the one before, then deal."""
        self._say("-- Debut de manche --")
        n = len(self.players)
        leader = self.players.current_index
        for _ in range(self.TRICKS_PER_ROUND):
            self._say(f"Atout : {self.last}")
            while True:
                self._one_action()
                self.players.next()
                if self.players.current_index == leader:
                    break
            self._say(f"\nTable : {self.table}")
            cards = self.table.remove_all()
            best_index = len(cards) - 1
            best = cards[best_index]
            for index, card in enumerate(cards[:-1]):
                if best.compare(card, self.settings) < 0:
                    best = card
                    best_index = index
            played_after_leader = len(cards) - 1 - best_index
            winner = (leader + played_after_leader * self.players.order) % n
            self.players.discard_to(winner, cards)
            self.players.set_current(winner)
            leader = winner
            self._say(f"Best : {best}")
        self.deal()

    def the_winner_is(self) -> int:
        """Score every player's won cards; the first highest score wins."""
        n = len(self.players)
        for seat in range(n):
            for card in self.players.take_discard_pile_of(seat):
                self.players.increment_score_of(seat, self.scores.score_of(card.rank))
        best = max(range(n), key=self.players.score_of)
        self._say(f"Player {best} win")
        return best
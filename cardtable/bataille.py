"""Bataille: players turn over their top cards and the highest takes all."""

from __future__ import annotations

from .actions import CardAction
from .errors import IllegalMovement, IllegalNumberOfPlayer
from .game import Game
from .movement import MovementKind

__all__ = ["Bataille"]


class Bataille(Game):
    """The war card game with a French deck split among all players."""

    deck_kind = "Fr"
    header = "-- Bataille --"
    discard_pile_per_player = True

    def _check_number_of_players(self, n_players: int) -> None:
        if n_players < 2:
            raise IllegalNumberOfPlayer(">2")

    def _cards_per_player(self, n_players: int) -> int:
        return len(self.deck) // n_players

    def _init_players_hand(self) -> None:
        n = len(self.players)
        for _ in range(self._cards_per_player(n)):
            for seat in range(n):
                card = self.deck.deal()
                card.flip()
                self.players.add_to(seat, card)

    def is_finished(self) -> bool:
        """Remove players without cards; over when one is left."""
        for seat in reversed(range(len(self.players))):
            if self.players.empty_hand(seat):
                self.players.eliminate(seat)
        return len(self.players) <= 1

    def the_winner_is(self) -> int:
        self.players.set_current(0)
        winner = self.players.current_index
        self._say(f"The winner is : {winner}")
        return winner

    def _first(self) -> None:
        """Have the current player turn over the top card of the hand."""
        seat = self.players.current_index
        if self.players.empty_hand(seat):
            return
        while True:
            action = CardAction()
            action.set_to(self.discard_piles[seat])
            self.players.ask(action, MovementKind.ONE)
            try:
                action.count_moving_cards(1)
                action.moving_cards_from_top()
                action.flip()
                action.apply()
                return
            except IllegalMovement as error:
                self._say(error)

    def _players_with_cards(self) -> int:
        return sum(not self.players.empty_hand(seat) for seat in range(len(self.players)))

    def _check_bataille(self) -> None:
        tops = [
            (seat, pile.look())
            for seat, pile in enumerate(self.discard_piles[: len(self.players)])
            if not pile.is_empty()
        ]
        if not tops:
            return
        pos, highest = tops[0]
        ties = 0
        for seat, card in tops[1:]:
            if highest < card:
                ties = 0
                highest = card
                pos = seat
            elif card.rank == highest.rank:
                ties += 1

        if ties and self._players_with_cards() >= 2:
            self._say("---Bataille---")
            self.play_round(2)
        else:
            self._say(f"Player {pos} take all cards")
        self.give_all_to(pos)

    def give_all_to(self, index: int) -> None:
        """Turn every played card face down and give it to a player."""
        for pile in self.discard_piles:
            cards = pile.remove_all()
            for card in cards:
                card.flip()
            self.players.extend_to(index, cards)

    def play_round(self, n: int) -> None:
        """Every player turns over n cards, then the highest top card wins."""
        self.players.set_current(0)
        while True:
            for _ in range(n):
                self._first()
            self.players.next()
            if self.players.current_index == 0:
                break
        self._say(" vs ".join(str(pile) for pile in self.discard_piles[: len(self.players)]))
        self._check_bataille()

    def play(self) -> None:
        self.play_round(1)
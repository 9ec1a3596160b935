"""A player's move of cards from a hand to a pile, and questions to players."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import IllegalEntry, IllegalMovement
from .movement import Movement

if TYPE_CHECKING:
    from .cards import Card
    from .piles import DiscardPile, Hand

__all__ = ["CardAction", "Question"]


class CardAction:
    """Cards selected from a hand, checked and then placed on a pile."""

    def __init__(self) -> None:
        self.source: Hand | None = None
        self.target: DiscardPile | None = None
        self.movement: Movement | None = None
        self.moving = False
        self.moving_cards: list[Card] = []

    def set_from(self, source: Hand, movement: Movement) -> None:
        """Choose the cards; positions outside the hand raise IllegalEntry."""
        self.source = source
        self.movement = movement
        self.moving = False
        if not self.is_pioche():
            if min(movement) < 0 or max(movement) >= len(source):
                raise IllegalEntry()

    def set_to(self, target: DiscardPile) -> None:
        self.target = target

    def is_pioche(self) -> bool:
        return self.movement is not None and self.movement.is_pioche()

    def count_moving_cards(self, n: int) -> None:
        if len(self.movement) != n:
            raise IllegalMovement("Number of cards is invalid")

    def moving_cards_from_top(self) -> None:
        if any(position != index for index, position in enumerate(self.movement)):
            raise IllegalMovement("Cards must be taken from the top of you hand")

    def _lift(self) -> list[Card]:
        if not self.moving:
            self.moving = True
            self.moving_cards = self.source.remove(self.movement)
        return self.moving_cards

    def flip(self) -> None:
        for card in self._lift():
            card.flip()

    def take_cards(self) -> list[Card]:
        """Take the selected cards out of the hand."""
        self.moving = True
        self.moving_cards = self.source.remove(self.movement)
        return self.moving_cards

    def apply(self) -> None:
        """Put the selected cards on the target pile."""
        if self.moving:
            self.target.extend(self.moving_cards)
        else:
            self.target.extend(self.source.remove(self.movement))

    def reset(self) -> None:
        """Give lifted cards back to the hand."""
        self.moving = False
        self.source.extend(self.moving_cards)
        self.moving_cards = []

    def same_rank(self, rank: int | None = None) -> bool:
        """Whether every selected card has the rank, or the top card's rank."""
        cards = self._lift()
        wanted = self.target.look().rank if rank is None else rank
        return all(card.rank == wanted for card in cards)

    def same_color(self, color: int | None = None) -> bool:
        """Whether every selected card has the suit, or the top card's suit."""
        cards = self._lift()
        wanted = self.target.look().suit if color is None else color
        return all(card.suit == wanted for card in cards)


class Question:
    """A question put to a player, answered with a single number."""

    def __init__(self, text: str) -> None:
        self.text = text
        self._answer: Movement | None = None

    def answer(self, movement: Movement) -> None:
        self._answer = movement

    def response(self) -> int:
        if self._answer is None or len(self._answer) == 0:
            raise LookupError("the question has not been answered")
        return self._answer[0]

    def __str__(self) -> str:
        return self.text
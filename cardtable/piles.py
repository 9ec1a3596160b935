"""Card piles: a player's hand, discard piles and the draw pile."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator

from .cards import Card
from .errors import IllegalMovement
from .movement import Movement

__all__ = ["Hand", "DiscardPile", "DrawPile"]


def _describe(cards: Iterable[Card]) -> str:
    return "".join(f"{card} " for card in cards)


class Hand:
    """The cards a player holds, in the order they were received."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)

    def add(self, card: Card) -> None:
        self._cards.append(card)

    def extend(self, cards: Iterable[Card]) -> None:
        self._cards.extend(cards)

    def remove(self, movement: Movement) -> list[Card]:
        """Remove the selected cards, one position at a time.

        Each position refers to the hand as it stands after the previous
        cards of the selection have been taken out.
        """
        taken: list[Card] = []
        for position in movement:
            if not 0 <= position < len(self._cards):
                self._cards[:0] = []
                raise IllegalMovement(f"no card at position {position}")
            taken.append(self._cards.pop(position))
        return taken

    def is_empty(self) -> bool:
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __str__(self) -> str:
        return _describe(self._cards)


class DiscardPile:
    """A face-up pile; the most recently added card is on top."""

    def __init__(self) -> None:
        self._cards: deque[Card] = deque()

    def add(self, card: Card) -> None:
        self._cards.appendleft(card)

    def extend(self, cards: Iterable[Card]) -> None:
        for card in cards:
            self.add(card)

    def is_empty(self) -> bool:
        return not self._cards

    @staticmethod
    def _rank_sum(cards: Iterable[Card]) -> int:
        return sum(int(card.rank) for card in cards)

    def contains_sum(self, cards: Iterable[Card]) -> bool:
        """Whether a card on the pile has a rank equal to the ranks' sum."""
        total = self._rank_sum(cards)
        return any(card.rank == total for card in self._cards)

    def remove_sum(self, cards: Iterable[Card]) -> list[Card]:
        """Take the topmost card whose rank equals the sum of the given ranks.

        When there is none, the pile is left alone and the given cards are
        returned.
        """
        cards = list(cards)
        total = self._rank_sum(cards)
        for card in self._cards:
            if card.rank == total:
                self._cards.remove(card)
                return [card]
        return cards

    def remove_all(self) -> list[Card]:
        """Empty the pile, returning its cards from top to bottom."""
        cards = list(self._cards)
        self._cards.clear()
        return cards

    def look(self) -> Card:
        """The top card, left in place."""
        if not self._cards:
            raise IndexError("the discard pile is empty")
        return self._cards[0]

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __str__(self) -> str:
        return _describe(self._cards)


class DrawPile:
    """A face-down stack; the last card given is drawn first."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._stack: list[Card] = []
        for card in cards:
            card.flip()
            self._stack.append(card)

    def draw(self) -> Card:
        """Take the top card and turn it over."""
        if not self._stack:
            raise IndexError("the draw pile is empty")
        card = self._stack.pop()
        card.flip()
        return card

    def __len__(self) -> int:
        return len(self._stack)
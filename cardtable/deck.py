"""Building and shuffling decks of cards."""

from __future__ import annotations

import random
from itertools import product
from typing import Iterable, MutableSequence, TypeVar

from .cards import (
    Card,
    FrenchRank,
    FrenchSuit,
    ItalianRank,
    ItalianSuit,
    UnoRank,
    UnoSuit,
)
from .errors import UnknownCardType

__all__ = ["Deck", "pharaon_shuffle", "create_cards", "create_deck"]

T = TypeVar("T")

SHUFFLE_PASSES = 10
UNO_DECK_SIZE = 108


def _riffle(short: list[T], long: list[T]) -> list[T]:
    merged: list[T] = []
    for a, b in zip(short, long):
        merged.extend((a, b))
    merged.extend(long[len(short):])
    return merged


def pharaon_shuffle(
    cards: MutableSequence[T], passes: int = SHUFFLE_PASSES, rng: random.Random | None = None
) -> None:
    """Riffle-shuffle the cards in place, cutting near the middle each pass.

    Fewer than four cards leave no room for a cut and are left as they are.
    """
    rng = rng or random.Random()
    size = len(cards)
    spread = size // 4
    if spread == 0:
        return
    for _ in range(passes):
        middle = rng.randrange(spread) + (size // 2 - spread // 2)
        first, second = list(cards[:middle]), list(cards[middle:])
        if len(first) < len(second):
            cards[:] = _riffle(first, second)
        else:
            cards[:] = _riffle(second, first)


def _uno_cards() -> list[Card]:
    colours = [suit for suit in UnoSuit if suit is not UnoSuit.NoColor]
    cards = [Card(suit, UnoRank.Zero) for suit in colours]
    for rank in UnoRank:
        if rank in (UnoRank.Zero, UnoRank.Joker, UnoRank.SuperJoker):
            continue
        for suit in colours:
            cards.extend((Card(suit, rank), Card(suit, rank)))
    for _ in range(4):
        cards.append(Card(UnoSuit.NoColor, UnoRank.Joker))
        cards.append(Card(UnoSuit.NoColor, UnoRank.SuperJoker))
    return cards


def create_cards(kind: str) -> list[Card]:
    """One set of the cards named "Fr", "It" or "Uno"."""
    if kind == "Fr":
        return [Card(s, r) for s, r in product(FrenchSuit, FrenchRank)]
    if kind == "It":
        return [Card(s, r) for s, r in product(ItalianSuit, ItalianRank)]
    if kind == "Uno":
        return _uno_cards()
    raise UnknownCardType(kind)


class Deck:
    """Shuffled copies of a set of cards, dealt from the end."""

    def __init__(
        self, cards: Iterable[Card], copies: int = 1, rng: random.Random | None = None
    ) -> None:
        template = list(cards)
        self._rng = rng or random.Random()
        self.cards: list[Card] = [card.clone() for _ in range(copies) for card in template]
        self.shuffle()

    def deal(self) -> Card:
        if not self.cards:
            raise IndexError("the deck is empty")
        return self.cards.pop()

    def shuffle(self) -> None:
        pharaon_shuffle(self.cards, SHUFFLE_PASSES, self._rng)

    def remove_all(self) -> list[Card]:
        """Hand over every remaining card, the next one to deal last."""
        cards, self.cards = self.cards, []
        return cards

    def __len__(self) -> int:
        return len(self.cards)


def create_deck(kind: str, copies: int = 1, rng: random.Random | None = None) -> Deck:
    return Deck(create_cards(kind), copies, rng)
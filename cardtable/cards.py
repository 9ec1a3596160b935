"""Playing cards and the suits and ranks of the supported decks."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

__all__ = [
    "FrenchSuit",
    "FrenchRank",
    "ItalianSuit",
    "ItalianRank",
    "UnoSuit",
    "UnoRank",
    "Card",
]


class _Labelled(IntEnum):
    """Integer enumeration with a short printable label per member."""

    @property
    def label(self) -> str:
        return _LABELS[type(self)].get(int(self), "_")

    def __str__(self) -> str:
        return self.label


class FrenchSuit(_Labelled):
    Heart = 0
    Diamond = 1
    Club = 2
    Spade = 3


class FrenchRank(_Labelled):
    Deuce = 2
    Three = 3
    Four = 4
    Five = 5
    Six = 6
    Seven = 7
    Eight = 8
    Nine = 9
    Ten = 10
    Jack = 11
    Queen = 12
    King = 13
    Ace = 14


class ItalianSuit(_Labelled):
    Spade = 0
    Bastoni = 1
    Denari = 2
    Coppe = 3


class ItalianRank(_Labelled):
    Ace = 1
    Deuce = 2
    Three = 3
    Four = 4
    Five = 5
    Six = 6
    Seven = 7
    Fante = 8
    Cavallo = 9
    Re = 10


class UnoSuit(_Labelled):
    Blue = 0
    Green = 1
    Red = 2
    Yellow = 3
    NoColor = 4


class UnoRank(_Labelled):
    Zero = 0
    One = 1
    Two = 2
    Three = 3
    Four = 4
    Five = 5
    Six = 6
    Seven = 7
    Eight = 8
    Nine = 9
    PlusTwo = 10
    Reverse = 11
    Skip = 12
    Joker = 13
    SuperJoker = 14


_LABELS: dict[type, dict[int, str]] = {
    FrenchSuit: {0: "\u2665", 1: "\u2666", 2: "\u2663", 3: "\u2660"},
    FrenchRank: {
        2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8", 9: "9",
        10: "10", 11: "J", 12: "Q", 13: "K", 14: "A",
    },
    ItalianSuit: {0: "S", 1: "B", 2: "D", 3: "Co"},
    ItalianRank: {
        1: "A", 2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7",
        8: "F", 9: "C", 10: "R",
    },
    UnoSuit: {0: "B", 1: "G", 2: "R", 3: "Y", 4: "~"},
    UnoRank: {
        0: "O", 1: "1", 2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7",
        8: "8", 9: "9", 10: "+2", 11: "\u21ba", 12: "Skip", 13: "J", 14: "+4",
    },
}


def _label(value: int) -> str:
    label = getattr(value, "label", None)
    return label if isinstance(label, str) else str(int(value))


@dataclass(eq=False)
class Card:
    """A card with a suit and a rank that may lie face down.

    Cards are ordered by rank alone; identity is kept for equality so that
    two cards of the same rank remain distinct objects in piles.
    """

    suit: int
    rank: int
    hidden: bool = False

    @property
    def visible(self) -> bool:
        return not self.hidden

    def flip(self) -> None:
        """Turn the card over."""
        self.hidden = not self.hidden

    def same_suit(self, other: Card) -> bool:
        return self.suit == other.suit

    def same_rank(self, other: Card) -> bool:
        return self.rank == other.rank

    def compare(self, other: Card, settings: Any) -> int:
        """Compare with another card under the given game settings."""
        return settings.compare(self, other)

    def clone(self) -> Card:
        return dataclasses.replace(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        if self.hidden:
            return "[]"
        return _label(self.rank) + _label(self.suit)
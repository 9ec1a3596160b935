"""Rules for comparing cards and for scoring them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .cards import Card

__all__ = ["Settings", "TrumpSettings", "SameOrTrumpSettings", "ScoreSettings"]


class Settings(ABC):
    """A way of comparing two cards."""

    @abstractmethod
    def compare(self, a: Card, b: Card) -> int:
        """Positive if a beats b, negative if b beats a."""


class TrumpSettings(Settings):
    """Comparison with a trump suit and optional per-rank values."""

    def __init__(self, trump: int | None = None) -> None:
        self.trump = trump
        self.values: dict[int, int] = {}

    def set_trump(self, suit: int) -> None:
        self.trump = suit

    def set_value(self, rank: int, value: int) -> None:
        self.values[int(rank)] = value

    def value_of(self, card: Card) -> int:
        """The card's value: the configured one, or its rank otherwise."""
        rank = int(card.rank)
        return self.values.get(rank, rank)

    def compare(self, a: Card, b: Card) -> int:
        va, vb = self.value_of(a), self.value_of(b)
        a_trump = a.suit == self.trump
        b_trump = b.suit == self.trump
        if a_trump:
            return va - vb if b_trump else 1
        if b_trump:
            return -1
        if a.suit == b.suit:
            return va - vb
        return 1


class SameOrTrumpSettings(TrumpSettings):
    """Trump comparison where cards of different plain suits compare by value."""

    def compare(self, a: Card, b: Card) -> int:
        va, vb = self.value_of(a), self.value_of(b)
        a_trump = a.suit == self.trump
        b_trump = b.suit == self.trump
        if a_trump:
            return va - vb if b_trump else 1
        if b_trump:
            return -1
        return va - vb


class ScoreSettings:
    """Points awarded for each rank."""

    def __init__(self) -> None:
        self.scores: dict[int, int] = {}

    def set_score(self, rank: int, value: int) -> None:
        self.scores[int(rank)] = value

    def score_of(self, rank: int) -> int:
        """Points for a rank; raises KeyError for a rank with no score."""
        return self.scores[int(rank)]
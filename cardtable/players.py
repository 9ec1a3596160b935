"""Players seated at a table and the way each one chooses cards."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Iterator, TextIO

from .actions import CardAction, Question
from .cards import Card
from .errors import IllegalEntry
from .movement import MovementKind, parse_movement
from .piles import DiscardPile, Hand

__all__ = ["Player", "Human", "AI", "Players"]

_PROMPTS = {
    0: "Choisir carte(s) ",
    1: "Choisir carte(s) ou piocher",
    2: "Piocher 2 fois ",
    3: "Piocher encore une fois ",
}


def _prompt(request: int) -> str:
    return _PROMPTS.get(request, "_")


class Player(ABC):
    """A seat at the table: a hand, a pile of won cards and a score."""

    def __init__(self, name: str = "", output: TextIO | None = None) -> None:
        self.hand = Hand()
        self.discard_pile = DiscardPile()
        self.score = 0
        self.name = name
        self.output = output if output is not None else sys.stdout

    def _say(self, *parts: object) -> None:
        print(*parts, file=self.output)

    @abstractmethod
    def ask(self, action: CardAction, allowed: MovementKind, request: int = 0) -> None:
        """Let the player choose cards from the hand for the action."""

    @abstractmethod
    def ask_question(self, question: Question) -> None:
        """Let the player answer the question with a number."""

    def add(self, card: Card) -> None:
        self.hand.add(card)

    def extend(self, cards: Iterable[Card]) -> None:
        self.hand.extend(cards)

    def discard(self, cards: Iterable[Card]) -> None:
        """Put won cards on the player's own pile."""
        self.discard_pile.extend(cards)

    def increment_score(self, n: int) -> None:
        self.score += n

    def empty_hand(self) -> bool:
        return self.hand.is_empty()

    def take_discard_pile(self) -> list[Card]:
        """Empty the player's pile of won cards and return them."""
        return self.discard_pile.remove_all()


class Human(Player):
    """A player who types selections; bad input is reported and asked again."""

    def __init__(
        self,
        name: str = "",
        input_fn: Callable[[], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        super().__init__(name, output)
        self.input_fn = input_fn if input_fn is not None else input

    def _read(self) -> str:
        return self.input_fn().strip()

    def ask(self, action: CardAction, allowed: MovementKind, request: int = 0) -> None:
        while True:
            self._say(_prompt(request))
            self._say(self.hand)
            try:
                action.set_from(self.hand, parse_movement(self._read(), allowed))
                return
            except IllegalEntry as error:
                self._say(error)
                request = 0

    def ask_question(self, question: Question) -> None:
        while True:
            self._say(question)
            try:
                question.answer(parse_movement(self._read(), MovementKind.ONE))
                return
            except IllegalEntry as error:
                self._say(error)


class AI(Player):
    """A computer player that plays its first card, or draws once it has tried them all."""

    def __init__(self, name: str = "", output: TextIO | None = None) -> None:
        super().__init__(name, output)
        self._tries = 0

    def _choose(self, request: int) -> str:
        if request == 0:
            return "0"
        if request == 1:
            if self._tries < len(self.hand):
                self._tries += 1
                return "0"
            self._tries = 0
            return "pioche"
        if request in (2, 3):
            return "pioche"
        return ""

    def ask(self, action: CardAction, allowed: MovementKind, request: int = 0) -> None:
        """Choose cards; a choice that fails on a plain request is raised."""
        while True:
            self._say(_prompt(request))
            query = self._choose(request)
            self._say(self.hand)
            try:
                action.set_from(self.hand, parse_movement(query, allowed))
                return
            except IllegalEntry as error:
                self._say(error)
                if request == 0:
                    raise
                request = 0

    def ask_question(self, question: Question) -> None:
        self._say(question)
        question.answer(parse_movement("0", MovementKind.ONE))


class Players:
    """The players at the table and whose turn it is."""

    def __init__(
        self,
        count: int,
        humans: bool,
        order: int = 1,
        input_fn: Callable[[], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        if count < 1:
            raise ValueError("at least one player is needed")
        self.output = output if output is not None else sys.stdout
        self.order = order
        self._current = 0
        self._players: list[Player] = [Human("Player 0", input_fn, self.output)]
        for seat in range(1, count):
            name = f"Player {seat}"
            if humans:
                self._players.append(Human(name, input_fn, self.output))
            else:
                self._players.append(AI(name, self.output))

    @property
    def current_index(self) -> int:
        return self._current

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __getitem__(self, index: int) -> Player:
        return self._players[index]

    def next(self) -> Player:
        """Pass the turn on in the current direction."""
        self._current = (self._current + self.order) % len(self._players)
        return self.current()

    def current(self) -> Player:
        return self._players[self._current]

    def reverse_order(self) -> None:
        self.order = -self.order

    def set_current(self, index: int) -> None:
        """Give the turn to a seat; an index outside the table is ignored."""
        if 0 <= index < len(self._players):
            self._current = index

    def eliminate(self, index: int) -> None:
        """Remove a player; those after move up one seat."""
        del self._players[index]
        if self._players:
            self._current %= len(self._players)
        else:
            self._current = 0

    def ask(self, action: CardAction, allowed: MovementKind, request: int = 0) -> None:
        print(f"Player {self._current} : ", end="", file=self.output)
        self.current().ask(action, allowed, request)

    def ask_question(self, question: Question) -> None:
        print(f"Player {self._current} : ", end="", file=self.output)
        self.current().ask_question(question)

    def add_to(self, index: int, card: Card) -> None:
        self._players[index].add(card)

    def add(self, card: Card) -> None:
        self.current().add(card)

    def extend_to(self, index: int, cards: Iterable[Card]) -> None:
        self._players[index].extend(cards)

    def discard_to(self, index: int, cards: Iterable[Card]) -> None:
        self._players[index].discard(cards)

    def discard(self, cards: Iterable[Card]) -> None:
        self.current().discard(cards)

    def empty_hand(self, index: int) -> bool:
        return self._players[index].empty_hand()

    def take_discard_pile_of(self, index: int) -> list[Card]:
        return self._players[index].take_discard_pile()

    def score_of(self, index: int) -> int:
        return self._players[index].score

    def increment_score_of(self, index: int, score: int) -> None:
        self._players[index].increment_score(score)
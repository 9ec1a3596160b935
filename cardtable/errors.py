"""Exceptions raised by the card games."""

from __future__ import annotations

__all__ = [
    "CardGameError",
    "IllegalEntry",
    "IllegalMovement",
    "IllegalNumberOfPlayer",
    "UnknownCardType",
]


class CardGameError(Exception):
    """Base class of every error raised by the package."""


class IllegalEntry(CardGameError):
    """A player's input could not be read as a card selection."""

    MESSAGE = "Entry : \n\tint\n\tint..int\n\tint, int, [...] int"

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)


class IllegalMovement(CardGameError):
    """A card selection breaks the rules of the game."""

    def __init__(self, detail: str | None = None) -> None:
        message = "Illegal Movement" if detail is None else f"Illegal Movement : {detail}"
        super().__init__(message)
        self.detail = detail


class IllegalNumberOfPlayer(CardGameError):
    """The game cannot be played with the requested number of players."""

    def __init__(self, detail: str | None = None) -> None:
        base = "Nombre de joueur invalide"
        message = base if detail is None else f"{base}: {detail}"
        super().__init__(message)
        self.detail = detail


class UnknownCardType(CardGameError):
    """No deck of cards exists under the requested name."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"{kind} is not a type of card")
        self.kind = kind
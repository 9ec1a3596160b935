"""Parsing of the card selections a player types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Iterator

from .errors import IllegalEntry

__all__ = ["MovementKind", "Movement", "parse_movement"]


class MovementKind(IntFlag):
    ONE = 1
    INTERVAL = 2
    LIST = 4
    PIOCHE = 8
    ALL = ONE | INTERVAL | LIST | PIOCHE


@dataclass(frozen=True)
class Movement:
    """A parsed selection: positions of cards in a hand, or a draw."""

    kind: MovementKind
    positions: tuple[int, ...] = ()

    def is_one(self) -> bool:
        return MovementKind.ONE in self.kind

    def is_interval(self) -> bool:
        return MovementKind.INTERVAL in self.kind

    def is_list(self) -> bool:
        return MovementKind.LIST in self.kind

    def is_pioche(self) -> bool:
        return MovementKind.PIOCHE in self.kind

    def __len__(self) -> int:
        return len(self.positions)

    def __getitem__(self, index: int) -> int:
        return self.positions[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.positions)


def _scan_digits(text: str, start: int) -> int:
    """Index just past the run of digits at start; at least one is required."""
    end = start
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    if end == start:
        raise IllegalEntry()
    return end


def _parse_interval(text: str) -> Movement:
    end = 0
    separator = None
    try:
        end = _scan_digits(text, 0)
        if end + 2 < len(text) and text[end] == "." and text[end + 1] == ".":
            separator = end
            end += 2
            end = _scan_digits(text, end)
    except IllegalEntry:
        pass
    if separator is None or end != len(text):
        raise IllegalEntry()
    low, high = sorted((int(text[:separator]), int(text[separator + 2:])))
    return Movement(MovementKind.INTERVAL, tuple(range(low, high + 1)))


def _parse_list(text: str) -> Movement:
    well_formed = True
    end = 0
    try:
        end = _scan_digits(text, 0)
        text = text.replace(" ", "")
        while end < len(text):
            if text[end] != ",":
                well_formed = False
            end += 1
            end = _scan_digits(text, end)
    except IllegalEntry:
        pass
    if not well_formed or end != len(text):
        raise IllegalEntry()
    numbers = [part for part in text.split(",") if part]
    if not numbers:
        raise IllegalEntry()
    return Movement(MovementKind.LIST, tuple(int(part) for part in numbers))


def parse_movement(text: str, allowed: MovementKind = MovementKind.ALL) -> Movement:
    """Parse a selection such as "3", "2..5", "1,4,6" or "pioche".

    Forms are tried in the order one, interval, list, draw.  Once the
    interval form is allowed, input that is not a single number must be an
    interval; likewise for the list form.
    """
    if MovementKind.ONE in allowed:
        try:
            if _scan_digits(text, 0) == len(text):
                return Movement(MovementKind.ONE, (int(text),))
        except IllegalEntry:
            pass

    if MovementKind.INTERVAL in allowed:
        return _parse_interval(text)

    if MovementKind.LIST in allowed:
        return _parse_list(text)

    if MovementKind.PIOCHE in allowed and text == "pioche":
        return Movement(MovementKind.PIOCHE)

    raise IllegalEntry()
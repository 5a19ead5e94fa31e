"""Data models supporting the solving session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

from .constants import CellType, Direction


class Coordinate(NamedTuple):
    """A (row, col) position in the grid."""

    row: int
    col: int

    def step(self, direction: Direction) -> "Coordinate":
        dr, dc = direction.step
        return Coordinate(self.row + dr, self.col + dc)


@dataclass(frozen=True)
class Cell:
    """Represents a grid cell: blocked, or open with an optional clue number."""

    type: CellType = CellType.OPEN
    number: Optional[int] = None

    @classmethod
    def blocked(cls) -> "Cell":
        return cls(type=CellType.BLOCKED)

    @classmethod
    def open(cls, number: Optional[int] = None) -> "Cell":
        return cls(type=CellType.OPEN, number=number)

    def is_open(self) -> bool:
        return self.type == CellType.OPEN


@dataclass(frozen=True)
class Clue:
    """A clue anchored at its numbered start cell, spanning one or more cells."""

    direction: Direction
    number: int
    text: str
    span: Tuple[Coordinate, ...]

    @property
    def start(self) -> Coordinate:
        return self.span[0]

    @property
    def length(self) -> int:
        return len(self.span)

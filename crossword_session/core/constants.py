"""Shared constants and enumerations for the solving session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class CellType(str, Enum):
    """All supported cell types in the grid."""

    BLOCKED = "BLOCKED"
    OPEN = "OPEN"


class Direction(str, Enum):
    """Clue directions, doubling as step vectors over the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    def toggled(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


class LoadStatus(str, Enum):
    """Tags of the load-status envelope."""

    NOT_ASKED = "NOT_ASKED"
    LOADING = "LOADING"
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


# Element id of the hidden text-capture input that receives keystrokes.
INPUT_ELEMENT_ID = "crossword-input"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

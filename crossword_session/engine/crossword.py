"""Crossword aggregate: the grid plus its clues, with direction-aware queries."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from ..core.constants import Direction
from ..core.models import Clue, Coordinate
from .clues import get_direction_clues
from .grid import Grid


class Crossword:
    """Combines a :class:`Grid` with its clues in presentation order.

    The two navigation queries, :meth:`get_clue_coordinates` and
    :meth:`get_next_clue_coordinate`, are all the session state machine
    needs; neither raises for coordinates that are off-grid or not covered
    by a clue.
    """

    def __init__(
        self,
        grid: Grid,
        clues: Iterable[Clue],
        title: str = "",
        author: str = "",
    ) -> None:
        self.grid = grid
        self.clues: Tuple[Clue, ...] = tuple(clues)
        self.title = title
        self.author = author
        self._index: Dict[Tuple[Coordinate, Direction], Clue] = {}
        for clue in self.clues:
            for coord in clue.span:
                self._index.setdefault((coord, clue.direction), clue)

    # ------------------------------------------------------------------
    # Navigation queries
    # ------------------------------------------------------------------
    def clue_at(self, coord: Tuple[int, int], direction: Direction) -> Optional[Clue]:
        return self._index.get((Coordinate(*coord), direction))

    def get_clue_coordinates(self, coord: Tuple[int, int], direction: Direction) -> List[Coordinate]:
        coord = Coordinate(*coord)
        clue = self.clue_at(coord, direction)
        if clue is None:
            return [coord]
        return list(clue.span)

    def get_next_clue_coordinate(self, coord: Tuple[int, int], direction: Direction) -> Coordinate:
        coord = Coordinate(*coord)
        span = self.get_clue_coordinates(coord, direction)
        index = span.index(coord)
        if index + 1 < len(span):
            return span[index + 1]
        return coord

    def is_direction_active(self, coord: Tuple[int, int], direction: Direction) -> bool:
        coord = Coordinate(*coord)
        return any(other != coord for other in self.get_clue_coordinates(coord, direction))

    # ------------------------------------------------------------------
    # Clue lookups
    # ------------------------------------------------------------------
    def get_clue(self, number: int, direction: Direction) -> Optional[Clue]:
        return next(
            (clue for clue in self.clues if clue.number == number and clue.direction == direction),
            None,
        )

    def direction_clues(self, direction: Direction) -> List[Clue]:
        return get_direction_clues(direction, self.clues)

    def __repr__(self) -> str:
        return f"Crossword(title={self.title!r}, grid={self.grid!r}, clues={len(self.clues)})"

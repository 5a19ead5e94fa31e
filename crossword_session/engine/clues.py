"""Clue list helpers shared by the aggregate and the render views."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from ..core.constants import Direction
from ..core.models import Clue, Coordinate
from .grid import Grid, is_white


def get_direction_clues(direction: Direction, clues: Iterable[Clue]) -> List[Clue]:
    """Filter clues by direction, preserving presentation order."""
    return [clue for clue in clues if clue.direction == direction]


def get_clue_number_string(clue: Clue) -> str:
    return str(clue.number)


def get_clue_text(clue: Clue) -> str:
    return clue.text


def derive_span(grid: Grid, start: Coordinate, direction: Direction) -> Tuple[Coordinate, ...]:
    """Walk from ``start`` along ``direction`` until the grid edge or a blocked cell.

    Returns an empty tuple when ``start`` itself is not an open cell.
    """

    span: List[Coordinate] = []
    coord = Coordinate(*start)
    while is_white(grid.get(coord)):
        span.append(coord)
        coord = coord.step(direction)
    return tuple(span)

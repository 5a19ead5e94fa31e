"""Grid representation and helper utilities."""

from __future__ import annotations

from typing import Callable, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..core.constants import Bounds
from ..core.models import Cell, Coordinate


def is_white(cell: Optional[Cell]) -> bool:
    """True iff the cell exists and is open."""
    return cell is not None and cell.is_open()


class Grid:
    """Immutable rectangular mapping from coordinates to cells."""

    def __init__(self, bounds: Bounds, cells: Mapping[Coordinate, Cell]) -> None:
        self.bounds = bounds
        self._cells: Dict[Coordinate, Cell] = {}
        for coord, cell in cells.items():
            coord = Coordinate(*coord)
            if not bounds.contains(coord.row, coord.col):
                raise ValueError(f"Cell {tuple(coord)} outside grid bounds {bounds}")
            self._cells[coord] = cell

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "Grid":
        """Build a grid from a row-major 2-D list of cells."""

        height = len(rows)
        width = max((len(row) for row in rows), default=0)
        cells = {
            Coordinate(r, c): cell
            for r, row in enumerate(rows)
            for c, cell in enumerate(row)
        }
        return cls(Bounds(rows=height, cols=width), cells)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get(self, coord: Tuple[int, int]) -> Optional[Cell]:
        return self._cells.get(Coordinate(*coord))

    def coordinates(self) -> Iterator[Coordinate]:
        """Yield every defined coordinate in row-major order."""
        for r in range(self.bounds.rows):
            for c in range(self.bounds.cols):
                coord = Coordinate(r, c)
                if coord in self._cells:
                    yield coord

    def find_coordinate(self, predicate: Callable[[Cell], bool]) -> Optional[Coordinate]:
        for coord in self.coordinates():
            if predicate(self._cells[coord]):
                return coord
        return None

    def numbered_cells(self) -> List[Tuple[Coordinate, int]]:
        return [
            (coord, self._cells[coord].number)
            for coord in self.coordinates()
            if is_white(self._cells[coord]) and self._cells[coord].number is not None
        ]

    def rows(self) -> List[List[Optional[Cell]]]:
        return [
            [self._cells.get(Coordinate(r, c)) for c in range(self.bounds.cols)]
            for r in range(self.bounds.rows)
        ]

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"Grid(rows={self.bounds.rows}, cols={self.bounds.cols})"

"""Read-only projections consumed by renderers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.constants import Direction
from ..core.models import Coordinate
from .clues import get_clue_number_string, get_clue_text
from .crossword import Crossword
from .grid import is_white
from .session import LoadedSession


@dataclass(frozen=True)
class CellView:
    coordinate: Coordinate
    is_white: bool
    is_selected: bool
    is_highlighted: bool
    number: Optional[int]
    filled_character: Optional[str]


@dataclass(frozen=True)
class ClueView:
    number_string: str
    text: str


def cell_views(session: LoadedSession) -> List[List[CellView]]:
    """Per-cell render flags, one list per grid row."""

    crossword = session.crossword
    highlighted = set(
        crossword.get_clue_coordinates(session.selected_coordinate, session.selected_direction)
    )
    bounds = crossword.grid.bounds
    rows: List[List[CellView]] = []
    for r in range(bounds.rows):
        row: List[CellView] = []
        for c in range(bounds.cols):
            coord = Coordinate(r, c)
            cell = crossword.grid.get(coord)
            white = is_white(cell)
            row.append(
                CellView(
                    coordinate=coord,
                    is_white=white,
                    is_selected=coord == session.selected_coordinate,
                    is_highlighted=white and coord in highlighted,
                    number=cell.number if white else None,
                    filled_character=session.filled_letters.get(coord),
                )
            )
        rows.append(row)
    return rows


def clue_views(crossword: Crossword, direction: Direction) -> List[ClueView]:
    return [
        ClueView(number_string=get_clue_number_string(clue), text=get_clue_text(clue))
        for clue in crossword.direction_clues(direction)
    ]


def clue_lists(crossword: Crossword) -> Tuple[List[ClueView], List[ClueView]]:
    """Return the (across, down) clue lists in presentation order."""
    return clue_views(crossword, Direction.ACROSS), clue_views(crossword, Direction.DOWN)


def active_clue_view(session: LoadedSession) -> Optional[ClueView]:
    """The clue under the cursor in the active direction, if any."""

    clue = session.crossword.clue_at(session.selected_coordinate, session.selected_direction)
    if clue is None:
        return None
    number = get_clue_number_string(clue)
    suffix = "A" if clue.direction == Direction.ACROSS else "D"
    return ClueView(number_string=f"{number}{suffix}", text=get_clue_text(clue))

"""Reading and writing ipuz-style puzzle documents.

A document looks like::

    {
        "title": "Mini",
        "dimensions": {"width": 3, "height": 3},
        "puzzle": [[1, 2, "#"], [3, 0, 0], ["#", 0, 0]],
        "clues": {"Across": [[1, "Feline"], [3, "..."]], "Down": [[2, "..."]]}
    }

Grid entries are ``"#"`` or ``null`` for blocked cells, ``0`` for open
cells and a positive number for numbered open cells; ipuz ``{"cell": n}``
wrappers are accepted too. Clue spans are not stored: they are derived from
the grid by walking from the numbered start cell.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..core.constants import Direction
from ..core.exceptions import PuzzleFormatError
from ..core.models import Cell, Clue, Coordinate
from ..engine.clues import derive_span
from ..engine.crossword import Crossword
from ..engine.grid import Grid
from ..engine.validator import CrosswordValidator
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

BLOCK = "#"

_CLUE_KEYS = {
    Direction.ACROSS: ("Across", "across"),
    Direction.DOWN: ("Down", "down"),
}


def parse_puzzle(document: Mapping[str, Any]) -> Crossword:
    """Build a validated :class:`Crossword` from a puzzle document."""

    if not isinstance(document, Mapping):
        raise PuzzleFormatError("Puzzle document must be a JSON object")

    rows = document.get("puzzle")
    if not isinstance(rows, list) or not rows:
        raise PuzzleFormatError("Puzzle document has no 'puzzle' grid")

    dimensions = document.get("dimensions") or {}
    if not isinstance(dimensions, Mapping):
        raise PuzzleFormatError("Puzzle 'dimensions' must be an object")
    height = dimensions.get("height", len(rows))
    width = dimensions.get("width", len(rows[0]) if isinstance(rows[0], list) else 0)
    if _as_number(height) is None or _as_number(width) is None:
        raise PuzzleFormatError(f"Invalid grid dimensions {height!r}x{width!r}")
    height, width = int(height), int(width)
    if len(rows) != height:
        raise PuzzleFormatError(f"Grid has {len(rows)} rows, expected {height}")

    cell_rows: List[List[Cell]] = []
    for r, row in enumerate(rows):
        if not isinstance(row, list) or len(row) != width:
            raise PuzzleFormatError(f"Grid row {r} does not have {width} cells")
        cell_rows.append([_parse_cell(entry, r, c) for c, entry in enumerate(row)])
    grid = Grid.from_rows(cell_rows)

    starts: Dict[int, Coordinate] = {}
    for coord, number in grid.numbered_cells():
        if number in starts:
            raise PuzzleFormatError(f"Clue number {number} appears on more than one cell")
        starts[number] = coord

    clues: List[Clue] = []
    clue_data = document.get("clues") or {}
    if not isinstance(clue_data, Mapping):
        raise PuzzleFormatError("Puzzle 'clues' must be an object")
    for direction, keys in _CLUE_KEYS.items():
        entries = next((clue_data[key] for key in keys if key in clue_data), None) or []
        if not isinstance(entries, list):
            raise PuzzleFormatError(f"{direction.value.title()} clues must be a list")
        for entry in entries:
            number, text = _parse_clue_entry(entry)
            start = starts.get(number)
            if start is None:
                raise PuzzleFormatError(
                    f"{direction.value.title()} clue {number} has no numbered cell"
                )
            clues.append(
                Clue(
                    direction=direction,
                    number=number,
                    text=text,
                    span=derive_span(grid, start, direction),
                )
            )

    crossword = Crossword(
        grid,
        clues,
        title=str(document.get("title") or ""),
        author=str(document.get("author") or ""),
    )
    result = CrosswordValidator().validate(crossword)
    if not result.ok:
        raise PuzzleFormatError("; ".join(result.messages))
    LOGGER.debug("Parsed %r", crossword)
    return crossword


def puzzle_to_jsonable(crossword: Crossword) -> Dict[str, Any]:
    """Serialize a crossword back into the document layout read by :func:`parse_puzzle`."""

    bounds = crossword.grid.bounds
    puzzle: List[List[Any]] = []
    for row in crossword.grid.rows():
        serialized_row: List[Any] = []
        for cell in row:
            if cell is None or not cell.is_open():
                serialized_row.append(BLOCK)
            else:
                serialized_row.append(cell.number or 0)
        puzzle.append(serialized_row)

    return {
        "title": crossword.title,
        "author": crossword.author,
        "dimensions": {"width": bounds.cols, "height": bounds.rows},
        "puzzle": puzzle,
        "clues": {
            keys[0]: [[clue.number, clue.text] for clue in crossword.direction_clues(direction)]
            for direction, keys in _CLUE_KEYS.items()
        },
    }


def _parse_cell(entry: Any, row: int, col: int) -> Cell:
    if isinstance(entry, dict):
        entry = entry.get("cell", 0)
    if entry is None or entry == BLOCK:
        return Cell.blocked()
    if entry == "":
        return Cell.open()
    number = _as_number(entry)
    if number is None or number < 0:
        raise PuzzleFormatError(f"Unrecognised grid entry {entry!r} at {(row, col)}")
    return Cell.open(number or None)


def _parse_clue_entry(entry: Any) -> tuple[int, str]:
    if isinstance(entry, dict):
        number, text = entry.get("number"), entry.get("clue", "")
    elif isinstance(entry, list) and entry:
        number, text = entry[0], entry[1] if len(entry) > 1 else ""
    else:
        raise PuzzleFormatError(f"Unrecognised clue entry {entry!r}")
    parsed = _as_number(number)
    if not parsed:
        raise PuzzleFormatError(f"Clue entry {entry!r} has no positive number")
    return parsed, str(text)


def _as_number(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return None

"""Deterministic integrity checks for fetched crosswords."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

from ..core.constants import Direction
from ..core.exceptions import ValidationError
from ..core.models import Coordinate
from ..utils.logger import get_logger
from .crossword import Crossword
from .grid import is_white


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class CrosswordValidator:
    """Runs the data-model invariant checks over a crossword."""

    def validate(self, crossword: Crossword) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_spans(crossword)
            self._check_no_shared_direction(crossword)
            self._check_numbered_cells_start_clues(crossword)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_spans(self, crossword: Crossword) -> None:
        grid = crossword.grid
        for clue in crossword.clues:
            label = f"{clue.number} {clue.direction.value.lower()}"
            if not clue.span:
                raise ValidationError(f"Clue {label} has an empty span")
            start_cell = grid.get(clue.start)
            if not is_white(start_cell) or start_cell.number != clue.number:
                raise ValidationError(
                    f"Clue {label} does not start on a cell numbered {clue.number}"
                )
            previous = None
            for coord in clue.span:
                if not is_white(grid.get(coord)):
                    raise ValidationError(f"Clue {label} covers non-open cell {tuple(coord)}")
                if previous is not None and previous.step(clue.direction) != coord:
                    raise ValidationError(
                        f"Clue {label} is not contiguous at {tuple(coord)}"
                    )
                previous = coord

    def _check_no_shared_direction(self, crossword: Crossword) -> None:
        seen: Dict[Tuple[Coordinate, Direction], int] = {}
        for clue in crossword.clues:
            for coord in clue.span:
                key = (coord, clue.direction)
                if key in seen:
                    raise ValidationError(
                        f"Cell {tuple(coord)} belongs to {clue.direction.value.lower()} clues "
                        f"{seen[key]} and {clue.number}"
                    )
                seen[key] = clue.number

    def _check_numbered_cells_start_clues(self, crossword: Crossword) -> None:
        starts: Set[Coordinate] = {clue.start for clue in crossword.clues if clue.span}
        for coord, number in crossword.grid.numbered_cells():
            if coord not in starts:
                raise ValidationError(f"Numbered cell {number} at {tuple(coord)} starts no clue")

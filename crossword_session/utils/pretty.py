"""Pretty-print helpers for solving sessions."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List

from ..core.constants import Direction
from ..engine.session import Failure, LoadedSession, Loading, SessionState, Success
from ..engine.view import CellView, active_clue_view, cell_views, clue_views

if TYPE_CHECKING:
    from ..engine.crossword import Crossword


BLOCK_SYMBOL = "#"
EMPTY_SYMBOL = "."


def cell_symbol(view: CellView) -> str:
    if not view.is_white:
        return f" {BLOCK_SYMBOL} "
    letter = view.filled_character or EMPTY_SYMBOL
    if view.is_selected:
        return f"[{letter}]"
    if view.is_highlighted:
        return f"({letter})"
    return f" {letter} "


def format_session(session: LoadedSession) -> str:
    rows = cell_views(session)
    width = len(rows[0]) if rows else 0
    lines = ["    " + "".join(f"{c:^3}" for c in range(width))]
    lines.append("    " + "-" * (3 * width))
    for r, row in enumerate(rows):
        lines.append(f"{r:>2} |" + "".join(cell_symbol(view) for view in row))

    current = active_clue_view(session)
    direction = session.selected_direction.value.lower()
    if current is not None:
        lines.append(f"{current.number_string} ({direction}): {current.text}")
    else:
        lines.append(f"({direction})")
    return "\n".join(lines)


def format_clues(crossword: Crossword) -> str:
    lines: List[str] = []
    for direction in (Direction.ACROSS, Direction.DOWN):
        lines.append(direction.value.title())
        for view in clue_views(crossword, direction):
            lines.append(f"  {view.number_string:>3}. {view.text}")
    return "\n".join(lines)


def format_state(state: SessionState) -> str:
    if isinstance(state, Success):
        return format_session(state.session)
    if isinstance(state, Failure):
        return "Sorry, this crossword could not be loaded."
    if isinstance(state, Loading):
        return f"Loading puzzle {state.puzzle_id}..."
    return "No puzzle requested."


def pretty_print_state(state: SessionState, *, label: str | None = None, stream=None) -> None:
    """Print the session in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_state(state), file=stream)

"""Session controller: wires the state machine to its collaborators."""

from __future__ import annotations

from typing import List, Optional

from ..core.exceptions import FetchError, FocusError
from ..core.models import Coordinate
from ..io.focus import FocusRequester, LoggingFocusRequester
from ..io.puzzle_client import PuzzleFetcher
from ..utils.logger import get_logger
from .session import (
    CellSelected,
    Effect,
    Event,
    FetchFailed,
    FetchPuzzle,
    FetchSucceeded,
    FocusElement,
    LetterEntered,
    LoadedSession,
    LoadRequested,
    SessionMachine,
    SessionState,
)


LOGGER = get_logger(__name__)


def normalize_input(raw: str) -> Optional[str]:
    """Keep only the last typed character, uppercased; None for empty input."""
    if not raw:
        return None
    return raw[-1].upper()


class SessionController:
    """Dispatches user actions and runs the effects the machine asks for.

    One controller serves one puzzle: create a new controller (and machine)
    when the user moves to another puzzle.
    """

    def __init__(
        self,
        fetcher: PuzzleFetcher,
        focus: Optional[FocusRequester] = None,
        machine: Optional[SessionMachine] = None,
    ) -> None:
        self.fetcher = fetcher
        self.focus = focus if focus is not None else LoggingFocusRequester()
        self.machine = machine if machine is not None else SessionMachine()

    @property
    def state(self) -> SessionState:
        return self.machine.state

    @property
    def session(self) -> Optional[LoadedSession]:
        return self.machine.session

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------
    def open(self, puzzle_id: str) -> SessionState:
        self.dispatch(LoadRequested(puzzle_id))
        return self.state

    def select(self, row: int, col: int) -> None:
        self.dispatch(CellSelected(Coordinate(row, col)))

    def type_text(self, raw: str) -> None:
        character = normalize_input(raw)
        session = self.session
        if character is None or session is None:
            return
        self.dispatch(LetterEntered(session.selected_coordinate, character))

    # ------------------------------------------------------------------
    # Event loop
    # ------------------------------------------------------------------
    def dispatch(self, event: Event) -> None:
        pending: List[Event] = [event]
        while pending:
            effects = self.machine.dispatch(pending.pop(0))
            for effect in effects:
                follow_up = self._run(effect)
                if follow_up is not None:
                    pending.append(follow_up)

    def _run(self, effect: Effect) -> Optional[Event]:
        if isinstance(effect, FetchPuzzle):
            return self._fetch(effect.puzzle_id)
        if isinstance(effect, FocusElement):
            self._focus(effect.element_id)
        return None

    def _fetch(self, puzzle_id: str) -> Event:
        try:
            crossword = self.fetcher.fetch_crossword(puzzle_id)
        except FetchError as exc:
            return FetchFailed(puzzle_id, exc)
        return FetchSucceeded(puzzle_id, crossword)

    def _focus(self, element_id: str) -> None:
        try:
            self.focus.focus_element(element_id)
        except FocusError as exc:
            LOGGER.debug("Focus request for %s failed: %s", element_id, exc)

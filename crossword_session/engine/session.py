"""Selection state machine for one puzzle-solving session.

The machine owns a load-status envelope (``NotAsked -> Loading ->
Success | Failure``) and, once loaded, the selected coordinate, the active
direction and the letters typed so far. Events are handled one at a time by
:meth:`SessionMachine.dispatch`, which mutates the session record and
returns the side effects the boundary should carry out. Nothing in here
raises: events that do not apply to the current state are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, Optional, Union

from ..core.constants import INPUT_ELEMENT_ID, Direction, LoadStatus
from ..core.models import Coordinate
from ..utils.logger import get_logger
from .crossword import Crossword
from .grid import is_white


LOGGER = get_logger(__name__)


@dataclass
class LoadedSession:
    crossword: Crossword
    selected_coordinate: Coordinate
    selected_direction: Direction
    filled_letters: Dict[Coordinate, str] = field(default_factory=dict)


# ----------------------------------------------------------------------
# Load-status envelope
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class NotAsked:
    status: ClassVar[LoadStatus] = LoadStatus.NOT_ASKED


@dataclass(frozen=True)
class Loading:
    puzzle_id: str
    status: ClassVar[LoadStatus] = LoadStatus.LOADING


@dataclass(frozen=True)
class Success:
    session: LoadedSession
    status: ClassVar[LoadStatus] = LoadStatus.SUCCESS


@dataclass(frozen=True)
class Failure:
    error: Exception
    status: ClassVar[LoadStatus] = LoadStatus.FAILURE


SessionState = Union[NotAsked, Loading, Success, Failure]


# ----------------------------------------------------------------------
# Events
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class LoadRequested:
    puzzle_id: str


@dataclass(frozen=True)
class FetchSucceeded:
    puzzle_id: str
    crossword: Crossword


@dataclass(frozen=True)
class FetchFailed:
    puzzle_id: str
    error: Exception


@dataclass(frozen=True)
class CellSelected:
    coordinate: Coordinate


@dataclass(frozen=True)
class LetterEntered:
    coordinate: Coordinate
    character: str


Event = Union[LoadRequested, FetchSucceeded, FetchFailed, CellSelected, LetterEntered]


# ----------------------------------------------------------------------
# Effects
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class FetchPuzzle:
    puzzle_id: str


@dataclass(frozen=True)
class FocusElement:
    element_id: str = INPUT_ELEMENT_ID


Effect = Union[FetchPuzzle, FocusElement]


def initial_session(crossword: Crossword) -> LoadedSession:
    """Pick the starting selection for a freshly loaded crossword.

    The first white cell in row-major order is selected. The direction is
    ACROSS when the cell below it is white, DOWN otherwise.
    """

    grid = crossword.grid
    selected = grid.find_coordinate(is_white) or Coordinate(0, 0)
    below = grid.get(selected.step(Direction.DOWN))
    direction = Direction.ACROSS if is_white(below) else Direction.DOWN
    return LoadedSession(
        crossword=crossword,
        selected_coordinate=selected,
        selected_direction=direction,
    )


def resolve_direction(session: LoadedSession, target: Coordinate) -> Direction:
    """Direction to use after clicking ``target``."""

    crossword = session.crossword
    is_across = crossword.is_direction_active(target, Direction.ACROSS)
    is_down = crossword.is_direction_active(target, Direction.DOWN)
    if is_across and is_down:
        if target == session.selected_coordinate:
            return session.selected_direction.toggled()
        return session.selected_direction
    if is_across:
        return Direction.ACROSS
    return Direction.DOWN


class SessionMachine:
    """Owns the session record and applies events to it."""

    def __init__(self, state: Optional[SessionState] = None) -> None:
        self.state: SessionState = state if state is not None else NotAsked()

    @property
    def status(self) -> LoadStatus:
        return self.state.status

    @property
    def session(self) -> Optional[LoadedSession]:
        if isinstance(self.state, Success):
            return self.state.session
        return None

    def dispatch(self, event: Event) -> List[Effect]:
        """Apply ``event`` and return the effects to run at the boundary."""

        if isinstance(event, LoadRequested):
            return self._on_load_requested(event)
        if isinstance(event, (FetchSucceeded, FetchFailed)):
            return self._on_fetch_completed(event)
        session = self.session
        if session is None:
            LOGGER.debug("Ignoring %s while %s", type(event).__name__, self.status.value)
            return []
        if isinstance(event, CellSelected):
            return self._on_cell_selected(session, event)
        if isinstance(event, LetterEntered):
            return self._on_letter_entered(session, event)
        LOGGER.debug("Ignoring unknown event %r", event)
        return []

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def _on_load_requested(self, event: LoadRequested) -> List[Effect]:
        if not isinstance(self.state, NotAsked):
            LOGGER.debug("Ignoring load of %s while %s", event.puzzle_id, self.status.value)
            return []
        self.state = Loading(puzzle_id=event.puzzle_id)
        LOGGER.info("Loading puzzle %s", event.puzzle_id)
        return [FetchPuzzle(event.puzzle_id)]

    def _on_fetch_completed(self, event: Union[FetchSucceeded, FetchFailed]) -> List[Effect]:
        state = self.state
        if not isinstance(state, Loading) or state.puzzle_id != event.puzzle_id:
            LOGGER.debug("Ignoring stale fetch completion for %s", event.puzzle_id)
            return []
        if isinstance(event, FetchFailed):
            LOGGER.warning("Puzzle %s failed to load: %s", event.puzzle_id, event.error)
            self.state = Failure(error=event.error)
            return []
        session = initial_session(event.crossword)
        self.state = Success(session=session)
        LOGGER.info(
            "Puzzle %s loaded; selected %s %s",
            event.puzzle_id,
            tuple(session.selected_coordinate),
            session.selected_direction.value,
        )
        return [FocusElement()]

    def _on_cell_selected(self, session: LoadedSession, event: CellSelected) -> List[Effect]:
        target = Coordinate(*event.coordinate)
        if not is_white(session.crossword.grid.get(target)):
            LOGGER.debug("Ignoring selection of non-open cell %s", tuple(target))
            return []
        session.selected_direction = resolve_direction(session, target)
        session.selected_coordinate = target
        return [FocusElement()]

    def _on_letter_entered(self, session: LoadedSession, event: LetterEntered) -> List[Effect]:
        target = session.selected_coordinate
        if Coordinate(*event.coordinate) != target:
            LOGGER.debug(
                "Letter addressed to %s lands on selected cell %s",
                tuple(event.coordinate),
                tuple(target),
            )
        session.filled_letters[target] = event.character
        session.selected_coordinate = session.crossword.get_next_clue_coordinate(
            target, session.selected_direction
        )
        return []

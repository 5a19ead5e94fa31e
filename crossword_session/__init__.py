"""Interactive crossword-solving session.

This package exposes the public API surface via:

- ``crossword_session.engine.crossword.Crossword``: grid plus clues with
  direction-aware navigation queries.
- ``crossword_session.engine.session.SessionMachine``: the selection state
  machine wrapped in a load-status envelope.
- ``crossword_session.engine.controller.SessionController``: runs the machine
  against fetch and focus collaborators.
"""

from .engine.controller import SessionController
from .engine.crossword import Crossword
from .engine.session import SessionMachine

__all__ = [
    "Crossword",
    "SessionController",
    "SessionMachine",
]

__version__ = "0.1.0"

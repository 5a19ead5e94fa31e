"""Input-focus collaborators."""

from __future__ import annotations

from typing import Protocol

from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class FocusRequester(Protocol):
    def focus_element(self, element_id: str) -> None:
        """Move keyboard focus to ``element_id``; may raise :class:`FocusError`."""


class LoggingFocusRequester:
    """Focus requester for front ends without a focusable widget."""

    def focus_element(self, element_id: str) -> None:
        LOGGER.debug("Focus requested for #%s", element_id)

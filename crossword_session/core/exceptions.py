"""Custom exception hierarchy for the solving session."""


class CrosswordError(Exception):
    """Base exception for session failures."""


class FetchError(CrosswordError):
    """Raised when a puzzle definition cannot be fetched."""


class PuzzleFormatError(FetchError):
    """Raised when a fetched puzzle document cannot be turned into a crossword."""


class FocusError(CrosswordError):
    """Raised by focus collaborators when keyboard focus cannot be moved."""


class ValidationError(CrosswordError):
    """Raised when the crossword integrity checks fail."""

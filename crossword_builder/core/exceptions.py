"""Custom exception hierarchy for the crossword builder."""


class CrosswordError(Exception):
    """Base exception for crossword builder failures."""


class OutOfBoundsError(CrosswordError, IndexError):
    """Raised when a cell coordinate falls outside the grid."""


class GridSizeError(CrosswordError, ValueError):
    """Raised when a grid size is outside the supported range."""


class InvalidWordError(CrosswordError, ValueError):
    """Raised when a word cannot be placed because it is malformed."""


class WordBankError(CrosswordError):
    """Raised when the personal word bank is invalid or unreadable."""


class DictionaryApiError(CrosswordError):
    """Raised when the online dictionary cannot be reached."""

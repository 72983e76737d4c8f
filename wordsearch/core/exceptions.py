"""Custom exception hierarchy for word-search generation."""


class WordSearchError(Exception):
    """Base exception for generator failures."""


class NoDirectionsSelected(WordSearchError):
    """Raised when the caller enabled no word directions."""


class PlacementError(WordSearchError):
    """Raised when a word cannot be written at the requested position."""


class WordListError(WordSearchError):
    """Raised when a word list fails input validation."""


class ValidationError(WordSearchError):
    """Raised when a generated puzzle fails its integrity checks."""

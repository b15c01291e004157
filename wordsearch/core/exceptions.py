"""Custom exception hierarchy for word-search generation."""


class WordSearchError(Exception):
    """Base exception for generator failures."""


class EmptyWordListError(WordSearchError):
    """Raised when there are no words to build a puzzle from."""


class InvalidDimensionError(WordSearchError):
    """Raised when a word cannot fit the grid axes it would run along."""


class PlacementExhausted(WordSearchError):
    """Raised when a word finds no compatible slot within its retry budget."""

    def __init__(self, word: str, attempts: int) -> None:
        super().__init__(f"Failed to place {word} after {attempts} retries")
        self.word = word
        self.attempts = attempts


class WordListLoadError(WordSearchError):
    """Raised when the word list cannot be read or downloaded."""


class ValidationError(WordSearchError):
    """Raised when the finished grid fails its integrity checks."""


class RenderError(WordSearchError):
    """Raised when the puzzle cannot be laid out on the requested canvas."""

"""Deterministic integrity checks for finished word-search grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..core.constants import ALPHABET, DIRECTIONS, Direction
from ..core.exceptions import ValidationError
from ..core.models import FinishedGrid, Placement
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


def find_word(grid: LetterGrid, word: str) -> Optional[Tuple[int, int, Direction]]:
    """Return the first (row, col, direction) where ``word`` can be read, if any."""
    for row in range(grid.height):
        for col in range(grid.width):
            if grid.cell(row, col) != word[0]:
                continue
            for direction in DIRECTIONS:
                if grid.read(row, col, direction, len(word)) == word:
                    return row, col, direction
    return None


class GridValidator:
    """Runs deterministic validation over a finished grid."""

    def __init__(self, alphabet: str = ALPHABET) -> None:
        self.alphabet = set(alphabet)

    def validate(
        self,
        rows: FinishedGrid,
        words: Sequence[str],
        placements: Optional[Sequence[Placement]] = None,
    ) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_rectangular(rows)
            grid = LetterGrid.from_rows(rows)
            self._check_letters_valid(grid)
            self._check_dimension_floor(grid, words)
            self._check_placements(grid, placements or [])
            self._check_words_present(grid, words)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    @staticmethod
    def _check_rectangular(rows: FinishedGrid) -> None:
        if not rows or not rows[0]:
            raise ValidationError("Grid has no cells")
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise ValidationError(f"Row {index} has {len(row)} cells, expected {width}")
            if any(letter is None for letter in row):
                raise ValidationError(f"Row {index} contains an empty cell")

    def _check_letters_valid(self, grid: LetterGrid) -> None:
        for r in range(grid.height):
            for c in range(grid.width):
                letter = grid.cell(r, c)
                if letter not in self.alphabet:
                    raise ValidationError(f"Invalid letter {letter!r} at {(r, c)}")

    @staticmethod
    def _check_dimension_floor(grid: LetterGrid, words: Sequence[str]) -> None:
        longest = max((len(w) for w in words), default=0)
        if grid.width < longest or grid.height < longest:
            raise ValidationError(
                f"{grid.width}x{grid.height} grid is smaller than the longest word ({longest})"
            )

    @staticmethod
    def _check_placements(grid: LetterGrid, placements: Sequence[Placement]) -> None:
        for placement in placements:
            found = grid.read(placement.row, placement.col, placement.direction, len(placement.word))
            if found != placement.word:
                raise ValidationError(
                    f"Placement of {placement.word} at {(placement.row, placement.col)} "
                    f"going {placement.direction.name} reads {found!r}"
                )

    @staticmethod
    def _check_words_present(grid: LetterGrid, words: Sequence[str]) -> None:
        for word in words:
            if find_word(grid, word) is None:
                raise ValidationError(f"Word {word} does not appear in the grid")

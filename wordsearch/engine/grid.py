"""Letter grid buffer and cell-level helpers."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from ..core.constants import Bounds, Direction
from ..core.exceptions import ValidationError
from ..core.models import Cell, FinishedGrid


class LetterGrid:
    """Mutable ``height x width`` buffer of letters, ``None`` meaning empty.

    A cell that holds a letter is never rewritten with a different one:
    :meth:`write_word` only runs after :meth:`can_place` has accepted the run.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.bounds = Bounds(rows=height, cols=width)
        self.cells: List[List[Cell]] = [[None] * width for _ in range(height)]
        self._empty_count = self.bounds.area

    @property
    def width(self) -> int:
        return self.bounds.cols

    @property
    def height(self) -> int:
        return self.bounds.rows

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def set_letter(self, row: int, col: int, letter: str) -> None:
        current = self.cells[row][col]
        if current is None:
            self._empty_count -= 1
        elif current != letter:
            raise ValueError(
                f"Cell ({row},{col}) already holds {current!r}, refusing {letter!r}"
            )
        self.cells[row][col] = letter

    def empty_count(self) -> int:
        return self._empty_count

    def empty_cells(self) -> Iterator[Tuple[int, int]]:
        for r, row in enumerate(self.cells):
            for c, letter in enumerate(row):
                if letter is None:
                    yield r, c

    # ------------------------------------------------------------------
    # Word runs
    # ------------------------------------------------------------------
    @staticmethod
    def run(word: str, row: int, col: int, direction: Direction) -> Iterator[Tuple[int, int, str]]:
        dx, dy = direction.value
        for i, letter in enumerate(word):
            yield row + i * dy, col + i * dx, letter

    def can_place(self, word: str, row: int, col: int, direction: Direction) -> bool:
        """Check that every cell of the run is in bounds and empty or matching."""
        for r, c, letter in self.run(word, row, col, direction):
            if not self.bounds.contains(r, c):
                return False
            existing = self.cells[r][c]
            if existing is not None and existing != letter:
                return False
        return True

    def write_word(self, word: str, row: int, col: int, direction: Direction) -> None:
        for r, c, letter in self.run(word, row, col, direction):
            self.set_letter(r, c, letter)

    def read(self, row: int, col: int, direction: Direction, length: int) -> Optional[str]:
        """Return the ``length`` letters starting at (row, col), or None if off-grid."""
        dx, dy = direction.value
        letters: List[str] = []
        for i in range(length):
            r, c = row + i * dy, col + i * dx
            if not self.bounds.contains(r, c):
                return None
            letter = self.cells[r][c]
            if letter is None:
                return None
            letters.append(letter)
        return "".join(letters)

    # ------------------------------------------------------------------
    # Finalization
    # ------------------------------------------------------------------
    def freeze(self) -> FinishedGrid:
        """Return the grid as immutable rows; every cell must be filled."""
        if self._empty_count:
            raise ValidationError(f"{self._empty_count} cells are still empty")
        return tuple(tuple(row) for row in self.cells)  # type: ignore[arg-type]

    @classmethod
    def from_rows(cls, rows: FinishedGrid) -> "LetterGrid":
        grid = cls(width=len(rows[0]), height=len(rows))
        for r, row in enumerate(rows):
            for c, letter in enumerate(row):
                grid.set_letter(r, c, letter)
        return grid

    def to_jsonable(self) -> List[str]:
        return ["".join(letter or "." for letter in row) for row in self.cells]

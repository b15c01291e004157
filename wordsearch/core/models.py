"""Data models supporting the word-search generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, MutableSequence, Optional, Protocol, Tuple, TypeVar

from .constants import Direction

T = TypeVar("T")

Cell = Optional[str]
FinishedGrid = Tuple[Tuple[str, ...], ...]


class RandomSource(Protocol):
    """Randomness the engine needs; ``random.Random`` satisfies it."""

    def randint(self, a: int, b: int) -> int:
        ...

    def shuffle(self, x: MutableSequence[T]) -> None:
        ...


@dataclass(frozen=True)
class GridDimensions:
    width: int
    height: int


@dataclass
class Placement:
    """A word committed to a starting cell and direction."""

    word: str
    row: int
    col: int
    direction: Direction
    _cells: Optional[List[Tuple[int, int]]] = field(default=None, repr=False, compare=False)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        """(row, col) of every letter, in reading order."""
        if self._cells is None:
            dx, dy = self.direction.value
            self._cells = [
                (self.row + i * dy, self.col + i * dx) for i in range(len(self.word))
            ]
        return self._cells

    @property
    def end(self) -> Tuple[int, int]:
        return self.cells[-1]

    def to_jsonable(self) -> dict:
        return {
            "word": self.word,
            "start": [self.row, self.col],
            "end": list(self.end),
            "direction": self.direction.name,
        }

"""Shared constants and enumerations for the word-search generator."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .exceptions import InvalidDimensionError

ALPHABET: str = string.ascii_uppercase


class Direction(Enum):
    """The eight compass directions a word can run in, as (dx, dy) steps.

    ``dx`` moves along columns and ``dy`` along rows, so SOUTH walks down the
    grid. Member order matters: the placement engine draws a direction by
    index.
    """

    EAST = (1, 0)
    SOUTHEAST = (1, 1)
    SOUTH = (0, 1)
    SOUTHWEST = (-1, 1)
    WEST = (-1, 0)
    NORTHWEST = (-1, -1)
    NORTH = (0, -1)
    NORTHEAST = (1, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def fits(self, length: int, width: int, height: int) -> bool:
        """Return True when a word of ``length`` has at least one legal start.

        Zero steps are bounded like positive ones, so the check is the same
        for every direction.
        """
        return 1 <= length <= width and length <= height

    def start_ranges(self, length: int, width: int, height: int) -> Tuple[range, range]:
        """Return the legal starting columns and rows for a word of ``length``.

        A negative step must start at least ``length - 1`` cells in from the
        low edge; any other step must start at least ``length - 1`` cells in
        from the high edge.
        """

        if length < 1:
            raise InvalidDimensionError(f"Word length must be positive, got {length}")
        if length > width or length > height:
            raise InvalidDimensionError(
                f"Word of length {length} does not fit a {width}x{height} grid going {self.name}"
            )
        return _axis_range(self.dx, length, width), _axis_range(self.dy, length, height)


def _axis_range(step: int, length: int, size: int) -> range:
    if step < 0:
        return range(length - 1, size)
    return range(0, size - length + 1)


DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    @property
    def area(self) -> int:
        return self.rows * self.cols

"""Randomized greedy placement of words onto the letter grid."""

from __future__ import annotations

from typing import Iterable, List

from ..core.constants import DIRECTIONS
from ..core.exceptions import PlacementExhausted
from ..core.models import Placement, RandomSource
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)


class PlacementEngine:
    """Places one word at a time, never revisiting earlier placements.

    Each word gets as many random (direction, start) attempts as the grid has
    empty cells when its turn comes. A word that runs out of attempts aborts
    the whole run with :class:`PlacementExhausted`.
    """

    def __init__(self, grid: LetterGrid, rng: RandomSource) -> None:
        self.grid = grid
        self.rng = rng
        self.placements: List[Placement] = []

    def place(self, word: str) -> Placement:
        retry_limit = self.grid.empty_count()
        width, height = self.grid.width, self.grid.height
        for attempt in range(1, retry_limit + 1):
            direction = DIRECTIONS[self.rng.randint(0, len(DIRECTIONS) - 1)]
            if not direction.fits(len(word), width, height):
                LOGGER.debug("%s cannot run %s in a %sx%s grid", word, direction.name, width, height)
                continue
            cols, rows = direction.start_ranges(len(word), width, height)
            col = self.rng.randint(cols[0], cols[-1])
            row = self.rng.randint(rows[0], rows[-1])
            if not self.grid.can_place(word, row, col, direction):
                LOGGER.debug("%s clashes at (%s,%s) going %s", word, row, col, direction.name)
                continue
            self.grid.write_word(word, row, col, direction)
            placement = Placement(word=word, row=row, col=col, direction=direction)
            self.placements.append(placement)
            LOGGER.debug(
                "Placed %s at (%s,%s) going %s on attempt %s/%s",
                word,
                row,
                col,
                direction.name,
                attempt,
                retry_limit,
            )
            return placement

        LOGGER.warning("Giving up on %s after %s attempts", word, retry_limit)
        raise PlacementExhausted(word, retry_limit)

    def place_all(self, words: Iterable[str]) -> List[Placement]:
        return [self.place(word) for word in words]

"""Main word-search generator orchestration.

Single pass:
  1. Size the grid from the words in their given order.
  2. Shuffle the words and place them greedily, one at a time.
  3. Fill every cell left empty with random letters.

A word that cannot be placed aborts the run; the caller decides whether to
try again with a new seed or different dimensions.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core.constants import ALPHABET
from ..core.exceptions import EmptyWordListError, ValidationError
from ..core.models import FinishedGrid, GridDimensions, Placement, RandomSource
from ..utils.logger import get_logger
from .dimensions import compute_dimensions
from .filler import fill_empty_cells
from .grid import LetterGrid
from .placement import PlacementEngine
from .validator import GridValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    words: Sequence[str]
    width: Optional[int] = None
    height: Optional[int] = None
    seed: Optional[int] = None
    alphabet: str = ALPHABET

    def to_dimensions(self) -> GridDimensions:
        return compute_dimensions(self.words, self.width, self.height)


@dataclass
class WordSearchResult:
    grid: FinishedGrid
    words: List[str]
    placements: List[Placement] = field(default_factory=list)
    validation_messages: List[str] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def rows_as_strings(self) -> List[str]:
        return ["".join(row) for row in self.grid]


class WordSearchGenerator:
    """High-level orchestrator: size, shuffle, place, fill."""

    def __init__(self, config: GeneratorConfig, rng: Optional[RandomSource] = None) -> None:
        self.config = config
        self.rng: RandomSource = rng if rng is not None else random.Random(config.seed)
        self.validator = GridValidator(config.alphabet)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self) -> WordSearchResult:
        words = list(self.config.words)
        if not words:
            raise EmptyWordListError("No words to place")

        dims = self.config.to_dimensions()
        LOGGER.info("Building %sx%s grid for %s words", dims.width, dims.height, len(words))
        grid = LetterGrid(dims.width, dims.height)

        order = list(words)
        self.rng.shuffle(order)

        engine = PlacementEngine(grid, self.rng)
        placements = engine.place_all(order)
        filled = fill_empty_cells(grid, self.rng, self.config.alphabet)
        LOGGER.info(
            "Word search completed: %s words placed, %s filler letters",
            len(placements),
            filled,
        )
        frozen = grid.freeze()
        validation = self.validator.validate(frozen, words, placements)
        if not validation.ok:
            raise ValidationError(f"Grid validation failed: {validation.messages}")
        return WordSearchResult(
            grid=frozen,
            words=words,
            placements=placements,
            validation_messages=validation.messages,
            seed=self.config.seed,
        )


def generate_grid(
    words: Sequence[str],
    width: Optional[int] = None,
    height: Optional[int] = None,
    rng: Optional[RandomSource] = None,
) -> FinishedGrid:
    """Generate a puzzle and return only its immutable grid of letters."""

    config = GeneratorConfig(words=words, width=width, height=height)
    return WordSearchGenerator(config, rng=rng).generate().grid

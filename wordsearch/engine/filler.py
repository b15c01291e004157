"""Random filler letters for cells no word claimed."""

from __future__ import annotations

from ..core.constants import ALPHABET
from ..core.models import RandomSource
from .grid import LetterGrid


def fill_empty_cells(grid: LetterGrid, rng: RandomSource, alphabet: str = ALPHABET) -> int:
    """Give every empty cell an independent uniform letter; return how many were filled."""

    if not alphabet:
        raise ValueError("Filler alphabet must not be empty")
    filled = 0
    for row, col in list(grid.empty_cells()):
        grid.set_letter(row, col, alphabet[rng.randint(0, len(alphabet) - 1)])
        filled += 1
    return filled

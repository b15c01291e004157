"""Grid sizing from word-list statistics."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from ..core.exceptions import EmptyWordListError, InvalidDimensionError
from ..core.models import GridDimensions
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def default_size(words: Sequence[str]) -> int:
    """Side length giving roughly twice as many cells as letters."""
    if not words:
        raise EmptyWordListError("Cannot size a grid for an empty word list")
    avg_len = sum(len(w) for w in words) / len(words)
    return math.ceil(math.sqrt(2 * avg_len * len(words)))


def compute_dimensions(
    words: Sequence[str],
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> GridDimensions:
    """Return grid dimensions, never smaller than the longest word on either axis."""

    if not words:
        raise EmptyWordListError("Cannot size a grid for an empty word list")
    for name, value in (("width", width), ("height", height)):
        if value is not None and value < 1:
            raise InvalidDimensionError(f"Grid {name} must be a positive integer, got {value}")

    longest = max(len(w) for w in words)
    fallback = default_size(words)
    dims = GridDimensions(
        width=max(longest, width if width is not None else fallback),
        height=max(longest, height if height is not None else fallback),
    )
    if (width is not None and dims.width != width) or (height is not None and dims.height != height):
        LOGGER.info(
            "Requested %sx%s grid raised to %sx%s to fit the longest word (%s letters)",
            width,
            height,
            dims.width,
            dims.height,
            longest,
        )
    return dims

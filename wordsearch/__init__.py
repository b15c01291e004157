"""Word-search puzzle generator.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.WordSearchGenerator``: sizes, fills and returns a grid.
- ``wordsearch.engine.generator.generate_grid``: one-call helper returning only the grid.
- ``wordsearch.io.svg_renderer.render_svg``: draws a finished grid and its word key.
"""

from .engine.generator import GeneratorConfig, WordSearchGenerator, WordSearchResult, generate_grid
from .core.exceptions import (
    EmptyWordListError,
    InvalidDimensionError,
    PlacementExhausted,
    WordSearchError,
)

__all__ = [
    "GeneratorConfig",
    "WordSearchGenerator",
    "WordSearchResult",
    "generate_grid",
    "EmptyWordListError",
    "InvalidDimensionError",
    "PlacementExhausted",
    "WordSearchError",
]

__version__ = "0.1.0"

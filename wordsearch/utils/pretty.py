"""Pretty-print helpers for word-search grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Set, Tuple

if TYPE_CHECKING:
    from ..core.models import FinishedGrid
    from ..engine.generator import WordSearchResult


def format_grid(grid: FinishedGrid) -> str:
    width = len(grid[0]) if grid else 0
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(grid):
        row_render = " ".join(f"{letter:>2}" for letter in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(grid: FinishedGrid, *, label: str | None = None, stream=None) -> None:
    """Print the letter grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid), file=stream)


def print_puzzle_stats(result: WordSearchResult, *, stream=None) -> None:
    """Print grid + summary stats for a completed word search."""

    stream = stream or sys.stdout
    print(format_grid(result.grid), file=stream)

    total_cells = result.width * result.height
    covered: Set[Tuple[int, int]] = set()
    for placement in result.placements:
        covered.update(placement.cells)
    lengths = [len(p.word) for p in result.placements]
    directions = Counter(p.direction.name for p in result.placements)

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {result.height} x {result.width} ({total_cells} cells)", file=stream)
    print(f"  Word letters:  {len(covered)} ({len(covered) / total_cells * 100:.0f}%)", file=stream)
    print(f"  Filler:        {total_cells - len(covered)}", file=stream)

    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(result.placements)}", file=stream)
    if lengths:
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
        dist_parts = [f"{name}:{count}" for name, count in sorted(directions.items())]
        print(f"  Directions:    {' '.join(dist_parts)}", file=stream)

    print(file=stream)
    print("--- Validation ---", file=stream)
    if result.validation_messages:
        for msg in result.validation_messages:
            print(f"  {msg}", file=stream)
    else:
        print("  OK", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)

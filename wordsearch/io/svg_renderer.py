"""SVG rendering of a finished word search with its word key."""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Tuple

from cairosvg import svg2png

from ..core.exceptions import RenderError
from ..core.models import FinishedGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

MIN_FONT_SIZE = 1.0
MAX_FONT_SIZE = 300.0


@dataclass(frozen=True)
class FontMetrics:
    """Em-relative glyph metrics used in place of real font measurement."""

    advance_em: float = 0.833  # width of "M"
    line_height_em: float = 1.0
    ascent_em: float = 0.8

    def text_size(self, font_size: float, text: str = "M") -> Tuple[int, int]:
        return int(font_size * self.advance_em * len(text)), int(font_size * self.line_height_em)


@dataclass
class RenderConfig:
    """Configuration for SVG rendering."""

    image_width: int = 768
    image_height: int = 1024
    padding: float = 1.3  # horizontal room per grid letter, relative to "M"
    legend_columns: int = 3
    legend_scale: float = 0.8
    font_family: str = "FreeSans, Helvetica, Arial, sans-serif"
    background_color: str = "#FFFFFF"
    text_color: str = "#000000"
    metrics: FontMetrics = field(default_factory=FontMetrics)


def cell_stride(font_size: float, metrics: FontMetrics, padding: float) -> int:
    width, height = metrics.text_size(font_size)
    return max(int(width * padding), height)


def compute_font_size(desired_stride: int, metrics: FontMetrics, padding: float = 1.3) -> float:
    """Binary-search the font size whose cell stride matches ``desired_stride``.

    Without an exact match the largest size found below the target is used.
    """

    if desired_stride < cell_stride(MIN_FONT_SIZE, metrics, padding):
        raise RenderError(f"Cells of {desired_stride}px are too small for any font size")

    low, high = MIN_FONT_SIZE, MAX_FONT_SIZE
    while high - low > 1.0:
        guess = (low + high) / 2.0
        stride = cell_stride(guess, metrics, padding)
        if stride < desired_stride:
            low = guess
        elif stride > desired_stride:
            high = guess
        else:
            return guess
    return low


def column_positions(
    image_width: int,
    y_stride: int,
    num_columns: int,
    length: int,
) -> List[Tuple[int, int]]:
    """Return (x, y) offsets laying ``length`` items out column by column."""

    positions: List[Tuple[int, int]] = []
    col_width = image_width // num_columns
    for column in range(num_columns):
        num_rows = length // num_columns
        if length % num_columns > column:
            num_rows += 1
        for row in range(num_rows):
            positions.append((column * col_width, row * y_stride))
    return positions


def render_svg(grid: FinishedGrid, words: Sequence[str], config: RenderConfig | None = None) -> str:
    """Render the letter grid with the word key laid out in columns beneath it."""

    cfg = config or RenderConfig()
    if not grid or not grid[0]:
        raise RenderError("Cannot render an empty grid")
    rows, cols = len(grid), len(grid[0])
    metrics = cfg.metrics

    desired_stride = min(cfg.image_width // cols, cfg.image_height // rows)
    font_size = compute_font_size(desired_stride, metrics, cfg.padding)
    stride = cell_stride(font_size, metrics, cfg.padding)
    LOGGER.debug("Grid font size %.2f gives %spx cells (wanted %spx)", font_size, stride, desired_stride)

    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'viewBox="0 0 {cfg.image_width} {cfg.image_height}" '
        f'width="{cfg.image_width}" height="{cfg.image_height}">',
        "  <style>",
        f"    .letter {{ font-family: {cfg.font_family}; font-size: {font_size:.2f}px; "
        f"fill: {cfg.text_color}; text-anchor: middle; }}",
        f"    .key {{ font-family: {cfg.font_family}; font-size: {font_size * cfg.legend_scale:.2f}px; "
        f"fill: {cfg.text_color}; }}",
        "  </style>",
        f'  <rect x="0" y="0" width="{cfg.image_width}" height="{cfg.image_height}" '
        f'fill="{cfg.background_color}" />',
    ]

    baseline = font_size * metrics.ascent_em
    for r, line in enumerate(grid):
        for c, letter in enumerate(line):
            x = c * stride + stride / 2
            y = r * stride + baseline
            parts.append(f'  <text x="{x:.1f}" y="{y:.1f}" class="letter">{html.escape(letter)}</text>')

    key_y0 = (rows + 1) * stride
    key_size = font_size * cfg.legend_scale
    _, y_stride = metrics.text_size(key_size)
    key_baseline = key_size * metrics.ascent_em
    positions = column_positions(cfg.image_width, y_stride, cfg.legend_columns, len(words))
    for (x, y), word in zip(positions, words):
        parts.append(
            f'  <text x="{x}" y="{key_y0 + y + key_baseline:.1f}" class="key">{html.escape(word)}</text>'
        )
    if positions and key_y0 + max(y for _, y in positions) + y_stride > cfg.image_height:
        LOGGER.warning("Word key runs past the bottom of the %spx image", cfg.image_height)

    parts.append("</svg>")
    return "\n".join(parts)


def save_image(svg_text: str, path: Path | str) -> None:
    """Write the puzzle as SVG text, or rasterized to PNG when ``path`` ends in .png."""
    target = Path(path)
    if target.suffix.lower() == ".png":
        svg2png(bytestring=svg_text.encode("utf-8"), write_to=str(target))
    else:
        target.write_text(svg_text, encoding="utf-8")
    LOGGER.info("Puzzle image written to %s", target)

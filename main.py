"""CLI entrypoint for the word-search puzzle generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from wordsearch.core.exceptions import WordSearchError
from wordsearch.data.wordlist import fetch_wordlist, normalize_words, read_wordlist
from wordsearch.engine.generator import GeneratorConfig, WordSearchGenerator
from wordsearch.io.svg_renderer import RenderConfig, render_svg, save_image
from wordsearch.utils.logger import configure_logging, get_logger
from wordsearch.utils.pretty import print_puzzle_stats

LOGGER = get_logger("wordsearch.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a word-search puzzle image from a list of words",
    )
    parser.add_argument(
        "-f",
        "--file",
        dest="wordlist",
        type=Path,
        default=Path("words.txt"),
        help="File containing the words to hide, one per line",
    )
    parser.add_argument("--url", type=str, help="Download the word list from this URL instead of --file")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output image file (.png or .svg). Defaults to <wordlist>.png",
    )
    parser.add_argument("-c", "--columns", type=int, help="Width of the grid, in letters")
    parser.add_argument("-r", "--rows", type=int, help="Height of the grid, in letters")
    parser.add_argument("-x", "--image-width", type=int, default=768, help="Width of the produced image")
    parser.add_argument("-y", "--image-height", type=int, default=1024, help="Height of the produced image")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--json", type=Path, help="Optional path to a JSON dump of grid and placements")
    parser.add_argument("--print", action="store_true", help="Print the grid and stats to stdout")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def default_output(args: argparse.Namespace) -> Path:
    if args.output:
        return args.output
    if args.url:
        return Path("wordsearch.png")
    return args.wordlist.with_suffix(".png")


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    for name in ("columns", "rows", "image_width", "image_height"):
        value = getattr(args, name)
        if value is not None and value < 1:
            parser.error(f"--{name.replace('_', '-')} must be a positive integer")

    try:
        raw_words = fetch_wordlist(args.url) if args.url else read_wordlist(args.wordlist)
        display_words, words = normalize_words(raw_words)

        config = GeneratorConfig(words=words, width=args.columns, height=args.rows, seed=args.seed)
        result = WordSearchGenerator(config).generate()

        render_config = RenderConfig(image_width=args.image_width, image_height=args.image_height)
        save_image(render_svg(result.grid, display_words, render_config), default_output(args))
    except WordSearchError as exc:
        LOGGER.error("%s", exc)
        return 1
    except OSError as exc:
        LOGGER.error("Cannot write puzzle image: %s", exc)
        return 1

    if args.print:
        print_puzzle_stats(result)

    if args.json:
        payload: Dict[str, Any] = {
            "width": result.width,
            "height": result.height,
            "grid": result.rows_as_strings(),
            "words": display_words,
            "placements": [placement.to_jsonable() for placement in result.placements],
            "seed": result.seed,
        }
        try:
            args.json.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as exc:
            LOGGER.error("Cannot write JSON dump: %s", exc)
            return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

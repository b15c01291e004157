"""Word list loading from local files or over HTTP."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Tuple

import requests

from ..core.exceptions import EmptyWordListError, WordListLoadError
from ..utils.logger import get_logger
from .normalization import clean_word

LOGGER = get_logger(__name__)


def parse_wordlist(text: str) -> List[str]:
    """Split text into entries, one per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def read_wordlist(path: Path | str) -> List[str]:
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise WordListLoadError(f"Cannot read word list {source}: {exc}") from exc
    entries = parse_wordlist(text)
    if not entries:
        raise EmptyWordListError(f"Empty word list: {source}")
    LOGGER.info("Loaded %s words from %s", len(entries), source)
    return entries


def fetch_wordlist(url: str, timeout_seconds: float = 30.0) -> List[str]:
    """Download a plain-text word list."""
    try:
        response = requests.get(url, timeout=timeout_seconds)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise WordListLoadError(f"Word list download failed: {exc}") from exc

    entries = parse_wordlist(response.text)
    if not entries:
        raise EmptyWordListError(f"Empty word list: {url}")
    LOGGER.info("Downloaded %s words from %s", len(entries), url)
    return entries


def normalize_words(raw: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Return (display, normalized) pairs for entries that keep at least one letter.

    The display list keeps the entry as written for the puzzle legend; the
    normalized list is what goes into the grid.
    """
    display: List[str] = []
    normalized: List[str] = []
    for entry in raw:
        word = clean_word(entry)
        if not word:
            LOGGER.warning("Skipping %r: no letters A-Z after normalization", entry)
            continue
        display.append(entry)
        normalized.append(word)
    if not normalized:
        raise EmptyWordListError("No usable words after normalization")
    return display, normalized

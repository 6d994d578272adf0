"""
Stop-word loading.

The resource is plain text: one or more lines, each a comma-separated list of
lowercase words. There is no escaping.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable

logger = logging.getLogger(__name__)

DEFAULT_STOPWORDS_PATH = Path(__file__).resolve().parent / "data" / "stopwords.txt"


def parse_stopwords(lines: Iterable[str]) -> FrozenSet[str]:
    """Split comma-separated lines into a set of lowercase words, ignoring blanks."""
    words = set()
    for line in lines:
        for item in line.split(","):
            word = item.strip().lower()
            if word:
                words.add(word)
    return frozenset(words)


def load_stopwords(path: Path | None = None) -> FrozenSet[str]:
    """
    Load stop words from `path` (defaults to the bundled list).

    An unreadable file is logged and yields an empty set, so counting still
    works, just without filtering.
    """
    if path is None:
        path = DEFAULT_STOPWORDS_PATH
    try:
        with Path(path).open("r", encoding="utf-8") as f:
            stopwords = parse_stopwords(f)
    except OSError as e:
        logger.warning("Cannot open stop-word file %s for reading: %s", path, e)
        return frozenset()
    logger.debug("Loaded %d stop words from %s", len(stopwords), path)
    return stopwords

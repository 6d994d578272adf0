"""
Build shared state for the API (used in lifespan).
"""

from __future__ import annotations

from typing import FrozenSet

from topwords.ranking import SearchConfig
from topwords.stopwords import load_stopwords


def build_stopwords(config: SearchConfig | None = None) -> FrozenSet[str]:
    """Load the stop-word set once for the lifetime of the app."""
    config = config or SearchConfig.from_env()
    return load_stopwords(config.stopwords_path)

"""
Configuration for word-frequency searches.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file if it exists
project_root = Path(__file__).resolve().parents[2]
env_file = project_root / ".env"
if env_file.exists():
    load_dotenv(env_file)

DEFAULT_TOP_K = 10

logger = logging.getLogger(__name__)


def _top_k_from_env() -> int:
    raw = os.getenv("TOPWORDS_TOP_K")
    if not raw:
        return DEFAULT_TOP_K
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer TOPWORDS_TOP_K=%r; using %d", raw, DEFAULT_TOP_K)
        return DEFAULT_TOP_K


@dataclass
class SearchConfig:
    """Settings for a FrequentWordSearcher session."""

    top_k: int = DEFAULT_TOP_K
    stem_language: Optional[str] = None
    stopwords_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "SearchConfig":
        """
        Build a config from TOPWORDS_TOP_K, TOPWORDS_STEM_LANGUAGE and
        TOPWORDS_STOPWORDS_PATH, falling back to the defaults.
        """
        stem_language = os.getenv("TOPWORDS_STEM_LANGUAGE") or None
        stopwords_path = os.getenv("TOPWORDS_STOPWORDS_PATH")
        return cls(
            top_k=_top_k_from_env(),
            stem_language=stem_language,
            stopwords_path=Path(stopwords_path) if stopwords_path else None,
        )

"""
Pluggable stemming for word-frequency counting.
"""

from .config import StemmerConfig
from .registry import (
    SNOWBALL_LANGUAGES,
    STEMMER_REGISTRY,
    Stemmer,
    available_languages,
)

__all__ = [
    "StemmerConfig",
    "Stemmer",
    "STEMMER_REGISTRY",
    "SNOWBALL_LANGUAGES",
    "available_languages",
]

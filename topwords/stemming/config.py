"""
Per-session stemmer activation state.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from .registry import STEMMER_REGISTRY, Stemmer, StemmerFactory, normalize_language

logger = logging.getLogger(__name__)


class StemmerConfig:
    """
    Holds whether stemming is on and, if so, which stemmer to apply.

    Two states: inactive (initial) and active for one language. Activating
    an unknown language, or one whose stemmer fails to build, leaves the
    config inactive and logs a warning instead of raising.

    Not thread-safe: callers sharing one config across threads must
    serialize activate/deactivate with their searches.
    """

    def __init__(
        self,
        language: Optional[str] = None,
        *,
        registry: Optional[Dict[str, StemmerFactory]] = None,
    ) -> None:
        self.registry = registry if registry is not None else STEMMER_REGISTRY
        self.language: Optional[str] = None
        self._stemmer: Optional[Stemmer] = None
        if language:
            self.activate(language)

    @property
    def is_active(self) -> bool:
        return self._stemmer is not None

    def activate(self, language: str) -> bool:
        """
        Switch stemming on for `language`. Returns True on success.

        A failed attempt leaves the config inactive even if another language
        was active before.
        """
        key = normalize_language(language)
        logger.info("Initializing stemmer for language %r", key)
        factory = self.registry.get(key)
        if factory is None:
            logger.warning("No stemmer registered for language %r; stemming disabled", language)
            self.deactivate()
            return False
        try:
            stemmer = factory()
        except (ValueError, LookupError) as e:
            logger.warning("Could not build stemmer for %r: %s", key, e)
            self.deactivate()
            return False
        self._stemmer = stemmer
        self.language = key
        return True

    def deactivate(self) -> None:
        """Switch stemming off. Safe to call when already inactive."""
        self._stemmer = None
        self.language = None

    def stem(self, word: str) -> str:
        """
        Return the stem of `word`, or `word` itself when inactive or when the
        stemmer produces nothing.
        """
        if self._stemmer is None:
            return word
        stemmed = self._stemmer.stem(word)
        if not stemmed or stemmed == word:
            return word
        logger.debug("Normalizing %r to %r", word, stemmed)
        return stemmed

    def __repr__(self) -> str:
        return f"StemmerConfig(language={self.language!r})"

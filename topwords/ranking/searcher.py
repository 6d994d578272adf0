"""
Find the K most frequent words in a block of text.

Pipeline (each step linear in its input):

    1. tokenize: drop non-letters, lowercase, split on whitespace
    2. extract_word_frequency: count non-stop words (stemmed if enabled)
    3. bucket_rank: place each word in the bucket for its count
    4. select_top_k: read buckets from the highest count down

Ties between equally frequent words are broken by first occurrence in the
text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, List, Optional, Tuple

from topwords.stemming import StemmerConfig
from topwords.stopwords import load_stopwords

from .buckets import bucket_rank
from .config import SearchConfig
from .frequency import FrequencyMap, extract_word_frequency
from .selector import select_top_k
from .tokenizer import split_words, validate_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrequentWord:
    """A word and how many times it was counted."""

    word: str
    count: int


class FrequentWordSearcher:
    """
    A counting session: one stop-word set and one stemmer configuration.

    Stemmer state belongs to the session, so two searchers never affect each
    other. A single searcher is not safe to reconfigure from several threads
    while it is searching.
    """

    def __init__(
        self,
        stopwords: Optional[AbstractSet[str]] = None,
        stemmer: Optional[StemmerConfig] = None,
        config: Optional[SearchConfig] = None,
    ) -> None:
        self.config = config or SearchConfig()
        if stopwords is None:
            stopwords = load_stopwords(self.config.stopwords_path)
        self.stopwords = frozenset(stopwords)
        self.stemmer = stemmer or StemmerConfig(self.config.stem_language)

    @classmethod
    def from_config(cls, config: Optional[SearchConfig] = None) -> "FrequentWordSearcher":
        """Build a searcher from config (environment by default)."""
        return cls(config=config or SearchConfig.from_env())

    def activate_stemmer(self, language: str) -> bool:
        return self.stemmer.activate(language)

    def deactivate_stemmer(self) -> None:
        self.stemmer.deactivate()

    def is_stemmer_active(self) -> bool:
        return self.stemmer.is_active

    def _rank(self, text: str, k: int) -> Tuple[List[str], FrequencyMap]:
        validate_text(text)
        logger.info("Processing text to find the %d most frequent words", k)
        if k <= 0:
            return [], {}

        tokens = split_words(text)
        word_frequency, max_freq = extract_word_frequency(
            tokens, self.stopwords, self.stemmer
        )
        if max_freq == 0:
            logger.debug("No countable words in input; returning empty result")
            return [], word_frequency

        buckets = bucket_rank(word_frequency, max_freq)
        return select_top_k(buckets, max_freq, k), word_frequency

    def get_most_frequent_words(self, text: str, k: Optional[int] = None) -> List[str]:
        """
        Return up to `k` words ordered by descending frequency.

        `k` defaults to the session's configured top_k. A non-positive `k`
        returns an empty list.

        Raises:
            InvalidInputError: if `text` is None or empty.
        """
        if k is None:
            k = self.config.top_k
        words, _ = self._rank(text, k)
        return words

    def most_frequent_with_counts(self, text: str, k: Optional[int] = None) -> List[FrequentWord]:
        """Same as get_most_frequent_words, paired with each word's count."""
        if k is None:
            k = self.config.top_k
        words, word_frequency = self._rank(text, k)
        return [FrequentWord(word=w, count=word_frequency[w]) for w in words]


# Process-wide default session backing the module-level helpers.
_default_searcher: Optional[FrequentWordSearcher] = None


def get_default_searcher() -> FrequentWordSearcher:
    global _default_searcher
    if _default_searcher is None:
        _default_searcher = FrequentWordSearcher.from_config()
    return _default_searcher


def reset_default_searcher() -> None:
    """Drop the default session; the next call rebuilds it from the environment."""
    global _default_searcher
    _default_searcher = None


def get_most_frequent_words(text: str, k: int) -> List[str]:
    """Top-k words of `text` using the default session."""
    return get_default_searcher().get_most_frequent_words(text, k)


def activate_stemmer(language: str) -> bool:
    return get_default_searcher().activate_stemmer(language)


def deactivate_stemmer() -> None:
    get_default_searcher().deactivate_stemmer()


def is_stemmer_active() -> bool:
    return get_default_searcher().is_stemmer_active()

"""
Single-pass word frequency extraction.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Dict, Iterable, Optional, Tuple

from topwords.stemming import StemmerConfig

logger = logging.getLogger(__name__)

FrequencyMap = Dict[str, int]


def extract_word_frequency(
    tokens: Optional[Iterable[Optional[str]]],
    stopwords: AbstractSet[str] = frozenset(),
    stemmer: Optional[StemmerConfig] = None,
) -> Tuple[FrequencyMap, int]:
    """
    Count words and track the highest count seen.

    Tokens that are None, empty, or stop words are skipped. Stop words are
    matched against the token before stemming. When `stemmer` is active each
    remaining token is replaced by its stem.

    The returned map preserves first-occurrence order of its keys, which is
    what later breaks ties between equally frequent words.

    Returns:
        (word -> count, max count). ({}, 0) when nothing survives filtering.
    """
    word_frequency: FrequencyMap = {}
    max_freq = 0

    if not tokens:
        logger.info("Could not tokenize the text")
        return word_frequency, max_freq

    stemming = stemmer is not None and stemmer.is_active

    for token in tokens:
        if not token:
            logger.debug("Ignoring empty token")
            continue
        if token in stopwords:
            logger.debug("Ignoring stop word %r", token)
            continue

        word = stemmer.stem(token) if stemming else token

        count = word_frequency.get(word, 0) + 1
        word_frequency[word] = count
        if count > max_freq:
            max_freq = count

    logger.info("The count of the most frequent word in the text is %d", max_freq)
    return word_frequency, max_freq

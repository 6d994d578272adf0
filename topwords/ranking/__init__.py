"""
Word-frequency ranking pipeline.

Provides:
- tokenization of raw text
- single-pass frequency counting with stop-word and stemming support
- frequency-indexed bucket sort
- top-K selection
"""

from .buckets import BucketArray, bucket_rank
from .config import SearchConfig
from .frequency import FrequencyMap, extract_word_frequency
from .searcher import (
    FrequentWord,
    FrequentWordSearcher,
    activate_stemmer,
    deactivate_stemmer,
    get_default_searcher,
    get_most_frequent_words,
    is_stemmer_active,
    reset_default_searcher,
)
from .selector import select_top_k
from .tokenizer import normalize, tokenize

__all__ = [
    "BucketArray",
    "FrequencyMap",
    "FrequentWord",
    "FrequentWordSearcher",
    "SearchConfig",
    "activate_stemmer",
    "bucket_rank",
    "deactivate_stemmer",
    "extract_word_frequency",
    "get_default_searcher",
    "get_most_frequent_words",
    "is_stemmer_active",
    "normalize",
    "reset_default_searcher",
    "select_top_k",
    "tokenize",
]

"""
topwords: find the most frequent words in a body of text.

Contains:
- ranking: tokenizer, frequency counting, bucket sort, top-K selection
- stemming: Snowball stemmers behind a per-session switch
- stopwords: loading of the comma-separated stop-word list
- api: FastAPI routes over the ranking pipeline
"""

from .errors import ContractViolation, InvalidInputError, TopWordsError
from .ranking import (
    FrequentWord,
    FrequentWordSearcher,
    SearchConfig,
    activate_stemmer,
    deactivate_stemmer,
    get_most_frequent_words,
    is_stemmer_active,
)

__all__ = [
    "ContractViolation",
    "FrequentWord",
    "FrequentWordSearcher",
    "InvalidInputError",
    "SearchConfig",
    "TopWordsError",
    "activate_stemmer",
    "deactivate_stemmer",
    "get_most_frequent_words",
    "is_stemmer_active",
]

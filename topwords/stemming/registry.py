"""
Static registry of stemming implementations keyed by language name.

Every NLTK Snowball language is available. Stemmers are built lazily by the
factory so that looking up a language never pays for the ones not used.
"""

from __future__ import annotations

from functools import partial
from typing import Callable, Dict, List, Optional, Protocol, runtime_checkable

from nltk.stem.snowball import SnowballStemmer


@runtime_checkable
class Stemmer(Protocol):
    """Anything that reduces a lowercase word to its root form."""

    def stem(self, word: str) -> str:
        ...


StemmerFactory = Callable[[], Stemmer]

SNOWBALL_LANGUAGES = (
    "arabic",
    "danish",
    "dutch",
    "english",
    "finnish",
    "french",
    "german",
    "hungarian",
    "italian",
    "norwegian",
    "porter",
    "portuguese",
    "romanian",
    "russian",
    "spanish",
    "swedish",
)

STEMMER_REGISTRY: Dict[str, StemmerFactory] = {
    lang: partial(SnowballStemmer, lang) for lang in SNOWBALL_LANGUAGES
}


def normalize_language(language: Optional[str]) -> str:
    """Registry keys are lowercase with no surrounding whitespace."""
    return (language or "").strip().lower()


def available_languages(registry: Optional[Dict[str, StemmerFactory]] = None) -> List[str]:
    """Sorted language names that can be activated."""
    return sorted(registry if registry is not None else STEMMER_REGISTRY)

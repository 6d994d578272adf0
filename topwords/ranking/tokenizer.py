"""
Text normalization and tokenization for frequency counting.
"""

from __future__ import annotations

import re
from typing import List

from topwords.errors import InvalidInputError

# Anything that is not an ASCII letter or a plain space is dropped, so
# "don't" becomes "dont" and tabs/newlines glue neighbouring words together.
NON_LETTER_RE = re.compile(r"[^a-zA-Z ]")


def validate_text(text: str | None) -> None:
    """Raise InvalidInputError unless `text` is a non-empty string."""
    if text is None or not isinstance(text, str) or not text:
        raise InvalidInputError("Valid text required to find the most frequent words")


def normalize(text: str) -> str:
    """Strip non-letters and lowercase."""
    return NON_LETTER_RE.sub("", text).lower()


def tokenize(text: str) -> List[str]:
    """
    Normalize `text` and split it on runs of whitespace.

    Text whose characters are all removed by normalization yields an empty
    list.
    """
    validate_text(text)
    return split_words(text)


def split_words(text: str) -> List[str]:
    """tokenize() for text the caller has already validated."""
    return normalize(text).split()

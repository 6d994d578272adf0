"""
Exceptions raised by the word-frequency pipeline.
"""

from __future__ import annotations


class TopWordsError(Exception):
    """Base class for topwords errors."""


class InvalidInputError(TopWordsError, ValueError):
    """Raised when the caller passes text that cannot be searched (None or empty)."""


class ContractViolation(TopWordsError, AssertionError):
    """
    Raised when an internal stage receives arguments its caller should never
    produce (e.g. an empty frequency map with a positive maximum).

    This signals a logic defect upstream, not bad user input, so library code
    never catches it.
    """

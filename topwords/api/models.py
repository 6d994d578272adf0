"""
Request and response models for the topwords API.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class FrequentWordsRequest(BaseModel):
    """Request body for POST /api/frequent-words."""

    text: str = Field(..., min_length=1, description="Text to analyze")
    k: int = Field(10, description="Number of words to return; non-positive returns none")
    stem_language: Optional[str] = Field(None, description="Snowball language to stem with")


class WordCount(BaseModel):
    """A word with its frequency."""

    word: str
    count: int


class FrequentWordsResponse(BaseModel):
    """Response for POST /api/frequent-words."""

    words: List[str] = Field(default_factory=list)
    counts: List[WordCount] = Field(default_factory=list)
    stemmed: bool = False


class HealthResponse(BaseModel):
    """Response for GET /api/health."""

    status: str = "ok"
    stopwords_loaded: int = 0


class LanguagesResponse(BaseModel):
    """Response for GET /api/languages."""

    languages: List[str] = Field(default_factory=list)

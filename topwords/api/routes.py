"""
API routes: frequent words, languages, health.
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, HTTPException, Request

from topwords.errors import InvalidInputError
from topwords.ranking import FrequentWordSearcher
from topwords.stemming import StemmerConfig, available_languages

from .models import (
    FrequentWordsRequest,
    FrequentWordsResponse,
    HealthResponse,
    LanguagesResponse,
    WordCount,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


def _get_stopwords(request: Request) -> frozenset:
    return getattr(request.app.state, "stopwords", frozenset())


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    """Health check."""
    return HealthResponse(status="ok", stopwords_loaded=len(_get_stopwords(request)))


@router.get("/languages", response_model=LanguagesResponse)
async def languages() -> LanguagesResponse:
    """Languages accepted by stem_language."""
    return LanguagesResponse(languages=available_languages())


@router.post("/frequent-words", response_model=FrequentWordsResponse)
async def frequent_words(request: Request, body: FrequentWordsRequest) -> FrequentWordsResponse:
    """Top-k words of the request text."""
    # Each request gets its own stemmer so concurrent requests never share
    # activation state.
    stemmer = StemmerConfig(body.stem_language)
    searcher = FrequentWordSearcher(stopwords=_get_stopwords(request), stemmer=stemmer)
    try:
        ranked = await asyncio.to_thread(searcher.most_frequent_with_counts, body.text, body.k)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return FrequentWordsResponse(
        words=[fw.word for fw in ranked],
        counts=[WordCount(word=fw.word, count=fw.count) for fw in ranked],
        stemmed=stemmer.is_active,
    )

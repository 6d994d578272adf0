"""
FastAPI application for the topwords API.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .deps import build_stopwords
from .routes import router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load stop words on startup."""
    app.state.stopwords = build_stopwords()
    yield


app = FastAPI(
    title="topwords API",
    description="Most frequent words in a body of text",
    version="0.1.0",
    lifespan=lifespan,
)
app.include_router(router)

"""
Tests for topwords FastAPI routes.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from topwords.api.main import app


@pytest.fixture
def client():
    # Entering the context runs the lifespan, which loads stop words.
    with TestClient(app) as c:
        yield c


def test_health(client):
    """GET /api/health reports loaded stop words."""
    r = client.get("/api/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["stopwords_loaded"] > 0


def test_languages(client):
    """GET /api/languages lists Snowball languages."""
    r = client.get("/api/languages")
    assert r.status_code == 200
    assert "english" in r.json()["languages"]


def test_frequent_words_requires_text(client):
    """POST /api/frequent-words without text returns 422."""
    assert client.post("/api/frequent-words", json={}).status_code == 422
    assert client.post("/api/frequent-words", json={"text": "", "k": 2}).status_code == 422


def test_frequent_words(client):
    """POST /api/frequent-words returns words and counts."""
    r = client.post(
        "/api/frequent-words",
        json={"text": "testing for evernote anish evernote", "k": 2},
    )
    assert r.status_code == 200
    data = r.json()
    assert data["words"] == ["evernote", "testing"]
    assert data["counts"] == [
        {"word": "evernote", "count": 2},
        {"word": "testing", "count": 1},
    ]
    assert data["stemmed"] is False


def test_frequent_words_with_stemming(client):
    """stem_language merges morphological variants."""
    r = client.post(
        "/api/frequent-words",
        json={"text": "products product products", "k": 5, "stem_language": "english"},
    )
    assert r.status_code == 200
    data = r.json()
    assert data["words"] == ["product"]
    assert data["counts"][0]["count"] == 3
    assert data["stemmed"] is True


def test_frequent_words_unknown_language_falls_back(client):
    r = client.post(
        "/api/frequent-words",
        json={"text": "products product", "k": 5, "stem_language": "breakit"},
    )
    assert r.status_code == 200
    data = r.json()
    assert data["stemmed"] is False
    assert data["words"] == ["products", "product"]


def test_frequent_words_zero_k(client):
    r = client.post("/api/frequent-words", json={"text": "cat cat", "k": 0})
    assert r.status_code == 200
    assert r.json()["words"] == []


def test_frequent_words_nothing_countable(client):
    r = client.post("/api/frequent-words", json={"text": "!!! 42", "k": 3})
    assert r.status_code == 200
    assert r.json() == {"words": [], "counts": [], "stemmed": False}


def test_frequent_words_runs_pipeline_off_event_loop(client, monkeypatch):
    """The ranking pipeline is handed to a worker thread."""
    from topwords.api import routes

    calls = []
    real_to_thread = routes.asyncio.to_thread

    async def _recording_to_thread(func, *args, **kwargs):
        calls.append((func.__name__, args))
        return await real_to_thread(func, *args, **kwargs)

    monkeypatch.setattr(routes.asyncio, "to_thread", _recording_to_thread)

    r = client.post("/api/frequent-words", json={"text": "cat cat dog", "k": 1})
    assert r.status_code == 200
    assert r.json()["words"] == ["cat"]
    assert calls == [("most_frequent_with_counts", ("cat cat dog", 1))]

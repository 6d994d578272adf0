"""
Tests for stop-word loading.
"""

from __future__ import annotations

from pathlib import Path

from topwords.stopwords import DEFAULT_STOPWORDS_PATH, load_stopwords, parse_stopwords


def test_bundled_list_loads():
    stopwords = load_stopwords()
    assert DEFAULT_STOPWORDS_PATH.exists()
    assert {"the", "for", "and"} <= stopwords
    assert all(w == w.lower() for w in stopwords)


def test_parse_multiple_lines_and_blanks():
    lines = ["the,for,a\n", "\n", "of, in ,,to\n"]
    assert parse_stopwords(lines) == frozenset({"the", "for", "a", "of", "in", "to"})


def test_load_custom_file(tmp_path: Path):
    path = tmp_path / "stop.txt"
    path.write_text("cat,dog\nbird\n", encoding="utf-8")
    assert load_stopwords(path) == frozenset({"cat", "dog", "bird"})


def test_missing_file_yields_empty_set(tmp_path: Path):
    assert load_stopwords(tmp_path / "nope.txt") == frozenset()


def test_parse_lowercases_entries():
    assert parse_stopwords(["The, FOR,and\n"]) == frozenset({"the", "for", "and"})


def test_mixed_case_file_entries_still_filter(tmp_path: Path):
    from topwords.ranking import FrequentWordSearcher

    path = tmp_path / "stop.txt"
    path.write_text("The,Cat\n", encoding="utf-8")
    searcher = FrequentWordSearcher(stopwords=load_stopwords(path))
    assert searcher.get_most_frequent_words("the cat sat the cat", 5) == ["sat"]

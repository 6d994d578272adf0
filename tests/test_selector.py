"""
Tests for top-K selection from buckets.
"""

from __future__ import annotations

import pytest

from topwords.errors import ContractViolation
from topwords.ranking import select_top_k


def test_select_highest_bucket_first():
    buckets = [["evernote", "best"], ["anish"]]
    assert select_top_k(buckets, 2, 1) == ["anish"]


def test_select_spans_buckets_in_descending_order():
    buckets = [["evernote", "best"], ["anish"]]
    assert select_top_k(buckets, 2, 3) == ["anish", "evernote", "best"]


def test_select_keeps_bucket_order_for_ties():
    buckets = [["x"], [], ["c", "a", "b"]]
    assert select_top_k(buckets, 3, 2) == ["c", "a"]


def test_select_returns_fewer_when_vocabulary_small():
    buckets = [["one"], [], ["three"]]
    assert select_top_k(buckets, 3, 10) == ["three", "one"]


def test_select_skips_null_slots_and_words():
    buckets = [["low"], None, [None, "", "high"]]
    assert select_top_k(buckets, 3, 2) == ["high", "low"]


@pytest.mark.parametrize(
    "buckets, max_freq, k",
    [
        ([["a"]], 1, 0),
        ([["a"]], 1, -3),
        ([], 1, 1),
        ([["a"]], 0, 1),
    ],
)
def test_select_contract_violations(buckets, max_freq, k):
    with pytest.raises(ContractViolation):
        select_top_k(buckets, max_freq, k)

"""
Top-K extraction from frequency buckets.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from topwords.errors import ContractViolation

logger = logging.getLogger(__name__)


def select_top_k(
    buckets: Sequence[Optional[Sequence[Optional[str]]]],
    max_freq: int,
    k: int,
) -> List[str]:
    """
    Walk buckets from the highest count down and collect up to `k` words.

    Words sharing a count keep their order within the bucket. Fewer than `k`
    words come back when the vocabulary is smaller than `k`.

    Raises:
        ContractViolation: if `k < 1`, `max_freq < 1` or `buckets` is empty.
    """
    if k < 1:
        raise ContractViolation(f"select_top_k needs k >= 1, got {k}")
    if not buckets:
        raise ContractViolation("select_top_k needs at least one bucket")
    if max_freq < 1:
        raise ContractViolation(f"select_top_k needs max_freq >= 1, got {max_freq}")

    top: List[str] = []
    for idx in range(min(max_freq, len(buckets)) - 1, -1, -1):
        bucket = buckets[idx]
        if not bucket:
            continue
        for word in bucket:
            if not word:
                logger.info("Ignoring null word while selecting most frequent words")
                continue
            top.append(word)
            if len(top) == k:
                return top
    return top

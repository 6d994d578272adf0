"""
Frequency-indexed bucket sort.

Instead of comparing counts, each word is dropped straight into the slot for
its count. Building the buckets is O(distinct words + max count) and the
slots are already in frequency order, so no comparison sort is needed.
"""

from __future__ import annotations

import logging
from typing import List, Mapping

from topwords.errors import ContractViolation

logger = logging.getLogger(__name__)

BucketArray = List[List[str]]


def bucket_rank(freq_map: Mapping[str, int], max_freq: int) -> BucketArray:
    """
    Group words by count.

    Args:
        freq_map: word -> count, non-empty, every count in 1..max_freq.
        max_freq: highest count in `freq_map`, at least 1.

    Returns:
        A list of `max_freq` buckets where bucket i holds the words seen
        i + 1 times, in `freq_map` iteration order. Counts nobody has get an
        empty list.

    Raises:
        ContractViolation: if the preconditions above do not hold.
    """
    if not freq_map:
        raise ContractViolation("bucket_rank needs a non-empty frequency map")
    if max_freq < 1:
        raise ContractViolation(f"bucket_rank needs max_freq >= 1, got {max_freq}")

    logger.info("Sorting %d words into %d frequency buckets", len(freq_map), max_freq)

    buckets: BucketArray = [[] for _ in range(max_freq)]
    for word, count in freq_map.items():
        if count < 1 or count > max_freq:
            raise ContractViolation(
                f"count {count} for {word!r} is outside 1..{max_freq}"
            )
        buckets[count - 1].append(word)
    return buckets

"""
buckets.py

Partition a dictionary by the pattern code each word produces against a
fixed target. Words keep their dictionary order inside a bucket.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

import numpy as np

from wordchain.feedback import NUM_CODES, score


def pattern_codes(words: Sequence[str], target: str) -> np.ndarray:
    """Score every word against `target`; returns an int16 array aligned with `words`."""
    return np.fromiter((score(w, target) for w in words), dtype=np.int16, count=len(words))


def build_buckets(words: Sequence[str], target: str) -> Dict[int, List[str]]:
    """
    Map pattern code -> words producing it against `target`.

    Only non-empty buckets appear in the result.
    """
    codes = pattern_codes(words, target)
    buckets: Dict[int, List[str]] = {}
    for code in np.unique(codes):
        # flatnonzero returns ascending indices, so dictionary order is kept
        buckets[int(code)] = [words[i] for i in np.flatnonzero(codes == code)]
    return buckets


def pattern_histogram(words: Sequence[str], target: str) -> np.ndarray:
    """Bucket sizes for every code 0..242 as a length-243 array."""
    return np.bincount(pattern_codes(words, target), minlength=NUM_CODES)

"""
candidates.py

Per-row candidate lists for a fixed target.

Each row resolves under the first policy that applies:
  literal guess  -> that word alone, if it scores to the row's code and is
                    a known word (fallback words only on fallback rows)
  wildcard guess -> bucket words matching the template's fixed letters
  no guess       -> the whole bucket
Fallback rows additionally see the fallback dictionary's bucket, appended
after the common words.
"""

from __future__ import annotations

from typing import AbstractSet, Dict, List, Optional, Sequence

from wordchain.feedback import score
from wordchain.lexicon import Lexicon
from wordchain.rows import RowSpec, matches_wildcard

Buckets = Dict[int, List[str]]


def resolve_row(
    row: RowSpec,
    target: str,
    lexicon: Lexicon,
    buckets: Buckets,
    fallback_buckets: Optional[Buckets] = None,
) -> List[str]:
    """Candidates for one row. Passing `fallback_buckets` marks the row as fallback-allowed."""
    allow_fallback = fallback_buckets is not None

    if row.is_literal:
        g = row.guess
        known = lexicon.is_common(g) or (allow_fallback and lexicon.is_fallback(g))
        if known and score(g, target) == row.pattern_code:
            return [g]
        return []

    cands = list(buckets.get(row.pattern_code, ()))
    if allow_fallback:
        cands.extend(fallback_buckets.get(row.pattern_code, ()))
    if row.is_wildcard:
        cands = [w for w in cands if matches_wildcard(w, row.guess)]
    return cands


def resolve_rows(
    rows: Sequence[RowSpec],
    target: str,
    lexicon: Lexicon,
    buckets: Buckets,
    fallback_buckets: Optional[Buckets] = None,
    fallback_rows: Optional[AbstractSet[int]] = None,
) -> List[List[str]]:
    """
    Candidates for every row. Fallback words are offered only to the row
    indices in `fallback_rows`, and only when `fallback_buckets` is given.
    """
    out: List[List[str]] = []
    for idx, row in enumerate(rows):
        extra = fallback_buckets if fallback_rows and idx in fallback_rows else None
        out.append(resolve_row(row, target, lexicon, buckets, extra))
    return out


def empty_rows(row_candidates: Sequence[Sequence[str]]) -> List[int]:
    return [i for i, cands in enumerate(row_candidates) if not cands]

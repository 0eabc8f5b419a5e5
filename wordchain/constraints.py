"""
constraints.py

Carry-forward ("progress mode") constraints between rows of a chain, and
filtering of candidate words by scored history.

Progress modes:
- none:   rows are independent
- hard:   a row must respect the greens/yellows of the row right above it
- strict: a row must respect the greens/yellows of every row above it
"""

from __future__ import annotations

from collections import Counter
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, NamedTuple, Sequence, Tuple

from wordchain.feedback import int_to_pattern, score

NONE = "none"
HARD = "hard"
STRICT = "strict"
PROGRESS_MODES = (NONE, HARD, STRICT)


def normalize_mode(mode: str) -> str:
    if not isinstance(mode, str) or mode.lower() not in PROGRESS_MODES:
        raise ValueError(f"progress mode must be one of {', '.join(PROGRESS_MODES)}, got {mode!r}")
    return mode.lower()


class Constraints(NamedTuple):
    fixed: Mapping[int, str]                    # position -> letter (greens)
    forbidden: Mapping[str, FrozenSet[int]]     # letter -> positions it may not take (yellows)
    required: Mapping[str, int]                 # letter -> minimum occurrences

    @property
    def empty(self) -> bool:
        return not (self.fixed or self.forbidden or self.required)


NO_CONSTRAINTS = Constraints(MappingProxyType({}), MappingProxyType({}), MappingProxyType({}))


def derive_constraints(placed: Sequence[Tuple[str, int]], mode: str) -> Constraints:
    """
    Build constraints from rows committed above the row being filled.

    `placed` holds `(guess, code)` pairs for the rows with a smaller row
    index, in row order. Hard mode only reads the last of them. Per row,
    a green fixes its letter in place and a yellow bars its letter from
    that position; both count toward that row's letter tally. Required
    counts take the max over rows, not the sum.
    """
    if mode == NONE or not placed:
        return NO_CONSTRAINTS

    contributing = placed[-1:] if mode == HARD else placed

    fixed = {}
    forbidden = {}
    required = {}
    for guess, code in contributing:
        row_counts: Counter = Counter()
        for i, (ch, t) in enumerate(zip(guess, int_to_pattern(code))):
            if t == 2:
                fixed[i] = ch
                row_counts[ch] += 1
            elif t == 1:
                forbidden.setdefault(ch, set()).add(i)
                row_counts[ch] += 1
        for ch, k in row_counts.items():
            if k > required.get(ch, 0):
                required[ch] = k

    return Constraints(
        MappingProxyType(fixed),
        MappingProxyType({ch: frozenset(pos) for ch, pos in forbidden.items()}),
        MappingProxyType(required),
    )


def satisfies(word: str, constraints: Constraints) -> bool:
    """True iff `word` honors every fixed letter, forbidden position and required count."""
    for i, ch in constraints.fixed.items():
        if word[i] != ch:
            return False
    for ch, positions in constraints.forbidden.items():
        for i in positions:
            if word[i] == ch:
                return False
    if constraints.required:
        freq = Counter(word)
        for ch, k in constraints.required.items():
            if freq[ch] < k:
                return False
    return True


def possible_answers(answers: Sequence[str], scored: Sequence[Tuple[str, int]]) -> List[str]:
    """Answers under which every scored `(guess, code)` row would come out as stated."""
    return [a for a in answers if all(score(g, a) == code for g, code in scored)]

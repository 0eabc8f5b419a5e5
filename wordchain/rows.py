"""
rows.py

Row requests: the pattern a row must reproduce, plus optional guess text
that is either a literal word ("slugs") or a wildcard template ("s**gs",
where `*` marks a free position).
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from wordchain.feedback import WORD_LEN, check_code, pattern_to_int

WILDCARD = "*"


class RowSpec:
    __slots__ = ("pattern_code", "guess")

    def __init__(self, pattern_code: int, guess: Optional[str] = None) -> None:
        self.pattern_code = check_code(pattern_code)
        if guess is not None:
            if not isinstance(guess, str):
                raise TypeError("guess must be a string or None")
            guess = guess.strip().lower()
            if len(guess) != WORD_LEN:
                raise ValueError(f"guess must be {WORD_LEN} characters, got {guess!r}")
            if any(not (ch == WILDCARD or (ch.isascii() and ch.isalpha())) for ch in guess):
                raise ValueError(f"guess may only contain letters and '{WILDCARD}', got {guess!r}")
        self.guess = guess

    @property
    def is_literal(self) -> bool:
        return self.guess is not None and WILDCARD not in self.guess

    @property
    def is_wildcard(self) -> bool:
        return self.guess is not None and WILDCARD in self.guess

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RowSpec):
            return NotImplemented
        return (self.pattern_code, self.guess) == (other.pattern_code, other.guess)

    def __hash__(self) -> int:
        return hash((self.pattern_code, self.guess))

    def __repr__(self) -> str:
        return f"RowSpec({self.pattern_code}, {self.guess!r})"


def matches_wildcard(word: str, template: str) -> bool:
    """True iff every non-`*` position of `template` equals `word` at that position."""
    if len(word) != len(template):
        return False
    for w, t in zip(word, template):
        if t != WILDCARD and w != t:
            return False
    return True


def rows_from_grid(grid: Sequence[Sequence[Tuple[str, int]]]) -> List[RowSpec]:
    """
    Convert an editing grid into row requests.

    `grid` is a list of rows, each a list of 5 `(letter, color)` tiles where
    `letter` is '' for an empty tile. Rows after the last one holding any
    non-gray tile are dropped; earlier all-gray rows are kept since they
    still mean "no letter matches". A row with no letters is unconstrained;
    otherwise its letters become guess text with `*` in the empty tiles.
    """
    last_active = -1
    for idx, row in enumerate(grid):
        if any(color != 0 for _, color in row):
            last_active = idx

    rows: List[RowSpec] = []
    for row in grid[: last_active + 1]:
        code = pattern_to_int([color for _, color in row])
        if any(letter for letter, _ in row):
            text = "".join(letter or WILDCARD for letter, _ in row)
            rows.append(RowSpec(code, text))
        else:
            rows.append(RowSpec(code))
    return rows

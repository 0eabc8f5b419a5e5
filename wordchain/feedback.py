"""
Feedback utilities: scoring a guess against a target and the base-3
pattern codes used to name each scored row.

A pattern is a list of 5 trits, one per tile:
  0 = gray (absent), 1 = yellow (present elsewhere), 2 = green (correct).
The pattern code packs those trits least-significant first, so tile 0 is
the units digit and tile 4 the 81s digit. Codes live in [0, 242].
"""

from __future__ import annotations

import re
from collections import Counter
from typing import List, Sequence

WORD_LEN = 5
NUM_CODES = 3 ** WORD_LEN
ALL_GREEN = NUM_CODES - 1

_COLOR_TRITS = {"g": 2, "y": 1, "b": 0, "2": 2, "1": 1, "0": 0}
_TRIT_COLORS = "byg"


def check_word(word: str, name: str = "word") -> str:
    """Validate a 5-letter alphabetic word and return it lower-cased."""
    if not isinstance(word, str):
        raise TypeError(f"{name} must be a string")
    if len(word) != WORD_LEN or not word.isascii() or not word.isalpha():
        raise ValueError(f"{name} must be a {WORD_LEN}-letter alphabetic string, got {word!r}")
    return word.lower()


def check_code(code: int) -> int:
    """Validate a pattern code and return it as an int."""
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError("pattern code must be an integer")
    if code < 0 or code >= NUM_CODES:
        raise ValueError(f"pattern code must be in [0, {NUM_CODES - 1}], got {code}")
    return code


def score_pattern(guess: str, target: str) -> List[int]:
    """
    Compute the 5-position feedback for `guess` against `target`.

    Greens are marked first and consume the target's letter budget; the
    remaining budget is then handed out as yellows strictly left to right.
    Anything left over stays gray, so a letter guessed twice but present
    once in the target gets at most one colored tile.

    Both words are expected lowercase and 5 letters long; callers on the
    public surface go through `check_word` first.
    """
    pattern: List[int] = [0] * WORD_LEN
    remaining = Counter(target)

    # Pass 1: greens
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            pattern[i] = 2
            remaining[g] -= 1

    # Pass 2: yellows where counts allow (else gray)
    for i, g in enumerate(guess):
        if pattern[i] == 0 and remaining[g] > 0:
            pattern[i] = 1
            remaining[g] -= 1

    return pattern


def score(guess: str, target: str) -> int:
    """Pattern code produced by scoring `guess` against `target`."""
    return pattern_to_int(score_pattern(guess, target))


def pattern_to_int(pattern: Sequence[int]) -> int:
    """Encode 5 trits into a code in [0, 242], least-significant trit first."""
    value = 0
    mul = 1
    for p in pattern:
        value += p * mul
        mul *= 3
    return value


def int_to_pattern(code: int) -> List[int]:
    """Inverse of `pattern_to_int`."""
    trits: List[int] = []
    for _ in range(WORD_LEN):
        trits.append(code % 3)
        code //= 3
    return trits


def consistent_with(word: str, guess: str, code: int) -> bool:
    """True iff `word`, taken as the target, would score `guess` as `code`."""
    word = check_word(word)
    guess = check_word(guess, "guess")
    return score(guess, word) == check_code(code)


def parse_feedback(s: str) -> List[int]:
    """Parse a 5-char feedback into a list of ints [0/1/2].
    Accepted forms:
      - letters: g/y/b  (green/yellow/black)
      - digits:  2/1/0
      - list:   [0, 1, 2, 2, 0]
    Raises ValueError on invalid input.
    """
    s = s.strip().lower()
    if s.startswith("[") and s.endswith("]"):
        nums = re.findall(r"[012]", s)
        if len(nums) != WORD_LEN:
            raise ValueError("list form must contain exactly five 0/1/2 values")
        return [int(x) for x in nums]

    if len(s) != WORD_LEN:
        raise ValueError("feedback must be length 5 (gybgy / 21001 / [0,1,2,2,0])")
    try:
        return [_COLOR_TRITS[ch] for ch in s]
    except KeyError as e:
        raise ValueError("feedback must use only g/y/b or 2/1/0") from e


def parse_pattern_code(s: str) -> int:
    """Parse feedback text, or a raw code written as `#<n>`, into a pattern code."""
    s = s.strip()
    if s.startswith("#"):
        try:
            code = int(s[1:])
        except ValueError as e:
            raise ValueError(f"invalid pattern code: {s!r}") from e
        return check_code(code)
    return pattern_to_int(parse_feedback(s))


def pattern_to_text(pattern: Sequence[int]) -> str:
    """Render trits as g/y/b letters, e.g. [2, 1, 0, 0, 0] -> 'gybbb'."""
    return "".join(_TRIT_COLORS[p] for p in pattern)

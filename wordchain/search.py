"""
search.py

Enumerate every chain of guesses that reproduces a list of row patterns
against a known answer.

`WordleReverser` owns the dictionaries; `enumerate_chains` returns a
`ChainSearch`, a pull-based iterator that runs a depth-first backtracking
search over an explicit stack of frames. Each `next()` resumes from the
frame where the previous one stopped and returns at most one chain, so a
caller that stops pulling simply leaves the rest of the tree unexplored.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, NamedTuple, Optional, Tuple, Union

from wordchain.buckets import build_buckets
from wordchain.candidates import Buckets, empty_rows, resolve_rows
from wordchain.constraints import (
    NONE,
    NO_CONSTRAINTS,
    Constraints,
    derive_constraints,
    possible_answers,
    normalize_mode,
    satisfies,
)
from wordchain.feedback import check_word, score
from wordchain.lexicon import Lexicon
from wordchain.rows import RowSpec

logger = logging.getLogger(__name__)

RowLike = Union[RowSpec, int, Tuple[int, Optional[str]]]


class Chain(NamedTuple):
    answer: str
    guesses: Tuple[str, ...]


def as_row(row: RowLike) -> RowSpec:
    """Accept a RowSpec, a bare pattern code, or a `(code, guess)` pair."""
    if isinstance(row, RowSpec):
        return row
    if isinstance(row, tuple):
        return RowSpec(*row)
    return RowSpec(row)


class ChainSearch:
    """
    Lazy chain enumeration for one request.

    Configurations are tried in order: ordinary words only, then (if some
    row had no ordinary candidate, fallback is enabled and no chain has been
    found) fallback words on exactly the rows that came up empty.

    Search state per depth d (row `order[d]`):
      _cursors[d]      next candidate index to try
      _constraints[d]  constraints from committed rows with a smaller row index
      _committed[d]    word currently placed at this depth, or None
    """

    def __init__(
        self,
        lexicon: Lexicon,
        rows: Iterable[RowLike],
        answer: str,
        *,
        progress_mode: str = NONE,
        no_repeat: bool = True,
        use_fallback: bool = True,
        max_solutions: Optional[int] = None,
    ) -> None:
        if max_solutions is not None:
            if isinstance(max_solutions, bool) or not isinstance(max_solutions, int):
                raise TypeError("max_solutions must be an integer or None")
            if max_solutions <= 0:
                raise ValueError("max_solutions must be positive")

        self.lexicon = lexicon
        self.rows = [as_row(r) for r in rows]
        self.answer = check_word(answer, "answer")
        self.progress_mode = normalize_mode(progress_mode)
        self.no_repeat = bool(no_repeat)
        self.use_fallback = bool(use_fallback)
        self.max_solutions = max_solutions

        self.emitted = 0
        self.steps = 0  # candidate evaluations so far

        self._started = False
        self._done = False
        self._buckets: Optional[Buckets] = None
        self._fallback_buckets: Optional[Buckets] = None
        self._pending_fallback_rows: Optional[set] = None

        self._row_cands: List[List[str]] = []
        self._order: List[int] = []
        self._placed: List[Optional[str]] = []
        self._used: set = set()
        self._cursors: List[int] = []
        self._constraints: List[Constraints] = []
        self._committed: List[Optional[str]] = []
        self._trivial = False

    # -------------------------
    # Iterator protocol
    # -------------------------
    def __iter__(self) -> "ChainSearch":
        return self

    def __next__(self) -> Chain:
        if self._done:
            raise StopIteration
        if self.max_solutions is not None and self.emitted >= self.max_solutions:
            logger.debug("result cap %d reached", self.max_solutions)
            return self._finish()
        if not self._started:
            self._started = True
            if not self._start():
                return self._finish()

        while True:
            chain = self._advance()
            if chain is not None:
                self.emitted += 1
                return chain
            if not self._next_configuration():
                return self._finish()

    @property
    def exhausted(self) -> bool:
        return self._done

    def _finish(self):
        self._done = True
        self._cursors.clear()
        raise StopIteration

    # -------------------------
    # Setup
    # -------------------------
    def _start(self) -> bool:
        for r in self.rows:
            if r.is_literal and score(r.guess, self.answer) != r.pattern_code:
                logger.debug("row guess %r cannot score %d against %r", r.guess, r.pattern_code, self.answer)
                return False

        self._buckets = build_buckets(self.lexicon.common.words(), self.answer)
        if self.lexicon.has_fallback:
            self._fallback_buckets = build_buckets(self.lexicon.fallback.words(), self.answer)
        logger.debug("built %d common buckets for %r", len(self._buckets), self.answer)

        first = resolve_rows(self.rows, self.answer, self.lexicon, self._buckets)
        empty = empty_rows(first)
        if empty and self.use_fallback and self._fallback_buckets is not None:
            self._pending_fallback_rows = set(empty)
        if empty:
            logger.debug("rows %s have no ordinary candidates", empty)
            return self._next_configuration()
        self._load(first)
        return True

    def _next_configuration(self) -> bool:
        """Switch to the fallback configuration if it is still eligible."""
        fallback_rows = self._pending_fallback_rows
        self._pending_fallback_rows = None
        if fallback_rows is None or self.emitted > 0:
            return False

        cands = resolve_rows(
            self.rows, self.answer, self.lexicon,
            self._buckets, self._fallback_buckets, fallback_rows,
        )
        if empty_rows(cands):
            logger.debug("rows %s still empty with fallback words", empty_rows(cands))
            return False
        logger.debug("retrying with fallback words on rows %s", sorted(fallback_rows))
        self._load(cands)
        return True

    def _load(self, row_cands: List[List[str]]) -> None:
        n = len(self.rows)
        self._row_cands = row_cands
        if self.progress_mode == NONE:
            # most constrained rows first; sorted() is stable on ties
            self._order = sorted(range(n), key=lambda i: len(row_cands[i]))
        else:
            # constraints read "rows above", which must already be placed
            self._order = list(range(n))
        self._placed = [None] * n
        self._used = set()
        self._cursors = []
        self._constraints = []
        self._committed = []
        # with no rows the empty chain is the single solution
        self._trivial = n == 0
        if n:
            self._push(0)

    # -------------------------
    # Backtracking
    # -------------------------
    def _push(self, depth: int) -> None:
        self._cursors.append(0)
        self._committed.append(None)
        if self.progress_mode == NONE:
            self._constraints.append(NO_CONSTRAINTS)
            return
        i = self._order[depth]
        above = [(self._placed[j], self.rows[j].pattern_code) for j in range(i) if self._placed[j] is not None]
        self._constraints.append(derive_constraints(above, self.progress_mode))

    def _pop(self) -> None:
        self._cursors.pop()
        self._constraints.pop()
        self._committed.pop()

    def _undo(self, depth: int) -> None:
        w = self._committed[depth]
        if w is None:
            return
        self._placed[self._order[depth]] = None
        if self.no_repeat:
            self._used.discard(w)
        self._committed[depth] = None

    def _advance(self) -> Optional[Chain]:
        """Run the search until the next complete chain; None when this configuration is exhausted."""
        n = len(self._order)
        if self._trivial:
            self._trivial = False
            return Chain(self.answer, ())
        while self._cursors:
            d = len(self._cursors) - 1
            self._undo(d)
            i = self._order[d]
            cands = self._row_cands[i]
            constraints = self._constraints[d]

            cur = self._cursors[d]
            chosen = None
            while cur < len(cands):
                w = cands[cur]
                cur += 1
                self.steps += 1
                if self.no_repeat and w in self._used:
                    continue
                if not constraints.empty and not satisfies(w, constraints):
                    continue
                chosen = w
                break
            self._cursors[d] = cur

            if chosen is None:
                self._pop()
                continue

            self._placed[i] = chosen
            self._committed[d] = chosen
            if self.no_repeat:
                self._used.add(chosen)

            if d + 1 == n:
                # left committed; the next pull undoes it before moving on
                return Chain(self.answer, tuple(self._placed))
            self._push(d + 1)
        return None


class WordleReverser:
    """
    Reverse a grid of colored rows into the guess chains that produce it.

    Dictionaries are cleaned once at construction (5-letter alphabetic,
    lower-cased, deduplicated; fallback words already in the guess list are
    dropped) and never modified afterwards.
    """

    def __init__(
        self,
        guess_words: Iterable[object] = (),
        answer_words: Iterable[object] = (),
        weird_words: Iterable[object] = (),
        *,
        lexicon: Optional[Lexicon] = None,
    ) -> None:
        """Build the dictionaries from raw word lists, or reuse an already loaded `lexicon`."""
        if lexicon is None:
            lexicon = Lexicon(guess_words, answer_words, weird_words)
        elif not isinstance(lexicon, Lexicon):
            raise TypeError("lexicon must be a Lexicon")
        self.lexicon = lexicon

    def enumerate_chains(
        self,
        rows: Iterable[RowLike],
        answer: str,
        progress_mode: str = NONE,
        no_repeat: bool = True,
        use_fallback: bool = True,
        max_solutions: Optional[int] = None,
    ) -> ChainSearch:
        """
        Lazily enumerate chains for `rows` against `answer`.

        Malformed arguments raise immediately (ValueError/TypeError); an
        answer that contradicts a literal row just yields nothing.
        """
        return ChainSearch(
            self.lexicon,
            rows,
            answer,
            progress_mode=progress_mode,
            no_repeat=no_repeat,
            use_fallback=use_fallback,
            max_solutions=max_solutions,
        )

    def filter_answers(self, rows: Iterable[RowLike]) -> List[str]:
        """Answer words consistent with every row that states a full guess."""
        known = [(r.guess, r.pattern_code) for r in map(as_row, rows) if r.is_literal]
        answers = self.lexicon.answers.words()
        if not known:
            return answers
        return possible_answers(answers, known)

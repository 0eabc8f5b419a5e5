"""
lexicon.py

The three dictionaries the reverser works with:
- answers:  words that may be the hidden target
- common:   ordinary accepted guesses; every chain word normally comes from here
- fallback: rarer ("weird") accepted guesses, only used to rescue rows that
            have no ordinary candidate. Never overlaps `common`.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from wordchain.vocab import WordVocab

logger = logging.getLogger(__name__)


class Lexicon:
    def __init__(
        self,
        guess_words: Iterable[object],
        answer_words: Iterable[object],
        weird_words: Iterable[object] = (),
    ) -> None:
        self.common = WordVocab.from_raw(guess_words, allow_empty=True)
        self.answers = WordVocab.from_raw(answer_words, allow_empty=True)
        # fallback words already in the common list are dropped
        self.fallback = WordVocab.from_raw(weird_words, allow_empty=True).without(self.common)
        logger.debug(
            "lexicon loaded: %d common, %d answers, %d fallback",
            len(self.common), len(self.answers), len(self.fallback),
        )

    @classmethod
    def from_vocabs(
        cls,
        common: WordVocab,
        answers: WordVocab,
        fallback: Optional[WordVocab] = None,
    ) -> "Lexicon":
        return cls(common.words(), answers.words(), fallback.words() if fallback is not None else ())

    def is_common(self, word: str) -> bool:
        return word in self.common

    def is_fallback(self, word: str) -> bool:
        return word in self.fallback

    @property
    def has_fallback(self) -> bool:
        return len(self.fallback) > 0


def load_lexicon(
    guesses_path: str,
    answers_path: Optional[str] = None,
    weird_path: Optional[str] = None,
) -> Lexicon:
    """
    Load the dictionaries from disk (`.csv` files use the `word` column,
    anything else is read one word per line).

    When `answers_path` is omitted the guess list doubles as the answer list.
    """
    common = WordVocab.from_path(guesses_path)
    answers = WordVocab.from_path(answers_path) if answers_path else common
    fallback = WordVocab.from_path(weird_path, allow_empty=True) if weird_path else None
    return Lexicon.from_vocabs(common, answers, fallback)

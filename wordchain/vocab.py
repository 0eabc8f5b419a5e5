from __future__ import annotations
from typing import Iterable, List
import pandas as pd


def clean_words(raw: Iterable[object], *, word_len: int = 5) -> List[str]:
    """
    Lowercase, validate and deduplicate raw word-list entries.

    Entries of the wrong length (surrounding whitespace included) or with
    non-alphabetic characters are dropped silently; the first occurrence
    of a duplicate wins.
    """
    clean: List[str] = []
    seen = set()
    for val in raw:
        if not isinstance(val, str):
            continue
        w = val.lower()
        if len(w) != word_len or not w.isascii() or not w.isalpha():
            continue
        if w in seen:
            continue
        seen.add(w)
        clean.append(w)
    return clean


class WordVocab:
    def __init__(self, words: List[str], *, allow_empty: bool = False) -> None:
        if not isinstance(words, list):
            raise TypeError("`words` must be a list of strings")
        if not words and not allow_empty:
            raise ValueError("no words provided")
        if not all(isinstance(w, str) for w in words):
            raise TypeError("all items in `words` must be str")

        # Enforce uniqueness (first occurrence policy should be handled by the loaders)
        if len(set(words)) != len(words):
            raise ValueError("duplicate words detected; input to WordVocab must be deduplicated")

        self._words: List[str] = list(words)  # make a defensive copy
        self._index = {w: i for i, w in enumerate(self._words)}

    # ---------- Construction helpers ----------

    @classmethod
    def from_raw(cls, raw: Iterable[object], *, allow_empty: bool = False) -> "WordVocab":
        """Build a vocab from an unfiltered word list (see `clean_words`)."""
        return cls(clean_words(raw), allow_empty=allow_empty)

    @classmethod
    def from_csv(
        cls,
        path: str,
        column: str = "word",
        *,
        allow_empty: bool = False,
    ) -> "WordVocab":
        """
        Load words from a CSV and build a WordVocab.

        Parameters
        ----------
        path : str
            Path to CSV file.
        column : str
            Column name containing words.
        allow_empty : bool, default=False
            If False, raise when nothing survives filtering.

        Raises
        ------
        FileNotFoundError, KeyError, ValueError
        """
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        if column not in df.columns:
            raise KeyError(f"column '{column}' not found in {path}")
        return cls.from_raw(df[column].tolist(), allow_empty=allow_empty)

    @classmethod
    def from_text(cls, path: str, *, allow_empty: bool = False) -> "WordVocab":
        """Load a one-word-per-line file."""
        df = pd.read_csv(
            path,
            header=None,
            names=["word"],
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
        return cls.from_raw(df["word"].tolist(), allow_empty=allow_empty)

    @classmethod
    def from_path(cls, path: str, *, allow_empty: bool = False) -> "WordVocab":
        """Dispatch on extension: `.csv` uses the `word` column, anything else is plain text."""
        if path.lower().endswith(".csv"):
            return cls.from_csv(path, allow_empty=allow_empty)
        return cls.from_text(path, allow_empty=allow_empty)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        """Number of words in the vocabulary."""
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def words(self) -> List[str]:
        """Return a copy of the internal word list (to avoid external mutation)."""
        return list(self._words)

    def without(self, other: "WordVocab") -> "WordVocab":
        """Words of this vocab that are absent from `other`, order preserved."""
        return WordVocab([w for w in self._words if w not in other], allow_empty=True)

from __future__ import annotations
from typing import Iterable, List, Optional
import pandas as pd


class WordVocab:
    def __init__(self, words: List[str]) -> None:
        if not isinstance(words, list):
            raise TypeError("`words` must be a list of strings")
        if not words:
            raise ValueError("no words provided")
        if not all(isinstance(w, str) for w in words):
            raise TypeError("all items in `words` must be str")

        # Duplicates are dropped by the loaders; a hand-built list must be unique already
        if len(set(words)) != len(words):
            raise ValueError("duplicate words detected; input to WordVocab must be deduplicated")

        self._words: List[str] = list(words)

    # ---------- Construction helpers ----------

    @classmethod
    def from_csv(
        cls,
        path: str,
        column: str = "word",
        *,
        word_len: Optional[int] = None,
        uppercase: bool = True,
        dedupe: bool = True,
        alpha_only: bool = True,
    ) -> "WordVocab":
        """
        Load words from a CSV and build a WordVocab.

        Parameters
        ----------
        path : str
            Path to CSV file.
        column : str
            Column name containing words.
        word_len : int | None
            Keep only words of this length. None keeps every length and leaves
            the uniform-length check to the solver.
        uppercase : bool, default=True
            If True, uppercase words before validation.
        dedupe : bool, default=True
            If True, keep the first occurrence and drop later duplicates.
        alpha_only : bool, default=True
            If True, keep only alphabetic words (str.isalpha()).

        Raises
        ------
        FileNotFoundError, KeyError, ValueError, TypeError
        """
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        if column not in df.columns:
            raise KeyError(f"column '{column}' not found in {path}")
        return cls._clean(
            df[column].tolist(),
            word_len=word_len,
            uppercase=uppercase,
            dedupe=dedupe,
            alpha_only=alpha_only,
        )

    @classmethod
    def from_txt(
        cls,
        path: str,
        *,
        word_len: Optional[int] = None,
        uppercase: bool = True,
        dedupe: bool = True,
        alpha_only: bool = True,
    ) -> "WordVocab":
        """Load a plain word list, one word per line; blank lines are skipped."""
        with open(path, "r", encoding="utf-8") as f:
            lines = [line.strip() for line in f if line.strip()]
        return cls._clean(
            lines,
            word_len=word_len,
            uppercase=uppercase,
            dedupe=dedupe,
            alpha_only=alpha_only,
        )

    @classmethod
    def _clean(
        cls,
        raw_iter: Iterable[object],
        *,
        word_len: Optional[int],
        uppercase: bool,
        dedupe: bool,
        alpha_only: bool,
    ) -> "WordVocab":
        clean: List[str] = []
        seen = set()

        for val in raw_iter:
            if not isinstance(val, str):
                val = str(val) if val is not None else ""
            w = val.strip()
            w = w.upper() if uppercase else w

            if not w:
                continue
            if word_len is not None and len(w) != word_len:
                continue
            if alpha_only and not (w.isascii() and w.isalpha()):
                continue

            if dedupe:
                if w in seen:
                    continue
                seen.add(w)

            clean.append(w)

        if not clean:
            raise ValueError("no valid words after filtering")

        return cls(clean)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        """Number of words in the vocabulary."""
        return len(self._words)

    def words(self) -> List[str]:
        """Return a copy of the internal word list (to avoid external mutation)."""
        return list(self._words)

    def word_at(self, idx: int) -> str:
        """Return the word at position `idx`; raise IndexError if out of bounds."""
        if idx < 0 or idx >= len(self._words):
            raise IndexError(f"index out of range: {idx}")
        return self._words[idx]

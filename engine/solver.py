"""
solver.py

Minimax solver for the letter-position deduction game.

The solver keeps book of every word that is still a possible solution and
picks the next guess as the dictionary word whose worst outcome leaves the
fewest candidates. Each answer received narrows the solution space to the
words that would have produced exactly that answer.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Protocol, Tuple

import numpy as np

from engine.errors import InvalidDictionary
from engine.feedback import match
from engine.outcome import Outcome, outcome_count

_UPPERCASE_WORD = re.compile(r"[A-Z]+")


class _Cancel(Protocol):
    def is_set(self) -> bool: ...


class WordleSolver:
    """
    Solver over a fixed dictionary of same-length uppercase words.

    API
    ---
    next_guess(cancel=None) -> str
        Dictionary word minimising the largest outcome bucket.
    apply_answer(guess, outcome) -> None
        Drop every solution that disagrees with `outcome` for `guess`.
    get_solutions() -> tuple[str, ...]
        Remaining candidates in lexicographic order.
    get_factorizations(guess) -> dict[Outcome, list[str]]
        Solution space split into one bucket per outcome.
    parse_outcome(text) -> Outcome
        Validate an 'xgxyy'-style answer for this solver's word length.
    bucket_sizes(guess) -> numpy.ndarray
        Solutions per outcome value, the histogram next_guess scores.
    check_guess(word) -> None
        Raise ValueError unless `word` has this solver's shape.
    """

    def __init__(self, words: Iterable[str]) -> None:
        dictionary = list(words)
        self.length = self._validate(dictionary)
        self.answers_count = outcome_count(self.length)

        self._dictionary: Tuple[str, ...] = tuple(dictionary)
        self._solutions: List[str] = sorted(set(dictionary))
        self._solution_set = set(self._solutions)

    @staticmethod
    def _validate(dictionary: List[str]) -> int:
        """Return the common word length; raise InvalidDictionary otherwise."""
        if not dictionary:
            return 0
        first = dictionary[0]
        length = len(first) if isinstance(first, str) else 0
        for word in dictionary:
            if not isinstance(word, str) or not _UPPERCASE_WORD.fullmatch(word):
                raise InvalidDictionary(f"{word!r} is not a word of uppercase letters A-Z")
            if len(word) != length:
                raise InvalidDictionary(
                    f"all words must have the same length; {word!r} is not {length} letters long"
                )
        return length

    # -------------------------
    # Guess selection
    # -------------------------
    def _factorization_sizes(self, guess: str) -> np.ndarray:
        codes = np.fromiter(
            (match(guess, s) for s in self._solutions),
            dtype=np.int64,
            count=len(self._solutions),
        )
        return np.bincount(codes, minlength=self.answers_count)

    def bucket_sizes(self, guess: str) -> np.ndarray:
        """Number of solutions per outcome for `guess`, indexed by outcome value."""
        self.check_guess(guess)
        return self._factorization_sizes(guess)

    def worst_case(self, guess: str) -> int:
        """Size of the largest bucket `guess` splits the solution space into."""
        return int(self.bucket_sizes(guess).max())

    def next_guess(self, cancel: Optional[_Cancel] = None) -> str:
        """
        Find the best guess for the current solution space.

        Every word factorizes the solution space by its outcome against each
        candidate. With the solution space [LEBEN, RESTE, KAMEL, BEBEN] the
        word TRUEB gives

            xxxgy: [BEBEN, LEBEN]
            yyxyx: [RESTE]
            xxxgx: [KAMEL]

        and scores 2, the size of its biggest group. The next guess is a word
        with the lowest score; among equal scores the first word that could
        itself be the solution wins, otherwise the first word scored.
        A new minimum resets that preference from the new word's own
        membership, so later in-space ties can still take over.

        `cancel` is polled once per dictionary word. Once it is set, the best
        word found so far is returned ("" if none has been scored).
        """
        minimax = None
        best = ""
        best_is_solution = False

        for word in self._dictionary:
            if cancel is not None and cancel.is_set():
                break
            score = int(self._factorization_sizes(word).max())
            if minimax is None or score < minimax:
                minimax = score
                best = word
                best_is_solution = word in self._solution_set
            elif score == minimax and not best_is_solution and word in self._solution_set:
                best = word
                best_is_solution = True
        return best

    # -------------------------
    # Solution space
    # -------------------------
    def apply_answer(self, guess: str, outcome: Outcome) -> None:
        """Keep only the solutions that would have answered `guess` with `outcome`."""
        self.check_guess(guess)
        if outcome.length != self.length:
            raise ValueError(f"outcome is for {outcome.length} letters, solver uses {self.length}")
        value = outcome.value
        self._solutions = [s for s in self._solutions if match(guess, s) == value]
        self._solution_set = set(self._solutions)

    def get_solutions(self) -> Tuple[str, ...]:
        """Current solution space, sorted."""
        return tuple(self._solutions)

    def get_factorizations(self, guess: str) -> Dict[Outcome, List[str]]:
        """
        Partition the solution space by outcome against `guess`.

        Every outcome is present, empty buckets included, in integer order.
        """
        self.check_guess(guess)
        factorization: Dict[Outcome, List[str]] = {o: [] for o in Outcome.all(self.length)}
        by_value = list(factorization.values())
        for s in self._solutions:
            by_value[match(guess, s)].append(s)
        return factorization

    def parse_outcome(self, text: str) -> Outcome:
        return Outcome.parse(text, self.length)

    # -------------------------
    # Introspection helpers
    # -------------------------
    @property
    def dictionary(self) -> Tuple[str, ...]:
        return self._dictionary

    def is_solution(self, word: str) -> bool:
        return word in self._solution_set

    def check_guess(self, word: str) -> None:
        """Raise ValueError unless `word` is an uppercase word of this solver's length."""
        if not isinstance(word, str) or len(word) != self.length or not _UPPERCASE_WORD.fullmatch(word):
            raise ValueError(f"{word!r} is not a {self.length}-letter uppercase word")

"""
feedback.py

Match evaluation: the outcome a guess receives against a hidden word,
computed the way the game computes it.

Correct Duplicate Handling (two-pass rule)
------------------------------------------
1) EXACT PASS:
   - Every position where guess and word agree is a 'g' and consumes that
     slot of the word.
2) MISPLACED PASS:
   - Left to right over the remaining guess positions, take the first
     unconsumed slot of the word holding the same letter; that position is a
     'y' and the slot is consumed. No such slot means 'x'.

Examples
--------
- 'ERROR' vs 'RIVER' -> 'yyxxg' (the word has two R's, so one R of the guess stays 'x').
- 'GERNE' vs 'LEBEN' -> 'xgxyy'.
"""

from __future__ import annotations

from engine.outcome import Outcome, int_to_pattern


def match(guess: str, word: str) -> int:
    """
    Outcome integer for `guess` against the hidden `word`.

    Both words must have the same length; this runs once per
    (dictionary word, candidate) pair while scoring, so it does not
    re-validate its arguments.
    """
    length = len(guess)
    consumed = [False] * length
    exact = [False] * length

    result = 0
    for i in range(length):
        result *= 3
        if guess[i] == word[i]:
            exact[i] = consumed[i] = True
            result += 2

    misplaced = 0
    for i in range(length):
        misplaced *= 3
        if exact[i]:
            continue
        letter = guess[i]
        for j in range(length):
            if not consumed[j] and word[j] == letter:
                consumed[j] = True
                misplaced += 1
                break

    return result + misplaced


def score_pattern(guess: str, word: str) -> list[int]:
    """Per-position digits (0 = x, 1 = y, 2 = g) for `guess` against `word`."""
    if len(guess) != len(word):
        raise ValueError("guess and word must have the same length")
    return int_to_pattern(match(guess, word), len(guess))


def consistent_with(word: str, guess: str, outcome: Outcome) -> bool:
    """
    True if `word`, taken as the hidden word, would have produced `outcome`
    for `guess`.
    """
    if len(word) != len(guess) or outcome.length != len(guess):
        raise ValueError("word, guess and outcome must share one length")
    return match(guess, word) == outcome.value

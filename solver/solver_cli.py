"""
solver/solver_cli.py

Interactive solver (human-in-the-loop):
- The solver suggests the guess with the smallest worst case.
- Press Enter to play it, or type any other word you played instead.
- Then type the answer the game showed, one symbol per letter:
    'x' ... letter not contained in the solution   (gray)
    'y' ... letter contained, but not at this position (yellow)
    'g' ... letter at this position in the solution (green)
- Repeats until a single solution (or none) is left.

Run:
  python -m solver.solver_cli --words words.txt
  python -m solver.solver_cli --words word_list.csv --column word --length 5

Shortcuts:
  quit / q / exit  -> exit at any prompt, unless the input is a valid guess
"""
from __future__ import annotations

import argparse
import re
from typing import Optional

from engine.data_utils import load_dictionary
from engine.outcome import CORRECT_POSITION, NOT_CONTAINED, WRONG_POSITION
from engine.solver import WordleSolver

_QUIT = {"q", "quit", "exit"}


class _Quit(Exception):
    pass


def _ask(prompt: str, valid=None) -> str:
    """Read one line; quit shortcuts apply unless `valid` accepts the line as input."""
    try:
        line = input(prompt)
    except EOFError:
        raise _Quit() from None
    if line.strip().lower() in _QUIT and not (valid is not None and valid(line)):
        raise _Quit()
    return line


def read_next_guess(solver: WordleSolver, best_guess: str) -> str:
    valid_word = re.compile(f"[A-Z]{{{solver.length}}}")

    def is_word(line: str) -> bool:
        return valid_word.fullmatch(line.strip().upper()) is not None

    while True:
        line = _ask(f"Use this guess (leave empty for '{best_guess}') or else: ", is_word).strip().upper()
        guess = line or best_guess
        if valid_word.fullmatch(guess):
            return guess
        print(f"'{guess}' is not a valid word")


def apply_answer(solver: WordleSolver, guess: str) -> None:
    while True:
        try:
            outcome = solver.parse_outcome(_ask("Answer: ").strip())
        except ValueError:
            print(
                f"Only strings of length {solver.length} consisting of the following characters are valid:\n"
                f"'{NOT_CONTAINED}' ... character not contained in solution\n"
                f"'{WRONG_POSITION}' ... character contained in solution but not at this position\n"
                f"'{CORRECT_POSITION}' ... character at this position in solution"
            )
            continue
        solver.apply_answer(guess, outcome)
        print(f"Solutions:\n\t{list(solver.get_solutions())}")
        return


def print_factorizations(solver: WordleSolver, guess: str) -> None:
    rows = [f"{outcome}: {words}" for outcome, words in solver.get_factorizations(guess).items() if words]
    print(f"Factorizations for {guess}:")
    print("\n".join(rows))


def play(solver: WordleSolver, *, show_factorizations: bool = False) -> Optional[str]:
    """
    Run one interactive session. Returns the solution, or None when no
    candidate is left or the user quits.
    """
    try:
        while len(solver.get_solutions()) > 1:
            best_guess = solver.next_guess()
            print(f"Best guess: {best_guess}")

            guess = read_next_guess(solver, best_guess)
            if show_factorizations:
                print_factorizations(solver, guess)

            apply_answer(solver, guess)
    except _Quit:
        print("bye!")
        return None

    solutions = solver.get_solutions()
    if not solutions:
        print("No solution found")
        return None
    print(f"Solution is: {solutions[0]}")
    return solutions[0]


def main():
    ap = argparse.ArgumentParser(description="Interactive minimax solver (manual answers)")
    ap.add_argument("--words", default="words.txt", help="Dictionary: .csv or one word per line")
    ap.add_argument("--column", default="word", help="CSV column holding the words")
    ap.add_argument("--length", type=int, default=None, help="Keep only words of this length")
    ap.add_argument("--factorizations", action="store_true", help="Print the outcome buckets of every guess")
    args = ap.parse_args()

    vocab = load_dictionary(args.words, column=args.column, word_len=args.length)
    solver = WordleSolver(vocab.words())
    print(f"Loaded {len(vocab)} words of length {solver.length}.")

    play(solver, show_factorizations=args.factorizations)


if __name__ == "__main__":
    main()

"""
starting_word/eval_whole_game_sim.py

Simulate *full games* of the minimax solver.
Hidden words are sampled from the dictionary; for each one a fresh solver
plays (optionally with a fixed first guess, which skips the most expensive
turn) until the answer is all 'g' or the guess limit is hit.

Usage examples:
  python -m starting_word.eval_whole_game_sim --words words.txt --episodes 100
  python -m starting_word.eval_whole_game_sim --words word_list.csv --length 5 --first RAISE --seed 3

Outputs a CSV with one row per game and prints the guess distribution.
"""

from __future__ import annotations

import argparse
import statistics as stats
import time
from collections import Counter
from typing import Dict, List, Optional, Tuple

import pandas as pd

from engine.data_utils import load_dictionary
from engine.feedback import match
from engine.outcome import Outcome
from engine.sampler import WordSampler
from engine.solver import WordleSolver


# -----------------------------
# Simulation core
# -----------------------------

def play_game(
    words: List[str],
    target: str,
    *,
    first: Optional[str] = None,
    max_guesses: int = 6,
) -> Tuple[bool, List[str]]:
    """
    Let a fresh solver over `words` find `target`.

    Returns (solved, guesses); `solved` is False when the limit was reached
    or the solver ran out of candidates.
    """
    solver = WordleSolver(words)
    if first is not None:
        # fail before match() reads past either word
        solver.check_guess(first)
    guesses: List[str] = []
    while len(guesses) < max_guesses:
        if not solver.get_solutions():
            break
        if first is not None and not guesses:
            guess = first
        else:
            guess = solver.next_guess()
        guesses.append(guess)
        outcome = Outcome(match(guess, target), solver.length)
        if outcome.is_solved():
            return True, guesses
        solver.apply_answer(guess, outcome)
    return False, guesses


def simulate(
    words: List[str],
    sampler: WordSampler,
    *,
    episodes: int = 100,
    first: Optional[str] = None,
    max_guesses: int = 6,
    progress: bool = True,
) -> List[Dict[str, object]]:
    rows: List[Dict[str, object]] = []
    for ep in range(1, episodes + 1):
        target = sampler.choice_word()
        solved, guesses = play_game(words, target, first=first, max_guesses=max_guesses)
        rows.append(
            {
                "target": target,
                "solved": solved,
                "steps": len(guesses),
                "guesses": " ".join(guesses),
            }
        )
        if progress and ep % 10 == 0:
            print(f"Played {ep}/{episodes} games...", flush=True)
    return rows


def summarize(rows: List[Dict[str, object]]) -> Dict[str, object]:
    steps_solved = [r["steps"] for r in rows if r["solved"]]
    n = len(rows)
    return {
        "episodes": n,
        "solve_rate": round(len(steps_solved) / n, 4) if n else 0.0,
        "avg_steps_solved": round(sum(steps_solved) / len(steps_solved), 3) if steps_solved else float("nan"),
        "median_steps": stats.median(steps_solved) if steps_solved else float("nan"),
        "distribution": dict(sorted(Counter(steps_solved).items())),
    }


def main():
    ap = argparse.ArgumentParser(description="Whole-game simulation of the minimax solver.")
    ap.add_argument("--words", default="words.txt", help="Dictionary: .csv or one word per line")
    ap.add_argument("--column", default="word", help="CSV column holding the words")
    ap.add_argument("--length", type=int, default=None, help="Keep only words of this length")
    ap.add_argument("--episodes", type=int, default=100, help="Number of games to play")
    ap.add_argument("--seed", type=int, default=0, help="RNG seed for target sampling")
    ap.add_argument("--first", default=None, help="Fixed first guess (skips the first search)")
    ap.add_argument("--max-guesses", type=int, default=6, help="Guess limit per game")
    ap.add_argument("--out", default="whole_game_results.csv", help="Output CSV path")
    args = ap.parse_args()

    vocab = load_dictionary(args.words, column=args.column, word_len=args.length)
    sampler = WordSampler(vocab, seed=args.seed)
    first = args.first.upper() if args.first else None

    print(f"Playing {args.episodes} games over {len(vocab)} words (first={first})", flush=True)
    t0 = time.perf_counter()
    rows = simulate(vocab.words(), sampler, episodes=args.episodes, first=first, max_guesses=args.max_guesses)
    dt = time.perf_counter() - t0
    print(f"Done in {dt:.2f}s", flush=True)

    summary = summarize(rows)
    print(f"Solve rate (<= {args.max_guesses}): {summary['solve_rate']:.3f}")
    print(f"Avg steps (solved only): {summary['avg_steps_solved']}")
    print(f"Median steps: {summary['median_steps']}")
    print("Distribution:")
    for steps, count in summary["distribution"].items():
        print(f"  {steps}: {count}")

    pd.DataFrame(rows).to_csv(args.out, index=False)
    print(f"Wrote results to {args.out}")


if __name__ == "__main__":
    main()

"""
starting_word/eval.py

Score candidate first guesses by how well they split the solution space.

Metrics per guess:
- worst_case: size of the largest bucket (what the solver minimises)
- partitions: number of non-empty outcome buckets
- exp_remaining: expected remaining candidates after the first answer
- entropy: information gain in bits (higher is better)
- is_solution: whether the guess could itself be the hidden word

Rows are ranked the way the solver picks its guess: worst case first, then
guesses that could be the solution, then dictionary order.

Usage:
  python -m starting_word.eval --words words.txt
  python -m starting_word.eval --words word_list.csv --length 5 --top 30 --limit-guesses 500
"""

from __future__ import annotations

import argparse
import csv
import time
from math import log2
from typing import Dict, List, Optional, Tuple

from engine.data_utils import load_dictionary
from engine.solver import WordleSolver

FIELDNAMES = ["guess", "worst_case", "partitions", "exp_remaining", "entropy", "is_solution"]


def _metrics_from_counts(counts: List[int], total: int) -> Tuple[int, int, float, float]:
    """
    Given the non-empty bucket sizes and the number of candidates,
    compute (worst_case, partitions, exp_remaining, entropy).
    """
    if total <= 0:
        raise ValueError("total must be positive")
    exp_remaining = sum(c * c for c in counts) / total
    entropy = 0.0
    for c in counts:
        p = c / total
        entropy -= p * log2(p)
    worst_case = max(counts) if counts else 0
    return worst_case, len(counts), exp_remaining, entropy


def evaluate_first_guesses(
    solver: WordleSolver,
    guesses: Optional[List[str]] = None,
    *,
    progress: bool = False,
) -> List[Dict[str, object]]:
    """
    Evaluate each guess against the solver's current solution space.

    Parameters
    ----------
    solver : WordleSolver
        Supplies the solution space and the bucket sizes of each guess.
    guesses : list[str] | None
        Guesses to score. If None, uses the solver's dictionary.
    progress : bool
        If True, prints a progress line every 100 guesses.

    Returns
    -------
    list[dict]
        Sorted list (best first) of records keyed by FIELDNAMES.
    """
    total = len(solver.get_solutions())
    if total == 0:
        raise ValueError("solution space is empty")
    pool = list(guesses) if guesses is not None else list(solver.dictionary)

    results: List[Dict[str, object]] = []
    for i, g in enumerate(pool):
        sizes = solver.bucket_sizes(g)
        counts = [int(c) for c in sizes[sizes > 0]]
        worst_case, partitions, exp_remaining, entropy = _metrics_from_counts(counts, total)
        results.append(
            {
                "guess": g,
                "worst_case": int(worst_case),
                "partitions": int(partitions),
                "exp_remaining": float(exp_remaining),
                "entropy": float(entropy),
                "is_solution": solver.is_solution(g),
            }
        )
        if progress and (i + 1) % 100 == 0:
            print(f"Scored {i+1}/{len(pool)} guesses...", flush=True)

    # sort is stable, so ties keep dictionary order
    results.sort(key=lambda r: (r["worst_case"], not r["is_solution"]))
    return results


def _print_top(results: List[Dict[str, object]], k: int = 20) -> None:
    print(f"\nTop {k} starting words by worst case:")
    print(f"{'rank':>4}  {'guess':<8}  {'worst':>5}  {'parts':>6}  {'exp_rem':>8}  {'entropy':>8}  {'sol':>3}")
    for idx, r in enumerate(results[:k], start=1):
        print(
            f"{idx:>4}  {r['guess']:<8}  {r['worst_case']:>5}  {r['partitions']:>6}  "
            f"{r['exp_remaining']:>8.2f}  {r['entropy']:>8.3f}  {'*' if r['is_solution'] else '':>3}"
        )


def _write_csv(results: List[Dict[str, object]], path: str) -> None:
    with open(path, mode="w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        for row in results:
            writer.writerow(row)


def main():
    ap = argparse.ArgumentParser(description="Rank first guesses by their outcome buckets.")
    ap.add_argument("--words", default="words.txt", help="Dictionary: .csv or one word per line")
    ap.add_argument("--column", default="word", help="CSV column holding the words")
    ap.add_argument("--length", type=int, default=None, help="Keep only words of this length")
    ap.add_argument("--limit-guesses", type=int, default=None, help="Evaluate only the first K guesses (for speed)")
    ap.add_argument("--top", type=int, default=20, help="How many top rows to print")
    ap.add_argument("--out", default="starting_word_results.csv", help="Output CSV path")
    args = ap.parse_args()

    vocab = load_dictionary(args.words, column=args.column, word_len=args.length)
    solver = WordleSolver(vocab.words())
    guesses = list(solver.dictionary)
    if args.limit_guesses is not None:
        guesses = guesses[: args.limit_guesses]

    print(f"Scoring {len(guesses)} guesses against {len(solver.get_solutions())} solutions...", flush=True)
    t0 = time.perf_counter()
    results = evaluate_first_guesses(solver, guesses, progress=True)
    dt = time.perf_counter() - t0
    print(f"Done in {dt:.2f}s", flush=True)
    _print_top(results, k=args.top)
    _write_csv(results, args.out)
    print(f"Wrote results to {args.out}")


if __name__ == "__main__":
    main()

import csv

import pytest

from engine.sampler import WordSampler
from engine.solver import WordleSolver
from engine.vocab import WordVocab
from starting_word.eval import _write_csv, evaluate_first_guesses
from starting_word.eval_whole_game_sim import play_game, simulate, summarize

GERMAN = ["LEBEN", "BEBEN", "RESTE", "KAMEL"]


def test_ranking_agrees_with_next_guess():
    solver = WordleSolver(GERMAN)
    rows = evaluate_first_guesses(solver)
    assert rows[0]["guess"] == solver.next_guess()
    assert [r["worst_case"] for r in rows] == sorted(r["worst_case"] for r in rows)


def test_metrics_for_a_single_guess():
    solver = WordleSolver(GERMAN)
    (row,) = evaluate_first_guesses(solver, ["TRUEB"])
    assert row["worst_case"] == 2
    assert row["partitions"] == 3
    assert row["exp_remaining"] == pytest.approx((4 + 1 + 1) / 4)
    assert row["entropy"] == pytest.approx(1.5)
    assert row["is_solution"] is False


def test_ranking_prefers_possible_solutions():
    solver = WordleSolver(["DOG", "TTT", "CAT", "COT"])
    solver.apply_answer("TTT", solver.parse_outcome("xxg"))
    rows = evaluate_first_guesses(solver)
    assert [r["guess"] for r in rows[:3]] == ["CAT", "COT", "DOG"]


def test_empty_solution_space_is_rejected():
    solver = WordleSolver(["LEBEN"])
    solver.apply_answer("LEBEN", solver.parse_outcome("xxxxx"))
    with pytest.raises(ValueError):
        evaluate_first_guesses(solver)


def test_write_csv(tmp_path):
    rows = evaluate_first_guesses(WordleSolver(GERMAN))
    out = tmp_path / "results.csv"
    _write_csv(rows, str(out))
    with open(out, newline="", encoding="utf-8") as f:
        read = list(csv.DictReader(f))
    assert [r["guess"] for r in read] == [r["guess"] for r in rows]


def test_play_game_solves_every_word():
    for target in GERMAN:
        solved, guesses = play_game(GERMAN, target)
        assert solved
        assert guesses[-1] == target
        assert len(guesses) <= 3


def test_play_game_with_fixed_first_guess():
    solved, guesses = play_game(GERMAN, "KAMEL", first="TRUEB")
    assert solved
    assert guesses == ["TRUEB", "KAMEL"]


def test_play_game_respects_guess_limit():
    solved, guesses = play_game(GERMAN, "RESTE", first="TRUEB", max_guesses=1)
    assert not solved
    assert guesses == ["TRUEB"]


def test_simulate_and_summarize():
    vocab = WordVocab(GERMAN)
    rows = simulate(vocab.words(), WordSampler(vocab, seed=1), episodes=5, progress=False)
    assert len(rows) == 5
    summary = summarize(rows)
    assert summary["episodes"] == 5
    assert summary["solve_rate"] == 1.0
    assert sum(summary["distribution"].values()) == 5


@pytest.mark.parametrize("first", ["TRUEBE", "TRUE", "trueb"])
def test_play_game_rejects_first_guess_of_wrong_shape(first):
    with pytest.raises(ValueError):
        play_game(GERMAN, "LEBEN", first=first)


def test_report_uses_solver_bucket_sizes():
    solver = WordleSolver(GERMAN)
    sizes = solver.bucket_sizes("TRUEB")
    assert len(sizes) == 3 ** 5
    assert sorted(int(c) for c in sizes if c) == [1, 1, 2]
    (row,) = evaluate_first_guesses(solver, ["TRUEB"])
    assert row["worst_case"] == int(sizes.max())

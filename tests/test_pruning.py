from engine.feedback import match
from engine.outcome import Outcome
from engine.solver import WordleSolver


def test_pruning_after_allot_pattern():
    # Small controlled pool so the test doesn't depend on a word list file
    words = ["TOTAL", "STOAL", "ALLOT", "TALLY", "ALLOY", "ATOLL"]
    solver = WordleSolver(words)
    outcome = Outcome(match("ALLOT", "TOTAL"), 5)  # yyxyy

    solver.apply_answer("ALLOT", outcome)
    remaining = solver.get_solutions()

    # "TOTAL" and "STOAL" are consistent; others are not.
    assert "TOTAL" in remaining
    assert "STOAL" in remaining
    assert "ALLOT" not in remaining
    assert "TALLY" not in remaining
    assert "ALLOY" not in remaining
    assert "ATOLL" not in remaining


def test_pruning_is_monotonic_with_more_feedback():
    solver = WordleSolver(["TOTAL", "STOAL", "BLEED", "BLEND"])
    solver.apply_answer("ALLOT", Outcome(match("ALLOT", "TOTAL"), 5))
    rem1 = set(solver.get_solutions())
    solver.apply_answer("STOAL", Outcome(match("STOAL", "TOTAL"), 5))
    rem2 = set(solver.get_solutions())
    # Candidate set should not grow as we add answers
    assert rem2.issubset(rem1)
    assert rem2 == {"TOTAL"}

import pytest

from engine.feedback import consistent_with, match, score_pattern
from engine.outcome import Outcome, decode


def test_same_word_is_all_correct():
    assert match("CRANE", "CRANE") == 3 ** 5 - 1
    assert decode(match("LEBEN", "LEBEN"), 5) == "ggggg"


def test_no_shared_letters_is_all_absent():
    assert match("FJORD", "BLANK") == 0


def test_documented_example():
    # solution LEBEN, guess GERNE
    assert decode(match("GERNE", "LEBEN"), 5) == "xgxyy"


def test_repeated_guess_letter_against_single_occurrence():
    # ERROR has three R's, HEART only one
    pattern = score_pattern("ERROR", "HEART")
    r_positions = [i for i, ch in enumerate("ERROR") if ch == "R"]
    marked = [pattern[i] for i in r_positions if pattern[i] > 0]
    assert len(marked) == 1
    assert decode(match("ERROR", "HEART"), 5) == "yyxxx"


def test_exact_match_consumes_before_misplaced():
    # the last R is exact; the earlier R's must not also be credited
    assert decode(match("ERROR", "TIGER"), 5) == "yxxxg"
    assert decode(match("ERROR", "RIVER"), 5) == "yyxxg"


@pytest.mark.parametrize(
    "guess, word, expected",
    [
        ("ALLOT", "TOTAL", "yyxyy"),
        ("ABBEY", "CABIN", "yxgxx"),
        ("PRESS", "SPREE", "yyyyx"),
    ],
)
def test_duplicate_letter_cases(guess, word, expected):
    assert decode(match(guess, word), 5) == expected


def test_score_pattern_digits():
    assert score_pattern("GERNE", "LEBEN") == [0, 2, 0, 1, 1]
    with pytest.raises(ValueError):
        score_pattern("GERNE", "LEB")


def test_consistent_with():
    outcome = Outcome.parse("xgxyy", 5)
    assert consistent_with("LEBEN", "GERNE", outcome)
    assert not consistent_with("GERNE", "GERNE", outcome)

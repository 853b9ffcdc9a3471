import pytest

from engine.errors import InvalidFormat
from engine.outcome import Outcome, decode, encode, int_to_pattern, pattern_to_int


def test_encode_documented_examples():
    assert encode("xyygx") == 42
    assert encode("xgxyy") == 58
    assert encode("ggggg") == 242
    assert encode("xxxxx") == 0


def test_decode_inverts_encode_for_every_value():
    for value in range(3 ** 4):
        assert encode(decode(value, 4), 4) == value


def test_decode_keeps_leading_absent_symbols():
    assert decode(0, 5) == "xxxxx"
    assert decode(2, 5) == "xxxxg"


@pytest.mark.parametrize("text", ["", "xxxx", "xxxxxx", "xxGxx", "abcde", "xx xx", "00000"])
def test_encode_rejects_malformed_text(text):
    with pytest.raises(InvalidFormat):
        encode(text, 5)


def test_invalid_format_is_a_value_error():
    with pytest.raises(ValueError):
        Outcome.parse("ggg", 5)


def test_digit_patterns_match_text_encoding():
    assert pattern_to_int([0, 2, 0, 1, 1]) == encode("xgxyy")
    assert int_to_pattern(58, 5) == [0, 2, 0, 1, 1]
    with pytest.raises(ValueError):
        pattern_to_int([0, 3, 0, 0, 0])


def test_outcome_value_semantics():
    a = Outcome.parse("xgxyy", 5)
    b = Outcome(58, 5)
    assert a == b
    assert hash(a) == hash(b)
    assert str(a) == "xgxyy"
    assert int(a) == 58
    assert a != Outcome(58, 6)
    assert repr(a) == "Outcome('xgxyy')"


def test_solved_outcome_is_all_correct():
    solved = Outcome.solved(5)
    assert str(solved) == "ggggg"
    assert int(solved) == 3 ** 5 - 1
    assert solved.is_solved()
    assert not Outcome(0, 5).is_solved()


def test_all_outcomes_in_integer_order():
    values = [int(o) for o in Outcome.all(3)]
    assert values == list(range(27))


def test_outcome_value_out_of_range():
    with pytest.raises(InvalidFormat):
        Outcome(243, 5)
    with pytest.raises(InvalidFormat):
        Outcome(-1, 5)

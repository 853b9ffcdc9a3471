"""
outcome.py

Outcome codec: conversion between the textual form of a guess result
(one of 'x', 'y', 'g' per letter) and its compact base-3 integer.

    solution  L E B E N
    guess     G E R N E
    outcome   x g x y y   -> 0*81 + 2*27 + 0*9 + 1*3 + 1 = 58

Digits are read most-significant first, so 'xyygx' is
0*81 + 1*27 + 1*9 + 2*3 + 0 = 42.
"""

from __future__ import annotations

from typing import Iterator

from engine.errors import InvalidFormat

NOT_CONTAINED = "x"
WRONG_POSITION = "y"
CORRECT_POSITION = "g"

SYMBOLS = (NOT_CONTAINED, WRONG_POSITION, CORRECT_POSITION)
_DIGIT = {NOT_CONTAINED: 0, WRONG_POSITION: 1, CORRECT_POSITION: 2}


def outcome_count(length: int) -> int:
    """Number of distinct outcomes for words of `length` letters (3^length)."""
    return 3 ** length


def encode(text: str, length: int | None = None) -> int:
    """
    Encode an outcome string into its base-3 integer.

    Parameters
    ----------
    text : str
        Outcome string over {'x', 'y', 'g'}.
    length : int | None
        Required number of characters. If None, any non-empty length is accepted.

    Raises
    ------
    InvalidFormat
        If `text` is not a string of exactly `length` recognised symbols.
    """
    if not isinstance(text, str) or not text:
        raise InvalidFormat("outcome must be a non-empty string of 'x', 'y' or 'g'")
    if length is not None and len(text) != length:
        raise InvalidFormat(f"outcome must have exactly {length} characters, got {len(text)}")
    value = 0
    for ch in text:
        try:
            digit = _DIGIT[ch]
        except KeyError:
            raise InvalidFormat(f"invalid outcome symbol {ch!r}; use only 'x', 'y' or 'g'") from None
        value = value * 3 + digit
    return value


def decode(value: int, length: int) -> str:
    """Inverse of `encode`; `value` must lie in [0, 3^length)."""
    return "".join(SYMBOLS[d] for d in int_to_pattern(value, length))


def pattern_to_int(pattern: list[int]) -> int:
    """Encode a digit pattern such as [0, 2, 0, 1, 1] into its integer."""
    if not isinstance(pattern, (list, tuple)):
        raise TypeError("pattern must be a list or tuple of integers in {0,1,2}")
    value = 0
    for p in pattern:
        if not isinstance(p, int) or p not in (0, 1, 2):
            raise ValueError("pattern elements must be integers in {0,1,2}")
        value = value * 3 + p
    return value


def int_to_pattern(value: int, length: int) -> list[int]:
    digits = [0] * length
    for i in range(length - 1, -1, -1):
        value, digits[i] = divmod(value, 3)
    return digits


class Outcome:
    """
    The result of one guess: an integer in [0, 3^length) together with the
    word length it belongs to.

    Outcomes are plain values. They hash and compare by (value, length), can
    be used directly as an array index, and print in their 'xgxyy' form.
    """

    __slots__ = ("_value", "_length")

    def __init__(self, value: int, length: int) -> None:
        if not 0 <= value < outcome_count(length):
            raise InvalidFormat(f"outcome value {value} out of range for length {length}")
        self._value = int(value)
        self._length = int(length)

    @classmethod
    def parse(cls, text: str, length: int) -> "Outcome":
        return cls(encode(text, length), length)

    @classmethod
    def solved(cls, length: int) -> "Outcome":
        """The all-correct outcome ('ggggg' for five letters)."""
        return cls(outcome_count(length) - 1, length)

    @classmethod
    def all(cls, length: int) -> Iterator["Outcome"]:
        """Every outcome for `length`, in integer order."""
        for value in range(outcome_count(length)):
            yield cls(value, length)

    @property
    def value(self) -> int:
        return self._value

    @property
    def length(self) -> int:
        return self._length

    def is_solved(self) -> bool:
        return self._value == outcome_count(self._length) - 1

    def pattern(self) -> list[int]:
        return int_to_pattern(self._value, self._length)

    def __int__(self) -> int:
        return self._value

    __index__ = __int__

    def __str__(self) -> str:
        return decode(self._value, self._length)

    def __repr__(self) -> str:
        return f"Outcome({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        return self._value == other._value and self._length == other._length

    def __hash__(self) -> int:
        return hash((self._value, self._length))

    def __lt__(self, other: "Outcome") -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        return (self._length, self._value) < (other._length, other._value)

"""Iterators: capitalising words, checked division, factorials and progress counts."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from enum import Enum, auto

_U64_MAX = 2**64 - 1
_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def capitalize_first(text: str) -> str:
    """The text with its first character in upper case."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Each word with its first character in upper case."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """The words, each capitalised, joined into one string."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division could not give an exact integer result."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """a divided by b when b divides a exactly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def result_with_list() -> list[int]:
    """All quotients of the sample numbers by 27; raises at the first failing one."""
    return [divide(number, _DIVISOR) for number in _NUMBERS]


def _attempt(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as err:
        return err


def list_of_results() -> list[int | DivisionError]:
    """For each sample number, its quotient by 27 or the error that division raised."""
    return [_attempt(number, _DIVISOR) for number in _NUMBERS]


def factorial(num: int) -> int:
    """num! for a non-negative num that fits, with its result, in 64 unsigned bits."""
    if num < 0:
        raise ValueError("factorial is only defined for non-negative numbers")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result


class Progress(Enum):
    """How far an exercise has got."""

    NONE = auto()
    SOME = auto()
    COMPLETE = auto()


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Number of exercises with the given progress, counted with a loop."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Number of exercises with the given progress."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Number of exercises with the given progress over all maps, counted with loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Number of exercises with the given progress over all maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)
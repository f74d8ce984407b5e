"""A cons list and copy-on-write absolute values."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of the list."""

    value: int
    next: Cons | Nil


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(1, Cons(2, Nil()))


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Make every element non-negative, copying only when needed.

    A list is owned and is changed in place. Any other sequence is borrowed:
    it is returned untouched when nothing is negative, and otherwise a new list
    with the absolute values is returned.
    """
    result = values
    for index, value in enumerate(values):
        if value < 0:
            if not isinstance(result, list):
                result = list(result)
            result[index] = -value
    return result
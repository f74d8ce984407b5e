"""Small solutions on conditions, lists and optional values."""

from __future__ import annotations

from collections.abc import Iterator


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", "baz" for anything else."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    values = [10, 20, 30, 40]
    return fixed, values


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """A new list with every element doubled."""
    return [value * 2 for value in values]


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour; None for an hour past 23."""
    if time_of_day > 23:
        return None
    if time_of_day < 22:
        return 5
    return 0


def drain_countdown(limit: int) -> Iterator[int]:
    """Pop integers from [None, 1..limit] until the None at the bottom is reached."""
    stack: list[int | None] = [None, *range(1, limit + 1)]
    while stack and (value := stack.pop()) is not None:
        yield value
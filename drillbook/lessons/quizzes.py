"""Quiz solutions: apple pricing, a string transformer and report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


def calculate_price_of_apples(amount: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    if amount > 40:
        return amount
    return amount * 2


class Command(Enum):
    """Transformations that take no argument."""

    UPPERCASE = auto()
    TRIM = auto()


@dataclass(frozen=True)
class Append:
    """Append "bar" to the string the given number of times."""

    times: int


def transformer(items: Iterable[tuple[str, Command | Append]]) -> list[str]:
    """Apply each command to its string."""
    output = []
    for text, command in items:
        match command:
            case Command.UPPERCASE:
                output.append(text.upper())
            case Command.TRIM:
                output.append(text.strip())
            case Append(times=times):
                output.append(text + "bar" * times)
            case _:
                raise ValueError(f"unknown command: {command!r}")
    return output


@dataclass
class ReportCard:
    """A student's report card with a numeric or alphabetic grade."""

    grade: Any
    student_name: str
    student_age: int

    def render(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"
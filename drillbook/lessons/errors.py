"""Error handling: name tags, token costs and positive non-zero integers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

_SIGNED = re.compile(r"[+-]?[0-9]+")
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width: optional sign, ASCII digits only."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _SIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 2 ** (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1.

    Raises ValueError when the quantity is not a 32-bit integer.
    """
    quantity = _parse_int(item_quantity, 32)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(2**31) <= cost < 2**31:
        raise OverflowError("attempt to multiply with overflow")
    return cost


def purchase(tokens: int, item_quantity: str) -> int:
    """Buy the typed quantity if it is affordable; return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    remaining = tokens - cost
    print(f"You now have {remaining} tokens.")
    return remaining


class CreationErrorKind(Enum):
    """Why a value is not a positive non-zero integer."""

    NEGATIVE = auto()
    ZERO = auto()


_CREATION_MESSAGES = {
    CreationErrorKind.NEGATIVE: "number is negative",
    CreationErrorKind.ZERO: "number is zero",
}


class CreationError(ValueError):
    """A positive non-zero integer could not be created."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(_CREATION_MESSAGES[kind])
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero; creating one from anything else raises CreationError."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text could not be read as a positive non-zero integer.

    Exactly one of ``creation`` and ``parse_int`` holds the underlying error.
    """

    def __init__(
        self,
        creation: CreationError | None = None,
        parse_int: ValueError | None = None,
    ) -> None:
        if (creation is None) == (parse_int is None):
            raise TypeError("exactly one underlying error is required")
        cause = creation if creation is not None else parse_int
        super().__init__(str(cause))
        self.creation = creation
        self.parse_int = parse_int

    @classmethod
    def from_creation(cls, err: CreationError) -> ParsePosNonzeroError:
        return cls(creation=err)

    @classmethod
    def from_parse_int(cls, err: ValueError) -> ParsePosNonzeroError:
        return cls(parse_int=err)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Read a positive non-zero integer; raise ParsePosNonzeroError otherwise."""
    try:
        value = _parse_int(text, 64)
    except ValueError as err:
        raise ParsePosNonzeroError.from_parse_int(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError.from_creation(err) from err
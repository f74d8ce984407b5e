"""Shared behaviour: appending "Bar", licence information, combined traits and a wrapper."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Generic, TypeVar

T = TypeVar("T")


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or add "Bar" as a new element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Anything that can report its licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both report the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class _SomeTrait:
    def some_function(self) -> bool:
        return True


class _OtherTrait:
    def other_function(self) -> bool:
        return True


class SomeStruct(_SomeTrait, _OtherTrait):
    """Has both some_function and other_function."""


class OtherStruct(_SomeTrait, _OtherTrait):
    """Has both some_function and other_function."""


def some_func(item: _SomeTrait | _OtherTrait) -> bool:
    """True when the item answers True to both some_function and other_function."""
    return item.some_function() and item.other_function()


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T
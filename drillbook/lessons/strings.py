"""Small string solutions: returning, comparing, trimming, composing and replacing."""

from __future__ import annotations


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """True for "green", "blue" or "red"."""
    return attempt in ("green", "blue", "red")


def trim_me(text: str) -> str:
    """The text without whitespace at either end."""
    return text.strip()


def compose_me(text: str) -> str:
    """The text followed by " world!"."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """The text with every "cars" replaced by "balloons"."""
    return text.replace("cars", "balloons")
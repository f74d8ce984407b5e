"""Coloured status lines for warnings and successes."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def use_emoji() -> bool:
    """Return False when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" not in os.environ


def _report(icon: str, fallback: str, message: str, style: str) -> None:
    marker = icon if use_emoji() else fallback
    console = Console(highlight=False, soft_wrap=True)
    console.print(Text.assemble((marker, style), " ", (message, style)))


def warn(message: str) -> None:
    """Print a red warning line."""
    _report("⚠️ ", "!", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _report("✅", "✓", message, "green")
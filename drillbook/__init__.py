"""Status lines, rust-project.json generation and worked lesson solutions for an exercise course."""

__version__ = "5.5.1"
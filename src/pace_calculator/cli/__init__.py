"""CLI tools for the pace calculator."""

from pace_calculator.cli.pace import main as pace_main

__all__ = [
    "pace_main",
]

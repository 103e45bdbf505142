"""Wordle feedback simulation, constraint tracking and guess selection."""

__version__ = "0.1.0"

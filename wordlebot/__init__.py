"""Wordle assistant: feedback scoring, candidate filtering and entropy-ranked suggestions."""

__version__ = "0.2.0"

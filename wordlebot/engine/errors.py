"""
Error taxonomy shared by the engine, the session and the CLI.

Caller contract violations (bad lengths, bad feedback symbols, an empty
dictionary) are also ValueErrors so generic handlers keep working.
"""

from __future__ import annotations


class WordleError(Exception):
    """Base class for every error raised by wordlebot."""


class LengthMismatch(WordleError, ValueError):
    """Guess, feedback pattern or word lengths disagree."""

    def __init__(self, expected: int, got: int, what: str = "length"):
        self.expected = expected
        self.got = got
        super().__init__(f"{what} must be {expected} characters; got {got}")


class InvalidSymbol(WordleError, ValueError):
    """Feedback contains a character outside the three-symbol alphabet."""

    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"invalid feedback symbol {symbol!r} at position {position + 1}")


class EmptyDictionary(WordleError, ValueError):
    """No usable words were loaded; no game can start."""


class ContradictionReached(WordleError):
    """
    Filtering left no candidates: the answer is outside the dictionary or an
    earlier feedback line was entered incorrectly.
    """


class GameOver(WordleError):
    """An operation was attempted on a game that has already finished."""

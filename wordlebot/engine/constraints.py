"""
Candidate filtering from observed feedback.

Given:
  - a guess and the feedback pattern the game showed for it
  - a set of candidate words

Return:
  - the candidates still consistent with that observation.

The observation is compiled once into a Constraint:
  - hit positions:     word[i] must equal guess[i]
  - non-hit positions: word[i] must differ from guess[i] (present OR absent)
  - letter counts:     for each letter c of the guess, let h be its hit+present
                       marks and g its absent marks. If g > 0 the word holds
                       exactly h copies of c, otherwise at least h.

The count rule mirrors the scorer's decrementing counter, so a letter that is
green in one slot and gray in another is handled without re-scoring.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, Set, Tuple, Union

from .errors import LengthMismatch
from .feedback import FeedbackPattern
from .scoring import ABSENT_CH, HIT_CH

log = logging.getLogger(__name__)

PatternLike = Union[FeedbackPattern, str]

# History is a sequence of (guess, pattern) observations, oldest first.
History = Iterable[Tuple[str, PatternLike]]


@dataclass(frozen=True)
class Constraint:
    """Compiled form of one (guess, pattern) observation."""
    length: int
    hits: Tuple[Tuple[int, str], ...]
    misses: Tuple[Tuple[int, str], ...]
    exact: Dict[str, int]
    at_least: Dict[str, int]

    def admits(self, word: str) -> bool:
        if len(word) != self.length:
            return False
        for i, ch in self.hits:
            if word[i] != ch:
                return False
        for i, ch in self.misses:
            if word[i] == ch:
                return False
        counts = Counter(word)
        for ch, k in self.exact.items():
            if counts[ch] != k:
                return False
        for ch, k in self.at_least.items():
            if counts[ch] < k:
                return False
        return True


def _as_pattern(guess: str, pattern: PatternLike) -> FeedbackPattern:
    if isinstance(pattern, FeedbackPattern):
        if len(pattern) != len(guess):
            raise LengthMismatch(len(guess), len(pattern), what="feedback length")
        return pattern
    return FeedbackPattern.parse(pattern, length=len(guess))


def compile_constraint(guess: str, pattern: PatternLike) -> Constraint:
    """
    Turn an observation into a reusable Constraint.

    Raises:
      LengthMismatch if the pattern length differs from the guess length.
      InvalidSymbol if the pattern holds an unknown symbol.
    """
    guess = guess.strip().lower()
    code = _as_pattern(guess, pattern).code

    hits = []
    misses = []
    marked: Counter = Counter()   # hit + present marks per letter
    gray: Counter = Counter()     # absent marks per letter
    for i, (ch, fb) in enumerate(zip(guess, code)):
        if fb == HIT_CH:
            hits.append((i, ch))
            marked[ch] += 1
        else:
            misses.append((i, ch))
            if fb == ABSENT_CH:
                gray[ch] += 1
            else:
                marked[ch] += 1

    exact: Dict[str, int] = {}
    at_least: Dict[str, int] = {}
    for ch in set(guess):
        if gray[ch] > 0:
            exact[ch] = marked[ch]
        elif marked[ch] > 0:
            at_least[ch] = marked[ch]

    return Constraint(len(guess), tuple(hits), tuple(misses), exact, at_least)


def filter_candidates(guess: str, pattern: PatternLike, candidates: Iterable[str]) -> Set[str]:
    """
    Keep only candidates consistent with seeing `pattern` after playing `guess`.

    Pure: `candidates` is not modified; a new set is returned and it is never
    larger than the input.
    """
    rule = compile_constraint(guess, pattern)
    out = {w for w in candidates if rule.admits(w)}
    log.debug("filter %s %s: kept %d word(s)", guess, pattern, len(out))
    return out


def filter_history(words: Iterable[str], history: History) -> Set[str]:
    """Apply every observation in `history` in order and return the survivors."""
    out = set(words)
    for guess, patt in history:
        out = filter_candidates(guess, patt, out)
    return out

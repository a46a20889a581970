"""
Entropy ranker (expected information gain).

  - For each candidate guess g, partition the CURRENT candidates by the
    feedback pattern g would produce against each of them.
  - Score g by the Shannon entropy (bits) of that partition; pick the max.

Tie-break:
  - scores within EPSILON are equal; the lexicographically smaller word wins,
    so the same candidate set always yields the same suggestion.

Cost is O(n²) pattern computations per round. Nothing is cached between
rounds: the candidate set changes every round and so do all the scores.
Each guess is scored independently, so callers may parallelize over guesses.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import AbstractSet, Collection, Dict, Optional, Tuple

import numpy as np

from .base import BaseSolver, register
from .letter_freq import best_by_letter_freq
from wordlebot.engine import score as score_fn  # canonical scoring

log = logging.getLogger(__name__)

EPSILON = 1e-9


def entropy_of_guess(guess: str, candidates: Collection[str]) -> float:
    """Entropy in bits of the feedback-pattern distribution `guess` induces over `candidates`."""
    n = len(candidates)
    if n <= 1:
        return 0.0

    buckets: Dict[str, int] = defaultdict(int)
    _score = score_fn
    for target in candidates:
        buckets[_score(guess, target)] += 1

    p = np.fromiter(buckets.values(), dtype=np.float64, count=len(buckets)) / n
    return float(-(p * np.log2(p)).sum())


def rank(candidates: Collection[str],
         excluded: AbstractSet[str] = frozenset()) -> Optional[Tuple[str, float]]:
    """
    Best next guess among `candidates` and its entropy score.

    Every non-excluded candidate is scored against the whole candidate set
    (excluded words may still be the answer). Returns None when there are no
    candidates or all of them are excluded. A lone candidate is returned with
    score 0.0 without scoring.
    """
    pool = sorted(w for w in candidates if w not in excluded)
    if not pool:
        return None
    if len(candidates) == 1:
        return pool[0], 0.0

    best_word = None
    best_H = 0.0
    # Ascending order: an equal score later in the scan never displaces the
    # smaller word already held.
    for g in pool:
        H = entropy_of_guess(g, candidates)
        if best_word is None or H > best_H + EPSILON:
            best_word, best_H = g, H

    log.debug("rank: %s (%.4f bits) from %d guesses over %d candidates",
              best_word, best_H, len(pool), len(candidates))
    return best_word, best_H


@register
class EntropySolver(BaseSolver):
    id = "entropy"
    name = "Entropy (Expected Information Gain)"
    version = "2.1.0"

    # Above this many candidates the O(n²) ranking takes too long for an
    # interactive prompt (e.g. the opener rejected against the full list);
    # the letter-frequency pick is used instead.
    RANK_LIMIT = 1000

    def next_guess(self, state: dict) -> Optional[str]:
        """Pick the candidate with maximum expected information gain."""
        candidates = state["candidates"]
        rejected = state.get("rejected", frozenset())
        if len(candidates) > self.RANK_LIMIT:
            log.debug("%d candidates > %d: letter-frequency pick", len(candidates), self.RANK_LIMIT)
            return best_by_letter_freq(candidates, rejected)
        best = rank(candidates, rejected)
        return best[0] if best else None

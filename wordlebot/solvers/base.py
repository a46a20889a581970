from __future__ import annotations
from typing import Dict, FrozenSet, Optional, Type

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A solver suggests the next guess from the current game state.

    `state` passed to next_guess() holds:
      - "turn":       1-based guess number about to be played
      - "candidates": set of words still consistent with all feedback
      - "rejected":   set of words the player refused this game
      - "history":    list of (guess, FeedbackPattern) so far
      - "N":          word length
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = 5
        self.dictionary: FrozenSet[str] = frozenset()

    def reset(self, *, dictionary, N: int) -> None:
        self.dictionary = frozenset(dictionary)
        self.N = int(N)

    def next_guess(self, state: dict) -> Optional[str]:
        raise NotImplementedError("Override in subclass")

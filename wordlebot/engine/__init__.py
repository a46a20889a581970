from .errors import (
    WordleError, LengthMismatch, InvalidSymbol, EmptyDictionary, ContradictionReached, GameOver,
)
from .feedback import FeedbackSymbol, FeedbackPattern, compute_pattern
from .scoring import score
from .constraints import Constraint, compile_constraint, filter_candidates, filter_history
from .validation import validate_guess

__all__ = [
    "WordleError", "LengthMismatch", "InvalidSymbol", "EmptyDictionary",
    "ContradictionReached", "GameOver",
    "FeedbackSymbol", "FeedbackPattern",
    "score", "compute_pattern",
    "Constraint", "compile_constraint", "filter_candidates", "filter_history",
    "validate_guess",
]

"""
One game of assisted Wordle.

A Game owns the per-game state: the candidate set, the rejected set, the
history of observations and the guess counter. The dictionary it starts
from is shared and never modified.

Round flow:
  AWAITING_GUESS --suggest()--> AWAITING_FEEDBACK
  AWAITING_FEEDBACK --reject()--> AWAITING_FEEDBACK (new suggestion, no guess spent)
  AWAITING_FEEDBACK --apply_feedback()--> AWAITING_GUESS | WON | EXHAUSTED | MAX_GUESSES_REACHED
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Set, Tuple, Union

from wordlebot.datasets import Dictionary
from wordlebot.engine import (
    ContradictionReached, FeedbackPattern, GameOver, LengthMismatch, WordleError,
    filter_candidates, validate_guess,
)
from wordlebot.solvers import BaseSolver, create_solver

log = logging.getLogger(__name__)

# Single source of truth for the Wordle turn budget.
WORDLE_MAX_TURNS = 6

# The first guess is fixed; ranking the full dictionary is too slow to do live.
DEFAULT_OPENER = "roate"


class GameState(str, Enum):
    AWAITING_GUESS = "awaiting_guess"
    AWAITING_FEEDBACK = "awaiting_feedback"
    WON = "won"
    EXHAUSTED = "exhausted"
    MAX_GUESSES_REACHED = "max_guesses_reached"


FINAL_STATES = frozenset({GameState.WON, GameState.EXHAUSTED, GameState.MAX_GUESSES_REACHED})


class Game:
    def __init__(
            self,
            dictionary: Dictionary,
            *,
            solver: Union[BaseSolver, str, None] = None,
            opener: Optional[str] = DEFAULT_OPENER,
            max_guesses: int = WORDLE_MAX_TURNS,
    ):
        if max_guesses < 1:
            raise ValueError(f"max_guesses must be positive; got {max_guesses}")
        if opener is not None:
            opener = opener.strip().lower()
            if len(opener) != dictionary.length:
                raise LengthMismatch(dictionary.length, len(opener), what="opener length")

        if solver is None:
            solver = "entropy"
        if isinstance(solver, str):
            solver = create_solver(solver)

        self.dictionary = dictionary
        self.solver = solver
        self.opener = opener
        self.max_guesses = max_guesses
        self.new_game()

    # ---- lifecycle ----

    def new_game(self) -> None:
        """Start over: full candidate set, nothing rejected, no guesses spent."""
        self.candidates: Set[str] = set(self.dictionary.words)
        self.rejected: Set[str] = set()
        self.history: List[Tuple[str, FeedbackPattern]] = []
        self.suggestion: Optional[str] = None
        self.state = GameState.AWAITING_GUESS
        self.solver.reset(dictionary=self.dictionary.words, N=self.dictionary.length)

    @property
    def turn(self) -> int:
        """1-based number of the guess about to be played."""
        return len(self.history) + 1

    @property
    def finished(self) -> bool:
        return self.state in FINAL_STATES

    def _check_live(self) -> None:
        if self.finished:
            raise GameOver(f"game is over ({self.state.value})")

    # ---- suggestions ----

    def suggest(self) -> Optional[str]:
        """
        Suggest the next guess, or None when every candidate has been rejected
        or none remain.
        """
        self._check_live()
        if self.turn == 1 and self.opener and self.opener not in self.rejected:
            guess: Optional[str] = self.opener
        else:
            guess = self.solver.next_guess({
                "turn": self.turn,
                "candidates": self.candidates,
                "rejected": self.rejected,
                "history": list(self.history),
                "N": self.dictionary.length,
            })
        self.suggestion = guess
        self.state = GameState.AWAITING_FEEDBACK
        log.debug("turn %d suggestion: %s (%d candidates)", self.turn, guess, len(self.candidates))
        return guess

    def reject(self, word: Optional[str] = None) -> Optional[str]:
        """
        Mark `word` (default: the current suggestion) as unplayable for the rest
        of this game and suggest again. Candidates and the guess count are
        untouched.
        """
        self._check_live()
        word = (word or self.suggestion or "").strip().lower()
        if not word:
            raise WordleError("nothing to reject")
        self.rejected.add(word)
        log.debug("rejected %s", word)
        return self.suggest()

    # ---- feedback ----

    def apply_feedback(self, feedback: Union[FeedbackPattern, str],
                       guess: Optional[str] = None) -> GameState:
        """
        Record the feedback the game showed for `guess` (default: the current
        suggestion) and narrow the candidates.

        Raises:
          LengthMismatch / InvalidSymbol for malformed feedback; the game is
            left unchanged so the round can be retried.
          ContradictionReached when no candidate survives; the state is then
            EXHAUSTED.
        """
        self._check_live()
        guess = (guess or self.suggestion or "").strip().lower()
        N = self.dictionary.length
        if len(guess) != N:
            raise LengthMismatch(N, len(guess), what="guess length")
        if not validate_guess(guess, N):
            raise WordleError(f"guess must be letters a-z only; got {guess!r}")

        if isinstance(feedback, FeedbackPattern):
            if len(feedback) != N:
                raise LengthMismatch(N, len(feedback), what="feedback length")
            pattern = feedback
        else:
            pattern = FeedbackPattern.parse(feedback, length=N)

        self.candidates = filter_candidates(guess, pattern, self.candidates)
        self.history.append((guess, pattern))
        self.suggestion = None

        if pattern.is_win:
            self.state = GameState.WON
        elif not self.candidates:
            self.state = GameState.EXHAUSTED
            raise ContradictionReached(
                "no dictionary word matches the feedback so far; the answer is not in the "
                "word list or a feedback line was mistyped"
            )
        elif len(self.history) >= self.max_guesses:
            self.state = GameState.MAX_GUESSES_REACHED
        else:
            self.state = GameState.AWAITING_GUESS
        log.debug("after %s %s: %d candidates, state=%s",
                  guess, pattern, len(self.candidates), self.state.value)
        return self.state

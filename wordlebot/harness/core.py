"""
Self-play harness.

- run_case:  play one hidden answer with a solver, feeding the Game the
             feedback the scorer computes.
- run_batch: run many answers in sequence (optionally a sample prefix).

These functions are UI-agnostic so they can be reused by the simulate CLI,
a notebook or the tests.
"""

from __future__ import annotations
import time
from typing import Dict, List, Iterable
from wordlebot.datasets import Dictionary
from wordlebot.engine import ContradictionReached, compute_pattern
from .session import DEFAULT_OPENER, WORDLE_MAX_TURNS, Game, GameState


def run_case(
        solver,
        answer: str,
        *,
        dictionary: Dictionary,
        opener: str | None = DEFAULT_OPENER,
        max_turns: int = WORDLE_MAX_TURNS,
) -> Dict:
    """
    Execute one game until it is won, contradicted or out of turns.

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern_code)]), answer (str), state (str)
    """
    game = Game(dictionary, solver=solver, opener=opener, max_guesses=max_turns)

    t0 = time.perf_counter()
    while not game.finished:
        guess = game.suggest()
        if guess is None:
            break
        try:
            game.apply_feedback(compute_pattern(guess, answer), guess=guess)
        except ContradictionReached:
            # Only possible when the answer is outside the dictionary.
            break
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "success": game.state is GameState.WON,
        "guesses": len(game.history),
        "time_ms": dt,
        "history": [(g, str(p)) for g, p in game.history],
        "answer": answer,
        "state": game.state.value,
    }


def run_batch(
        solver,
        answers: Iterable[str],
        *,
        dictionary: Dictionary,
        opener: str | None = DEFAULT_OPENER,
        max_turns: int = WORDLE_MAX_TURNS,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are used to speed up quick experiments.
    """
    pool = [w for w in answers if len(w) == dictionary.length]
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for ans in pool:
        out.append(run_case(solver, ans, dictionary=dictionary, opener=opener,
                            max_turns=max_turns))
    return out

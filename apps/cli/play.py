# apps/cli/play.py
"""
Interactive Wordle assistant.

This script:
  1) Loads the dictionary (a local word list, or the public list over HTTP).
  2) Suggests a guess each round (fixed opener first, then entropy ranking).
  3) Reads the feedback the real game showed and narrows the candidates.

Feedback is one symbol per letter: '@' green, '#' yellow, '?' gray
(G / Y / - are accepted too). At the prompt:
  r            reject the suggestion (e.g. the game does not accept the word)
  =word FB     you played `word` instead of the suggestion and saw FB
  q            quit

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --words words.txt --opener crane -v
"""

from __future__ import annotations

import argparse
import logging
from typing import Callable, Optional

from wordlebot.datasets import (
    DICTIONARY_URL, WORD_LENGTH, Dictionary, fetch_words, load_dictionary, pretty_summary,
    read_words, validate_wordlist,
)
from wordlebot.engine import ContradictionReached, WordleError
from wordlebot.harness import DEFAULT_OPENER, WORDLE_MAX_TURNS, Game, GameState
from wordlebot.solvers import get_solver_ids

log = logging.getLogger(__name__)

Ask = Callable[[str], str]
Say = Callable[[str], None]


def dictionary_from_args(args: argparse.Namespace) -> Dictionary:
    """Load the session dictionary from --words if given, else download --url."""
    if args.words:
        rep = validate_wordlist(args.length, args.words)
        print(pretty_summary(rep))
        raw = read_words(args.words)
    else:
        raw = fetch_words(args.url)
    dictionary = load_dictionary(raw, length=args.length)
    log.info("Loaded %d words (length %d)", len(dictionary), dictionary.length)
    print(f"Number of words loaded: {len(dictionary)}")
    return dictionary


def _announce(game: Game, guess: Optional[str], say: Say) -> None:
    n = len(game.candidates)
    if guess is None:
        say(f"No suggestion left: all {n} remaining word(s) were rejected. "
            f"Enter '=word FEEDBACK' for a word you played, or q.")
    elif n == 1:
        say(f"The only remaining word is: {guess}")
    else:
        say(f"Guess {game.turn}: {guess}  ({n} possible words)")


def play_game(game: Game, *, ask: Ask = input, say: Say = print) -> Optional[GameState]:
    """
    Run one game to its end. Returns the final state, or None if the player quit.
    """
    guess = game.suggest()
    _announce(game, guess, say)

    while True:
        line = ask("Feedback (@ green, # yellow, ? gray; r=reject, q=quit): ").strip()
        if not line:
            continue
        cmd = line.lower()
        if cmd in ("q", "quit"):
            return None

        if cmd in ("r", "reject"):
            if game.suggestion is None:
                say("Nothing to reject.")
                continue
            guess = game.reject()
            _announce(game, guess, say)
            continue

        played: Optional[str] = None
        feedback = line
        if line.startswith("="):
            parts = line[1:].split()
            if len(parts) != 2:
                say("Use: =word FEEDBACK")
                continue
            played, feedback = parts
        elif game.suggestion is None:
            say("No current suggestion; use '=word FEEDBACK'.")
            continue

        try:
            state = game.apply_feedback(feedback, guess=played)
        except ContradictionReached as e:
            say(f"No words match the given feedback: {e}.")
            return game.state
        except WordleError as e:
            # Malformed input; nothing changed, so the round is retried.
            say(f"Error: {e}")
            continue

        say(f"Number of filtered words: {len(game.candidates)}")
        if state is GameState.WON:
            say(f"Solved in {len(game.history)} guess(es)!")
            return state
        if state is GameState.MAX_GUESSES_REACHED:
            remaining = sorted(game.candidates)
            preview = ", ".join(remaining[:10]) + (" ..." if len(remaining) > 10 else "")
            say(f"Out of guesses. Remaining candidates: {preview}")
            return state

        guess = game.suggest()
        _announce(game, guess, say)


def run_session(game: Game, *, ask: Ask = input, say: Say = print) -> int:
    """Play games until the player declines another; returns the number of games played."""
    played = 0
    while True:
        state = play_game(game, ask=ask, say=say)
        if state is None:
            return played
        played += 1
        again = ask("Play again? [y/N]: ").strip().lower()
        if again not in ("y", "yes"):
            return played
        game.new_game()


def main(argv=None):
    ap = argparse.ArgumentParser(description="wordlebot — interactive Wordle assistant")
    ap.add_argument("--words", help="path to a word list (default: download --url)")
    ap.add_argument("--url", default=DICTIONARY_URL, help="word list URL")
    ap.add_argument("--length", type=int, default=WORD_LENGTH, help="word length")
    ap.add_argument("--opener", default=DEFAULT_OPENER, help="fixed first guess")
    ap.add_argument("--solver", default="entropy",
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--max-guesses", type=int, default=WORDLE_MAX_TURNS)
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        dictionary = dictionary_from_args(args)
        game = Game(dictionary, solver=args.solver, opener=args.opener,
                    max_guesses=args.max_guesses)
    except (WordleError, ValueError, OSError) as e:
        raise SystemExit(f"Error: {e}") from e

    run_session(game)


if __name__ == "__main__":
    main()

import itertools

import pytest
from wordlebot.datasets import load_dictionary
from wordlebot.engine import (
    ContradictionReached, GameOver, InvalidSymbol, LengthMismatch, compute_pattern,
)
from wordlebot.engine import FeedbackPattern
from wordlebot.harness import Game, GameState
from wordlebot.solvers import entropy as entropy_mod
from wordlebot.solvers.letter_freq import best_by_letter_freq

WORDS = ["crane", "raise", "stare", "trace", "cared", "adieu", "alone", "roate"]


@pytest.fixture
def game():
    return Game(load_dictionary(WORDS), solver="entropy", opener="roate")


def test_first_suggestion_is_opener(game):
    assert game.state is GameState.AWAITING_GUESS
    assert game.suggest() == "roate"
    assert game.state is GameState.AWAITING_FEEDBACK


def test_solves_crane(game):
    game.suggest()
    assert game.apply_feedback(compute_pattern("roate", "crane")) is GameState.AWAITING_GUESS
    assert game.candidates == {"crane"}
    assert game.suggest() == "crane"
    assert game.apply_feedback("@@@@@") is GameState.WON
    assert [g for g, _ in game.history] == ["roate", "crane"]
    with pytest.raises(GameOver):
        game.suggest()


def test_reject_keeps_candidates_and_turn(game):
    game.suggest()
    before = set(game.candidates)
    nxt = game.reject()
    assert nxt != "roate" and nxt in before
    assert game.rejected == {"roate"}
    assert game.candidates == before
    assert game.turn == 1


def test_bad_feedback_leaves_game_untouched(game):
    game.suggest()
    with pytest.raises(InvalidSymbol):
        game.apply_feedback("@@x@@")
    with pytest.raises(LengthMismatch):
        game.apply_feedback("@@@")
    assert game.state is GameState.AWAITING_FEEDBACK
    assert len(game.candidates) == len(WORDS)
    assert game.history == []


def test_contradiction_marks_exhausted(game):
    game.suggest()
    with pytest.raises(ContradictionReached):
        game.apply_feedback("?????")
    assert game.state is GameState.EXHAUSTED
    assert game.candidates == set()


def test_max_guesses():
    g = Game(load_dictionary(WORDS), opener="roate", max_guesses=1)
    g.suggest()
    assert g.apply_feedback("#?@?@") is GameState.MAX_GUESSES_REACHED
    assert g.finished


def test_player_reports_other_word(game):
    game.suggest()
    assert game.apply_feedback("@@@@@", guess="STARE") is GameState.WON
    assert game.history[0][0] == "stare"


def test_new_game_resets_state(game):
    game.suggest()
    game.reject()
    game.apply_feedback(compute_pattern(game.suggestion, "crane"))
    game.new_game()
    assert game.rejected == set()
    assert len(game.candidates) == len(WORDS)
    assert game.turn == 1
    assert game.suggest() == "roate"


def test_all_candidates_rejected_gives_no_suggestion():
    g = Game(load_dictionary(["crane", "slate"]), opener=None)
    assert g.suggest() == "crane"
    assert g.reject() == "slate"
    assert g.reject() is None


def test_opener_length_checked():
    with pytest.raises(LengthMismatch):
        Game(load_dictionary(WORDS), opener="roates")


def test_bad_symbol_in_ready_made_pattern_is_rejected(game):
    game.suggest()
    with pytest.raises(InvalidSymbol):
        game.apply_feedback(FeedbackPattern("@x@@@"))
    assert game.state is GameState.AWAITING_FEEDBACK
    assert game.history == []
    assert len(game.candidates) == len(WORDS)


def test_rejecting_opener_on_large_dictionary_skips_full_ranking(monkeypatch):
    words = ["".join(t) for t in itertools.islice(itertools.product("abcdefgh", repeat=5), 1500)]
    d = load_dictionary(words)
    assert len(d) > entropy_mod.EntropySolver.RANK_LIMIT

    def too_slow(*args, **kwargs):
        raise AssertionError("full entropy ranking on a large candidate set")

    monkeypatch.setattr(entropy_mod, "rank", too_slow)
    g = Game(d, solver="entropy", opener="roate")
    assert g.suggest() == "roate"
    nxt = g.reject()
    assert nxt == best_by_letter_freq(d.words, {"roate"})
    assert nxt in d and g.turn == 1

import itertools

import pytest
from wordlebot.engine import (
    FeedbackPattern, FeedbackSymbol, InvalidSymbol, LengthMismatch,
    compile_constraint, compute_pattern, filter_candidates, filter_history, score, validate_guess,
)

# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle","level","?@###"),
    ("level","level","@@@@@"),
    ("lemon","level","@@???"),
    ("cools","scoop","##@?#"),
    ("scoop","scoop","@@@@@"),
    ("crane","crane","@@@@@"),
    ("raise","crane","##??@"),
    ("stare","crane","??@#@"),
    ("sassy","oasis","#@@??"),
    ("apple","amber","@???#"),
])
def test_score_n5_golden(guess, answer, expected):
    assert score(guess, answer) == expected

# --- N=6 sample tests ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("settle","letter","?@@@##"),
    ("little","letter","@?@@?#"),
    ("planet","palate","@##?##"),
    ("kitten","tinket","#@##@#"),
])
def test_score_n6_samples(guess, answer, expected):
    assert score(guess, answer) == expected

def test_score_length_mismatch():
    with pytest.raises(LengthMismatch):
        score("crane", "cranes")

def test_compute_pattern_symbols():
    p = compute_pattern("apple", "amber")
    assert p.symbols == (FeedbackSymbol.HIT, FeedbackSymbol.ABSENT, FeedbackSymbol.ABSENT,
                         FeedbackSymbol.ABSENT, FeedbackSymbol.PRESENT)
    assert p == FeedbackPattern.compute("apple", "amber")
    assert not p.is_win
    assert compute_pattern("crane", "CRANE").is_win

# --- observed feedback parsing ---
def test_parse_accepts_aliases():
    assert FeedbackPattern.parse("G-Yy?") == FeedbackPattern("@?##?")
    assert str(FeedbackPattern.parse(" @#?@@ ")) == "@#?@@"

def test_parse_rejects_bad_symbol():
    with pytest.raises(InvalidSymbol) as e:
        FeedbackPattern.parse("@@x@@")
    assert e.value.symbol == "x" and e.value.position == 2

def test_parse_rejects_wrong_length():
    with pytest.raises(LengthMismatch):
        FeedbackPattern.parse("@@@@", length=5)

def test_direct_pattern_rejects_bad_symbol():
    with pytest.raises(InvalidSymbol) as e:
        FeedbackPattern("@x@@@")
    assert e.value.position == 1
    # aliases are for typed input only, not the canonical code
    with pytest.raises(InvalidSymbol):
        FeedbackPattern("GGGGG")

# --- filtering ---
def test_filter_apple_amber_scenario():
    words = {"apple", "anger", "amber", "alter"}
    patt = compute_pattern("apple", "amber")
    assert filter_candidates("apple", patt, words) == {"amber", "anger"}

def test_filter_accepts_raw_pattern_string():
    words = ["crane","raise","stare","trace","cared","racer","scoop"]
    cand = filter_candidates("raise", "##??@", words)
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand

def test_filter_gray_plus_green_means_exact_count():
    # one 's' present, one hit, one gray: exactly two s's
    words = {"oasis", "basis", "lasso", "massy", "pasta", "sassy"}
    cand = filter_candidates("sassy", "#@@??", words)
    assert cand == {"oasis", "basis"}

def test_filter_absent_excludes_position_even_with_repeat():
    # 'e' is present at 1 and gray at 2 and 4: exactly one 'e', at 0 or 3
    cand = filter_candidates("geese", "?#???", {"hence", "ready", "tepee", "elbow", "under"})
    assert cand == {"elbow", "under"}

def test_filter_is_pure_and_monotone():
    words = frozenset({"crane", "raise", "stare"})
    out = filter_candidates("crane", "?????", words)
    assert isinstance(out, set)
    assert out <= words and len(out) <= len(words)

def test_filter_length_and_symbol_errors():
    with pytest.raises(LengthMismatch):
        filter_candidates("crane", "@@@", {"crane"})
    with pytest.raises(LengthMismatch):
        filter_candidates("crane", FeedbackPattern("@@@"), {"crane"})
    with pytest.raises(InvalidSymbol):
        filter_candidates("crane", "@@!@@", {"crane"})
    with pytest.raises(InvalidSymbol):
        filter_candidates("crane", FeedbackPattern("@x@@@"), {"crane", "crate"})

def test_filter_drops_other_lengths():
    assert filter_candidates("crane", "@@@@@", {"crane", "cranes"}) == {"crane"}

def test_filter_history_n6():
    words = ["letter","settle","little","tattle","better"]
    cand = filter_history(words, [("settle", "?@@@##")])
    assert "letter" in cand and "better" not in cand

def test_compile_constraint_bounds():
    rule = compile_constraint("sassy", "#@@??")
    assert rule.exact == {"s": 2, "y": 0}
    assert rule.at_least == {"a": 1}
    assert rule.admits("oasis") and not rule.admits("lasso")

# --- properties over a small word set ---
WORDS = ["sassy", "oasis", "level", "belle", "lemon", "crane", "eerie", "geese",
         "apple", "amber", "anger", "alter", "scoop", "cools"]

def test_true_pattern_always_keeps_target():
    pool = set(WORDS)
    for guess, target in itertools.product(WORDS, repeat=2):
        patt = compute_pattern(guess, target)
        out = filter_candidates(guess, patt, pool)
        assert target in out
        assert len(out) <= len(pool)

def test_filter_agrees_with_rescoring():
    pool = set(WORDS)
    for guess, target in itertools.product(WORDS, repeat=2):
        patt = score(guess, target)
        expected = {w for w in pool if score(guess, w) == patt}
        assert filter_candidates(guess, patt, pool) == expected

def test_hits_and_multiplicity_caps():
    for guess, target in itertools.product(WORDS, repeat=2):
        code = score(guess, target)
        assert code.count("@") == sum(g == t for g, t in zip(guess, target))
        for ch in set(guess):
            marked = sum(1 for g, c in zip(guess, code) if g == ch and c != "?")
            assert marked <= target.count(ch)

# --- guess validation ---
def test_validate_guess_n5():
    assert validate_guess("CRANE", 5) is True
    assert validate_guess(" zzzzz ", 5) is True
    assert validate_guess("cranes", 5) is False
    assert validate_guess("???", 5) is False
    assert validate_guess("cr4ne", 5) is False
    assert validate_guess(None, 5) is False

"""
Wordle-style scoring (feedback) for a single (guess, target) pair.

Conventions (canonical encoding, see FeedbackSymbol):
  - '@' : hit     = correct letter in the correct position (green)
  - '#' : present = letter occurs elsewhere in the target (yellow)
  - '?' : absent  = no further occurrence left in the target (gray)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all hits and counts the remaining (unmatched) letters
     from the target.
  2) Second pass marks presents only if the letter still has remaining count.

Marking hits before presents is what caps repeated letters correctly:
"sassy" against a target with a single 's' gets exactly one 's' marked.
"""

from __future__ import annotations

from collections import Counter

from .errors import LengthMismatch

HIT_CH = "@"
PRESENT_CH = "#"
ABSENT_CH = "?"


def score(guess: str, target: str) -> str:
    """
    Compute the canonical feedback code for `guess` against `target`.

    This is the hot kernel used by the ranker; it returns a plain string so
    it can be used directly as a bucket key.

    Raises:
      LengthMismatch if the two words differ in length.

    Examples:
      score("belle", "level") -> "?@###"
      score("lemon", "level") -> "@@???"
    """
    guess = guess.strip().lower()
    target = target.strip().lower()
    if len(guess) != len(target):
        raise LengthMismatch(len(guess), len(target), what="target length")

    n = len(guess)
    pattern = [ABSENT_CH] * n

    # Pass 1: hits, and the multiplicity of target letters left unmatched.
    remaining = Counter()
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            pattern[i] = HIT_CH
        else:
            remaining[t] += 1

    # Pass 2: presents, consuming one remaining instance each.
    for i, g in enumerate(guess):
        if pattern[i] == HIT_CH:
            continue
        if remaining[g] > 0:
            pattern[i] = PRESENT_CH
            remaining[g] -= 1

    return "".join(pattern)

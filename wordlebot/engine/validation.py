"""
Lightweight guess validation.

A guess is acceptable iff:
  - it is a string
  - it is alphabetic a–z only
  - it has exact length N

The session uses this when the player reports having played a word other
than the suggestion; the dictionary itself is not required to contain it,
since the real game's guess list can be larger than ours.
"""


def validate_guess(word: str, N: int) -> bool:
    """Return True if `word` is a valid guess per the rules above."""
    if not isinstance(word, str):
        return False

    w = word.strip().lower()
    return len(w) == N and w.isascii() and w.isalpha()

"""
Dictionary loading.

A Dictionary is the immutable set of words a session plays with. It is built
once from any source of raw words (a file, an HTTP download, a list in a
test) and never mutated afterwards; each game copies it into its own
candidate set.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List

import requests

from wordlebot.engine.errors import EmptyDictionary

log = logging.getLogger(__name__)

WORD_LENGTH = 5

# Public list of valid Wordle guesses (~14.8k five-letter words).
DICTIONARY_URL = (
    "https://gist.githubusercontent.com/dracos/dd0668f281e685bad51479e5acaadb93/raw/"
    "6bfa15d263d6d5b63840a8e5b64e04b382fdb079/valid-wordle-words.txt"
)


class Dictionary:
    """Immutable, deduplicated set of same-length lowercase words."""

    __slots__ = ("_words", "length")

    def __init__(self, words: FrozenSet[str], length: int):
        self._words = words
        self.length = length

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        # Sorted so anything derived from iteration order is reproducible.
        return iter(sorted(self._words))

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words, length={self.length})"


def load_dictionary(words: Iterable[str], length: int = WORD_LENGTH) -> Dictionary:
    """
    Normalize raw words into a Dictionary.

    Each entry is stripped and lowercased; blanks, non a–z tokens and words
    of another length are dropped; duplicates collapse.

    Raises:
      EmptyDictionary if no word survives.
    """
    kept = set()
    dropped = 0
    for raw in words:
        w = raw.strip().lower()
        if not w:
            continue
        if len(w) == length and w.isascii() and w.isalpha():
            kept.add(w)
        else:
            dropped += 1

    if not kept:
        raise EmptyDictionary(f"no usable {length}-letter words in the word source")

    if dropped:
        log.info("Dropped %d entries that are not %d-letter words", dropped, length)
    return Dictionary(frozenset(kept), length)


def fetch_words(url: str = DICTIONARY_URL, timeout: float = 30) -> List[str]:
    """Download a newline-separated word list. Raises requests.HTTPError on a bad status."""
    log.info("Fetching word list from %s", url)
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    return r.text.splitlines()


def read_words(p: Path | str) -> List[str]:
    """
    Read a UTF-8 word list, one entry per line, trailing CR/LF stripped.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_words(words: Iterable[str], p: Path | str) -> str:
    """Write words one per line with a trailing newline; return the path written."""
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(p)

"""
Feedback symbols and patterns.

One FeedbackPattern type serves both call sites:
  - FeedbackPattern.compute(guess, target): what the game WOULD show (Oracle).
  - FeedbackPattern.parse(text): what the player SAW (observed, trusted).

Canonical encoding is '@' hit, '#' present, '?' absent. The green/yellow/gray
letters 'G', 'Y', '-' are accepted as input aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

from .errors import InvalidSymbol, LengthMismatch
from .scoring import ABSENT_CH, HIT_CH, PRESENT_CH, score

_CANONICAL = frozenset((HIT_CH, PRESENT_CH, ABSENT_CH))


class FeedbackSymbol(str, Enum):
    HIT = HIT_CH
    PRESENT = PRESENT_CH
    ABSENT = ABSENT_CH


# Input character -> canonical character
_ALIASES: Dict[str, str] = {
    HIT_CH: HIT_CH, "G": HIT_CH, "g": HIT_CH,
    PRESENT_CH: PRESENT_CH, "Y": PRESENT_CH, "y": PRESENT_CH,
    ABSENT_CH: ABSENT_CH, "-": ABSENT_CH,
}


@dataclass(frozen=True)
class FeedbackPattern:
    """Positionally aligned feedback for one guess, stored as its canonical code."""
    code: str

    def __post_init__(self):
        for i, ch in enumerate(self.code):
            if ch not in _CANONICAL:
                raise InvalidSymbol(ch, i)

    @classmethod
    def parse(cls, text: str, length: Optional[int] = None) -> "FeedbackPattern":
        """
        Build a pattern from observed feedback typed by a player.

        Raises:
          LengthMismatch if `length` is given and the feedback has another length.
          InvalidSymbol on the first character outside the accepted alphabet.
        """
        text = text.strip()
        if length is not None and len(text) != length:
            raise LengthMismatch(length, len(text), what="feedback length")
        out = []
        for i, ch in enumerate(text):
            canon = _ALIASES.get(ch)
            if canon is None:
                raise InvalidSymbol(ch, i)
            out.append(canon)
        return cls("".join(out))

    @classmethod
    def compute(cls, guess: str, target: str) -> "FeedbackPattern":
        """Build the pattern the game would produce for `guess` against `target`."""
        return cls(score(guess, target))

    @classmethod
    def win(cls, length: int) -> "FeedbackPattern":
        return cls(HIT_CH * length)

    @property
    def symbols(self) -> Tuple[FeedbackSymbol, ...]:
        return tuple(FeedbackSymbol(ch) for ch in self.code)

    @property
    def is_win(self) -> bool:
        return bool(self.code) and all(ch == HIT_CH for ch in self.code)

    def __len__(self) -> int:
        return len(self.code)

    def __iter__(self) -> Iterator[FeedbackSymbol]:
        return iter(self.symbols)

    def __str__(self) -> str:
        return self.code


def compute_pattern(guess: str, target: str) -> FeedbackPattern:
    """Oracle: the FeedbackPattern the game would show for `guess` if the answer were `target`."""
    return FeedbackPattern.compute(guess, target)

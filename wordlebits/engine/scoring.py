"""
Wordle-style scoring (feedback) for a single (secret, guess) pair.

Conventions:
  - CORRECT (green,  'G') : correct letter in the correct position
  - PRESENT (yellow, 'Y') : correct letter in the wrong position
  - ABSENT  (gray,   '-') : letter not present (or present fewer times than guessed)

A pattern also has a base-3 integer code (position 0 is the most
significant trit, ABSENT=0, PRESENT=1, CORRECT=2). The code is what the
entropy strategies bucket on and what the precomputed table stores.

Algorithm (two-pass, canonical for Wordle):
  1) Count the secret's letters. First pass marks all exact matches and
     consumes one count per match.
  2) Second pass marks PRESENT only while the guessed letter still has a
     remaining count, consuming it; everything else is ABSENT.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Tuple

from .errors import FeedbackFormatError, InvalidLength
from .rules import WORD_LEN


class Tag(IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


_TAG_CHAR = {Tag.ABSENT: "-", Tag.PRESENT: "Y", Tag.CORRECT: "G"}

# Symbols accepted from a human reporting feedback for an unknown word.
_FEEDBACK_SYMBOLS = {
    "G": Tag.CORRECT, "g": Tag.CORRECT,
    "Y": Tag.PRESENT, "y": Tag.PRESENT,
    "X": Tag.ABSENT, "x": Tag.ABSENT,
}


@dataclass(frozen=True)
class Pattern:
    """Feedback for one guess: one tag per position."""

    tags: Tuple[Tag, ...]

    def __post_init__(self):
        # Plain ints (0/1/2) are accepted; comparisons below rely on Tag members.
        object.__setattr__(self, "tags", tuple(Tag(t) for t in self.tags))

    @property
    def code(self) -> int:
        code = 0
        for t in self.tags:
            code = code * 3 + int(t)
        return code

    @property
    def is_win(self) -> bool:
        return all(t is Tag.CORRECT for t in self.tags)

    @classmethod
    def from_code(cls, code: int, length: int = WORD_LEN) -> "Pattern":
        trits = []
        for _ in range(length):
            code, t = divmod(code, 3)
            trits.append(Tag(t))
        return cls(tuple(reversed(trits)))

    @classmethod
    def from_tags(cls, tags: Iterable[int]) -> "Pattern":
        return cls(tuple(tags))

    def __len__(self) -> int:
        return len(self.tags)

    def __iter__(self):
        return iter(self.tags)

    def __str__(self) -> str:
        return "".join(_TAG_CHAR[t] for t in self.tags)


def _marks(secret: str, guess: str) -> list:
    # Pass 1: exact matches consume their letter from the secret's multiset.
    remaining = Counter(secret)
    marks = [Tag.ABSENT] * len(guess)
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            marks[i] = Tag.CORRECT
            remaining[g] -= 1

    # Pass 2: misplaced letters, capped by what is left of each letter.
    for i, g in enumerate(guess):
        if marks[i] is Tag.CORRECT:
            continue
        if remaining[g] > 0:
            marks[i] = Tag.PRESENT
            remaining[g] -= 1
    return marks


def score(secret: str, guess: str, *, length: int = WORD_LEN) -> Pattern:
    """
    Compute the feedback `guess` receives against `secret`.

    Raises:
      InvalidLength if either word is not `length` letters long.

    Examples:
      str(score("allow", "llama")) -> "YGY--"
      str(score("crane", "crane")) -> "GGGGG"
    """
    if len(guess) != length:
        raise InvalidLength(guess, length)
    if len(secret) != length:
        raise InvalidLength(secret, length)
    return Pattern(tuple(_marks(secret, guess)))


def pattern_code(guess: str, target: str) -> int:
    """Base-3 code of score(target, guess); no length checks, hot path."""
    code = 0
    for t in _marks(target, guess):
        code = code * 3 + t
    return code


def parse_feedback(text: str, *, length: int = WORD_LEN) -> Pattern:
    """
    Parse feedback typed by a player, e.g. "xxgxy" or "GGGGX".

    G/g = correct, Y/y = present, X/x = absent. Anything else raises
    FeedbackFormatError.
    """
    text = text.strip()
    if len(text) != length:
        raise FeedbackFormatError(f"feedback {text!r} must have {length} symbols")
    tags = []
    for ch in text:
        try:
            tags.append(_FEEDBACK_SYMBOLS[ch])
        except KeyError:
            raise FeedbackFormatError(f"unknown feedback symbol {ch!r} in {text!r}") from None
    return Pattern(tuple(tags))

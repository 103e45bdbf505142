"""
Lightweight guess validation.

This module answers the question: "Can this string be played as a turn?"
A guess is playable iff:
  - it is a string
  - it has exact length N
  - it is lowercase a-z only (callers normalize case first)
  - it is in the dictionary, when one is given

A failed check never costs the player a turn; the session reports the
turn as INVALID and leaves its state untouched.
"""

from __future__ import annotations

from typing import Optional

from .dictionary import Dictionary
from .rules import ALPHABET, WORD_LEN

_VALID = frozenset(ALPHABET)


def validate_guess(word: object, N: int = WORD_LEN, dictionary: Optional[Dictionary] = None) -> bool:
    """
    Return True if `word` is a playable guess per the rules above.

    Args:
      word       : proposed guess
      N          : required word length
      dictionary : if given, the guess must also be one of its words
    """
    if not isinstance(word, str):
        return False

    # Shape/characters check
    if len(word) != N or not all(ch in _VALID for ch in word):
        return False

    if dictionary is not None:
        return word in dictionary
    return True

"""
Letter bit helpers.

A word's letter set is stored as a 26-bit int: bit i is set iff the
i-th letter of the alphabet appears anywhere in the word.
"""

from __future__ import annotations

from typing import Iterable, Iterator

_A = ord("a")


def letter_bit(ch: str) -> int:
    return 1 << (ord(ch) - _A)


def word_mask(letters: Iterable[str]) -> int:
    mask = 0
    for ch in letters:
        mask |= 1 << (ord(ch) - _A)
    return mask


def lowest_letter(mask: int) -> str:
    """Letter of the lowest set bit. `mask` must be non-zero."""
    if not mask:
        raise ValueError("empty letter mask")
    return chr(_A + (mask & -mask).bit_length() - 1)


def count_letters(mask: int) -> int:
    """Number of distinct letters in `mask`."""
    return bin(mask).count("1")


def iter_letters(mask: int) -> Iterator[str]:
    """Letters of `mask` in alphabetical order."""
    while mask:
        low = mask & -mask
        yield chr(_A + low.bit_length() - 1)
        mask ^= low

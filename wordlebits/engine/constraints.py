"""
Candidate filtering given the accumulated constraint state.

Given:
  - a Dictionary (words, letter masks, inverted index)
  - a ConstraintState updated with every turn's feedback

Produce:
  - the ascending list of word indices consistent with ALL feedback seen
    so far, stored back on `state.candidates`.

The first call seeds the list from the inverted index; every call then
re-validates what is held. Candidates only ever shrink.
"""

from __future__ import annotations

import logging
from typing import List

import numpy as np

from .dictionary import Dictionary
from .letters import count_letters, iter_letters, lowest_letter
from .state import ConstraintState

log = logging.getLogger(__name__)


def intersect_sorted(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Intersection of two ascending, duplicate-free index arrays.

    Each element of the shorter array is located in the longer one by
    binary search, so the result keeps ascending order.
    """
    a = np.asarray(a)
    b = np.asarray(b)
    if len(a) > len(b):
        a, b = b, a
    if len(a) == 0 or len(b) == 0:
        return a[:0]
    pos = np.minimum(np.searchsorted(b, a), len(b) - 1)
    return a[b[pos] == a]


def _seed(dictionary: Dictionary, state: ConstraintState) -> List[int]:
    required = state.required_mask
    if required:
        # Alphabetical order; every list is ascending so the merge stays sorted.
        log.debug("seeding from %d required letters", count_letters(required))
        seeded = dictionary.postings(lowest_letter(required))
        for ch in iter_letters(required & (required - 1)):
            seeded = intersect_sorted(seeded, dictionary.postings(ch))
        return seeded.tolist()

    keep = np.ones(len(dictionary), dtype=bool)
    for ch in sorted(state.excluded_letters):
        keep[dictionary.postings(ch)] = False
    return np.flatnonzero(keep).tolist()


def _fits(word: str, mask: int, state: ConstraintState, required: int, absent: int) -> bool:
    # Must contain all required letters
    if mask & required != required:
        return False
    # Must not contain letters known to be missing
    if mask & absent:
        return False

    for pos, ch in enumerate(word):
        green = state.green[pos]
        if green is not None and green != ch:
            return False
        if not state.solved[pos] and ch in state.yellow_exclusion[pos]:
            return False

    for ch, lo in state.min_count.items():
        if word.count(ch) < lo:
            return False
    for ch, hi in state.max_count.items():
        if word.count(ch) > hi:
            return False
    return True


def _mark_solved(dictionary: Dictionary, state: ConstraintState) -> None:
    """A position is solved once every candidate agrees on its letter."""
    if not state.candidates:
        return
    words = dictionary.words
    first = words[state.candidates[0]]
    for pos in range(state.length):
        if state.solved[pos]:
            continue
        ch = first[pos]
        if all(words[i][pos] == ch for i in state.candidates):
            state.solved[pos] = True


def recompute_candidates(dictionary: Dictionary, state: ConstraintState) -> List[int]:
    """
    Bring `state.candidates` in line with the current constraints.

    Returns the new candidate list (also stored on the state). Running it
    twice without new feedback returns the same list.
    """
    if state.candidates is None:
        state.candidates = _seed(dictionary, state)
        log.debug("seeded %d candidates", len(state.candidates))

    required = state.required_mask
    absent = state.absent_mask
    words = dictionary.words
    masks = dictionary.masks

    before = len(state.candidates)
    state.candidates = [
        i for i in state.candidates
        if _fits(words[i], masks[i], state, required, absent)
    ]
    _mark_solved(dictionary, state)

    log.debug("filtered candidates %d -> %d", before, len(state.candidates))
    return state.candidates

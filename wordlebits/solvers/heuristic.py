"""
Heuristic scorer (letter coverage with phase-adaptive weights).

Idea:
  Score each word of a shortlist as
      candidate bonus   (only if the word is still a candidate; grows as
                         the candidate set shrinks)
    + unplayed bonus    (once per distinct letter never seen in feedback)
    + yellow bonus      (once per distinct letter already known present)
    - repeat penalty    (k-th extra copy of a letter costs k * penalty)
  and pick the max; the first word reaching it wins.

Phases:
  progress = solved positions + distinct required letters
    early  (< 2) : gather information, shortlist = dictionary words that
                   avoid known-absent letters, unplayed letters dominate
    middle (< 4) : balanced
    late         : shortlist = candidates, candidate bonus dominates

Before scoring, the shortlist is narrowed to words containing the most
frequent unplayed letters (counted over candidates, unsolved positions
only), one letter at a time, skipping a letter whenever it would empty
the shortlist.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List

import numpy as np

from wordlebits.engine.constraints import intersect_sorted
from wordlebits.engine.letters import letter_bit, word_mask
from wordlebits.engine.rules import ALPHABET
from .base import BaseSolver, register


@dataclass(frozen=True)
class HeuristicWeights:
    candidate_bonus: float
    candidate_scale: float    # bonus *= 1 + scale / |candidates|
    unplayed_bonus: float
    yellow_bonus: float
    repeat_penalty: float

    def candidate_value(self, n_candidates: int) -> float:
        return self.candidate_bonus * (1.0 + self.candidate_scale / max(n_candidates, 1))


PHASES: Dict[str, HeuristicWeights] = {
    "early": HeuristicWeights(candidate_bonus=10, candidate_scale=0,
                              unplayed_bonus=30, yellow_bonus=10, repeat_penalty=15),
    "middle": HeuristicWeights(candidate_bonus=30, candidate_scale=10,
                               unplayed_bonus=20, yellow_bonus=30, repeat_penalty=10),
    "late": HeuristicWeights(candidate_bonus=60, candidate_scale=20,
                             unplayed_bonus=10, yellow_bonus=20, repeat_penalty=10),
}


def phase_of(state) -> str:
    progress = state.solved_count + len(state.required_letters)
    if progress < 2:
        return "early"
    if progress < 4:
        return "middle"
    return "late"


def weights_for(state) -> HeuristicWeights:
    return PHASES[phase_of(state)]


def score_word(word: str, *, is_candidate: bool, weights: HeuristicWeights,
               n_candidates: int, unplayed: int, required: int) -> float:
    s = weights.candidate_value(n_candidates) if is_candidate else 0.0
    copies: Counter = Counter()
    for ch in word:
        k = copies[ch]
        copies[ch] += 1
        if k:
            s -= weights.repeat_penalty * k
            continue
        bit = letter_bit(ch)
        if unplayed & bit:
            s += weights.unplayed_bonus
        if required & bit:
            s += weights.yellow_bonus
    return s


@register
class HeuristicSolver(BaseSolver):
    id = "heuristic"
    name = "Letter Coverage Heuristic"
    version = "1.0.0"

    # Stop narrowing once the shortlist is this small (0 = narrow fully).
    MIN_SHORTLIST = 0

    def _letter_freq(self, dictionary, state, candidates: List[int], unplayed: int) -> List[str]:
        """Unplayed letters by descending frequency over unsolved positions."""
        freq: Counter = Counter()
        words = dictionary.words
        open_pos = [p for p in range(state.length) if not state.solved[p]]
        for idx in candidates:
            w = words[idx]
            for p in open_pos:
                ch = w[p]
                if unplayed & letter_bit(ch):
                    freq[ch] += 1
        return sorted(freq, key=lambda ch: (-freq[ch], ch))

    def _shortlist(self, dictionary, state, candidates: List[int], phase: str) -> np.ndarray:
        if phase != "early":
            return np.asarray(candidates, dtype=np.int64)
        keep = np.ones(len(dictionary), dtype=bool)
        for ch in state.excluded_letters - state.required_letters:
            keep[dictionary.postings(ch)] = False
        return np.flatnonzero(keep)

    def _choose(self, dictionary, state, candidates):
        phase = phase_of(state)
        weights = PHASES[phase]
        required = state.required_mask
        unplayed = word_mask(ALPHABET) & ~(word_mask(state.excluded_letters) | required)

        shortlist = self._shortlist(dictionary, state, candidates, phase)
        for ch in self._letter_freq(dictionary, state, candidates, unplayed):
            if len(shortlist) <= self.MIN_SHORTLIST:
                break
            narrowed = intersect_sorted(shortlist, dictionary.postings(ch))
            if len(narrowed):
                shortlist = narrowed

        members = set(candidates)
        words = dictionary.words
        n = len(candidates)

        best_score = None
        best_idx = candidates[0]
        for idx in shortlist.tolist():
            s = score_word(words[idx], is_candidate=idx in members, weights=weights,
                           n_candidates=n, unplayed=unplayed, required=required)
            if best_score is None or s > best_score:
                best_score = s
                best_idx = idx
        return best_idx

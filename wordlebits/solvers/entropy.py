"""
Entropy Solver (expected information gain), exact.

Main idea:
  - For each candidate g (as a hypothetical guess), partition the CURRENT
    candidates (g included) by the feedback pattern g would receive.
  - Compute Shannon entropy H = -sum(p * log2 p) over those buckets,
    p = bucket size / number of candidates; pick g with max H.
Tie-break:
  - first candidate (ascending word index) reaching the maximum.

Guesses come from the candidate set only, so H <= log2(|candidates|).
Cost is O(|candidates|^2 * L) pattern computations; see entropy_fast for
the table-driven variant.
"""

from __future__ import annotations

from collections import Counter
from math import log2
from typing import List

from wordlebits.engine.scoring import pattern_code
from .base import BaseSolver, register


def guess_entropy(guess: str, targets: List[str]) -> float:
    """Entropy in bits of the pattern distribution `guess` induces on `targets`."""
    n = len(targets)
    if n <= 1:
        return 0.0

    # localize for speed
    _code = pattern_code
    buckets = Counter(_code(guess, t) for t in targets)

    H = 0.0
    for c in buckets.values():
        p = c / n
        H -= p * log2(p)
    return H


@register
class EntropySolver(BaseSolver):
    id = "entropy"
    name = "Entropy (Expected Information Gain)"
    version = "1.0.0"

    def entropies(self, dictionary, candidates: List[int]) -> List[float]:
        words = dictionary.words
        targets = [words[i] for i in candidates]
        return [guess_entropy(g, targets) for g in targets]

    def _choose(self, dictionary, state, candidates):
        best_H = None
        best_idx = candidates[0]
        for idx, H in zip(candidates, self.entropies(dictionary, candidates)):
            if best_H is None or H > best_H:
                best_H, best_idx = H, idx
        return best_idx

"""
Entropy Solver, precomputed-table variant.

Same objective as `entropy`, evaluated from Dictionary.pattern_table:

    H(g) = log2(N) - (1/N) * sum_k count_k * log2(count_k)

where count_k is how many of the N candidates give pattern k for guess g.
Bucket counts come from numpy.bincount over the table rows restricted to
the candidate columns; count*log2(count) is read from Dictionary.klog2k.

Rows are processed in chunks so the (rows x N) slice stays small even for
the full dictionary. Ties resolve to the first candidate (np.argmax).
"""

from __future__ import annotations

from typing import List

import numpy as np

from .base import BaseSolver, register


def table_entropies(dictionary, candidates: List[int], *, chunk_rows: int = 256) -> np.ndarray:
    """Entropy of every candidate as a guess against all candidates."""
    table = dictionary.pattern_table
    klog2k = dictionary.klog2k
    n = len(candidates)
    if n <= 1:
        return np.zeros(n, dtype=np.float64)

    cols = np.asarray(candidates, dtype=np.int64)
    n_codes = 3 ** dictionary.length
    out = np.empty(n, dtype=np.float64)

    for start in range(0, n, chunk_rows):
        rows = cols[start:start + chunk_rows]
        codes = table[np.ix_(rows, cols)].astype(np.int64)
        # Offset each row into its own block of n_codes bins.
        codes += (np.arange(len(rows), dtype=np.int64) * n_codes)[:, None]
        counts = np.bincount(codes.ravel(), minlength=len(rows) * n_codes)
        counts = counts.reshape(len(rows), n_codes)
        out[start:start + len(rows)] = klog2k[counts].sum(axis=1)

    return np.log2(n) - out / n


@register
class FastEntropySolver(BaseSolver):
    id = "entropy_fast"
    name = "Entropy (precomputed table)"
    version = "1.0.0"

    requires_table = True
    CHUNK_ROWS = 256

    def _choose(self, dictionary, state, candidates):
        H = table_entropies(dictionary, candidates, chunk_rows=self.CHUNK_ROWS)
        return candidates[int(np.argmax(H))]

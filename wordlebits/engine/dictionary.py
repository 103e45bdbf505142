"""
Load-once word index.

A Dictionary owns the word strings; every other component refers to a
word by its integer index into `Dictionary.words`.

Built at load time:
  - masks:     per-word 26-bit letter-presence mask
  - inv_index: letter -> ascending numpy array of indices of words
               containing that letter (sorted merge relies on the order)

Built on request (precompute_entropy_table):
  - pattern_table: (N, N) array, pattern_table[g, t] = code of the
                   feedback guess g receives against target t
  - klog2k:        k * log2(k) for k in [0, N] (0 for k = 0)

The table costs O(N^2) memory and time, so only the fast entropy
strategy asks for it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import numpy as np
from tqdm import tqdm

from wordlebits.datasets.io import read_lines

from .errors import InvalidCharacter, MalformedEntry
from .letters import word_mask
from .rules import ALPHABET, WORD_LEN

log = logging.getLogger(__name__)

_VALID = frozenset(ALPHABET)


def _table_dtype(length: int):
    top = 3 ** length
    if top <= 256:
        return np.uint8
    if top <= 65536:
        return np.uint16
    return np.uint32


class Dictionary:
    """Immutable word list plus the indexes the filter and solvers need."""

    def __init__(self, words: List[str], *, length: int = WORD_LEN):
        self.length = length
        self._words = tuple(words)
        self._masks = tuple(word_mask(w) for w in self._words)
        self._positions: Dict[str, int] = {}
        for i, w in enumerate(self._words):
            self._positions.setdefault(w, i)

        buckets: Dict[str, List[int]] = {ch: [] for ch in ALPHABET}
        for i, w in enumerate(self._words):
            for ch in set(w):
                buckets[ch].append(i)
        # Indices are appended in ascending order already; arrays are read-only.
        self._inv_index: Dict[str, np.ndarray] = {}
        for ch, idxs in buckets.items():
            arr = np.asarray(idxs, dtype=np.int64)
            arr.setflags(write=False)
            self._inv_index[ch] = arr

        self._pattern_table: Optional[np.ndarray] = None
        self._klog2k: Optional[np.ndarray] = None

    # ---- construction ----

    @classmethod
    def load(cls, source: Iterable[str], *, length: int = WORD_LEN) -> "Dictionary":
        """
        Parse an ordered sequence of words.

        Each record must be exactly `length` lowercase letters; surrounding
        line terminators are ignored. The first bad record aborts the load.

        Raises:
          MalformedEntry   : record length != length
          InvalidCharacter : character outside a-z
        """
        words: List[str] = []
        for line_no, raw in enumerate(source, start=1):
            rec = raw.rstrip("\r\n")
            if len(rec) != length:
                raise MalformedEntry(line_no, rec, length)
            for ch in rec:
                if ch not in _VALID:
                    raise InvalidCharacter(line_no, rec, ch)
            words.append(rec)

        log.info("loaded %d words of length %d", len(words), length)
        return cls(words, length=length)

    @classmethod
    def from_file(cls, path: Path | str, *, length: int = WORD_LEN) -> "Dictionary":
        """Load a UTF-8 word-per-line file."""
        log.debug("reading dictionary from %s", path)
        return cls.load(read_lines(path), length=length)

    # ---- lookups ----

    @property
    def words(self) -> tuple:
        return self._words

    @property
    def masks(self) -> tuple:
        return self._masks

    def word(self, idx: int) -> str:
        return self._words[idx]

    def index_of(self, word: str) -> int:
        """Index of the first occurrence of `word`; KeyError if absent."""
        return self._positions[word]

    def __contains__(self, word: object) -> bool:
        return word in self._positions

    def __len__(self) -> int:
        return len(self._words)

    def postings(self, ch: str) -> np.ndarray:
        """Ascending indices of words containing letter `ch`."""
        return self._inv_index[ch]

    # ---- entropy table ----

    @property
    def has_pattern_table(self) -> bool:
        return self._pattern_table is not None

    @property
    def pattern_table(self) -> Optional[np.ndarray]:
        return self._pattern_table

    @property
    def klog2k(self) -> Optional[np.ndarray]:
        return self._klog2k

    def _letter_matrix(self) -> np.ndarray:
        n = len(self._words)
        if n == 0:
            return np.zeros((0, self.length), dtype=np.uint8)
        raw = np.frombuffer("".join(self._words).encode("ascii"), dtype=np.uint8)
        return raw.reshape(n, self.length) - ord("a")

    def _pattern_row(self, letters: np.ndarray, guess: np.ndarray, weights: np.ndarray) -> np.ndarray:
        """
        Codes for one guess against every target, vectorized over targets.

        A non-green guess position i holding letter c is PRESENT iff its
        rank among non-green guess positions j <= i with letter c does not
        exceed the number of non-green target positions holding c. That is
        exactly what the left-to-right second pass of `score` produces.
        """
        greens = letters == guess[None, :]
        free = ~greens
        present = np.zeros_like(greens)
        for i in range(self.length):
            c = guess[i]
            avail = ((letters == c) & free).sum(axis=1)
            rank = ((guess[: i + 1] == c)[None, :] & free[:, : i + 1]).sum(axis=1)
            present[:, i] = free[:, i] & (rank <= avail)
        trits = greens.astype(np.int64) * 2 + present.astype(np.int64)
        return trits @ weights

    def precompute_entropy_table(self, *, progress: bool = False) -> None:
        """
        Fill the all-pairs pattern table and the k*log2(k) lookup.

        Safe to call more than once; later calls are no-ops.
        """
        if self._pattern_table is not None:
            return

        n = len(self._words)
        log.info("building %dx%d pattern table", n, n)
        letters = self._letter_matrix()
        weights = np.array([3 ** (self.length - 1 - i) for i in range(self.length)], dtype=np.int64)

        table = np.empty((n, n), dtype=_table_dtype(self.length))
        rows = range(n)
        if progress:
            rows = tqdm(rows, desc="Patterns", unit="word", ncols=80)
        for g in rows:
            table[g] = self._pattern_row(letters, letters[g], weights)
        table.setflags(write=False)

        k = np.arange(n + 1, dtype=np.float64)
        klog2k = np.zeros(n + 1, dtype=np.float64)
        klog2k[1:] = k[1:] * np.log2(k[1:])
        klog2k.setflags(write=False)

        self._pattern_table = table
        self._klog2k = klog2k
        log.info("pattern table ready (%.1f MiB)", table.nbytes / (1 << 20))

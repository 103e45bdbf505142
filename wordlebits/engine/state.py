"""
Everything learned from feedback so far in one game.

A ConstraintState is owned by a single session. `apply_feedback` folds
one turn's pattern in; `wordlebits.engine.constraints.recompute_candidates`
turns the accumulated constraints into the candidate list.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from .errors import InvalidLength
from .letters import word_mask
from .rules import WORD_LEN
from .scoring import Pattern, Tag


@dataclass
class ConstraintState:
    length: int = WORD_LEN
    green: List[Optional[str]] = field(default=None)
    yellow_exclusion: List[Set[str]] = field(default=None)
    required_letters: Set[str] = field(default_factory=set)
    excluded_letters: Set[str] = field(default_factory=set)
    min_count: Dict[str, int] = field(default_factory=dict)
    max_count: Dict[str, int] = field(default_factory=dict)
    solved: List[bool] = field(default=None)
    # None until the first filter pass; ascending word indices afterwards.
    candidates: Optional[List[int]] = None

    def __post_init__(self):
        if self.green is None:
            self.green = [None] * self.length
        if self.yellow_exclusion is None:
            self.yellow_exclusion = [set() for _ in range(self.length)]
        if self.solved is None:
            self.solved = [False] * self.length

    @property
    def required_mask(self) -> int:
        return word_mask(self.required_letters)

    @property
    def absent_mask(self) -> int:
        """Letters known to be missing from the secret entirely."""
        return word_mask(self.excluded_letters - self.required_letters)

    @property
    def solved_count(self) -> int:
        return sum(self.solved)

    def apply_feedback(self, guess: str, pattern: Pattern) -> None:
        """
        Fold one turn of feedback into the state.

        A letter marked ABSENT is only excluded outright when the same turn
        did not mark it CORRECT/PRESENT elsewhere; in that case the turn
        pins the letter's count exactly instead.
        """
        if len(guess) != self.length:
            raise InvalidLength(guess, self.length)
        if len(pattern) != self.length:
            raise InvalidLength(str(pattern), self.length)

        seen: Counter = Counter()
        absent: Set[str] = set()
        for i, (ch, tag) in enumerate(zip(guess, pattern)):
            if tag is Tag.CORRECT:
                self.green[i] = ch
                self.required_letters.add(ch)
                seen[ch] += 1
            elif tag is Tag.PRESENT:
                self.yellow_exclusion[i].add(ch)
                self.required_letters.add(ch)
                seen[ch] += 1
            else:
                # The secret's letter here differs, or this tile would be green.
                self.yellow_exclusion[i].add(ch)
                absent.add(ch)

        for ch in absent:
            if seen[ch]:
                self.max_count[ch] = min(seen[ch], self.max_count.get(ch, seen[ch]))
            else:
                self.excluded_letters.add(ch)

        for ch, n in seen.items():
            if n > self.min_count.get(ch, 0):
                self.min_count[ch] = n

        for i, ch in enumerate(self.green):
            if ch is not None:
                self.solved[i] = True

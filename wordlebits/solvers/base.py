from __future__ import annotations

import random
from typing import Dict, List, Optional, Type

from wordlebits.engine.constraints import recompute_candidates
from wordlebits.engine.dictionary import Dictionary
from wordlebits.engine.errors import EmptyCandidateSet, MissingPrecomputation
from wordlebits.engine.state import ConstraintState

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    # Set on strategies that read Dictionary.pattern_table.
    requires_table = False

    def __init__(self, rng: Optional[random.Random] = None):
        # Injected so tie-free strategies stay deterministic and tests can seed.
        self.rng = rng if rng is not None else random.Random()

    def select(self, dictionary: Dictionary, state: ConstraintState) -> int:
        """
        Return the index of the recommended next guess.

        Raises:
          MissingPrecomputation : strategy needs the pattern table, none built
          EmptyCandidateSet     : the feedback so far contradicts itself
        """
        if self.requires_table and not dictionary.has_pattern_table:
            raise MissingPrecomputation(
                f"solver {self.id!r} needs Dictionary.precompute_entropy_table()")

        candidates = state.candidates
        if candidates is None:
            candidates = recompute_candidates(dictionary, state)
        if not candidates:
            raise EmptyCandidateSet("no dictionary word fits the feedback so far")
        if len(candidates) == 1:
            return candidates[0]
        return self._choose(dictionary, state, candidates)

    def _choose(self, dictionary: Dictionary, state: ConstraintState,
                candidates: List[int]) -> int:
        raise NotImplementedError("Override in subclass")

"""
Positional pickers.

Strategy:
  - Return the first / middle / last / a uniformly random element of the
    CURRENT candidate list (ascending word index order).

Notes:
  - Baselines to verify the pipeline; they make no attempt to gain
    information.
  - The random picker refuses to run without an injected rng; a seeded
    random.Random makes it reproducible.
"""

from __future__ import annotations

from .base import BaseSolver, register


@register
class FirstSolver(BaseSolver):
    id = "first"
    name = "First Candidate"
    version = "1.0.0"

    def _choose(self, dictionary, state, candidates):
        return candidates[0]


@register
class MiddleSolver(BaseSolver):
    id = "middle"
    name = "Middle Candidate"
    version = "1.0.0"

    def _choose(self, dictionary, state, candidates):
        return candidates[len(candidates) // 2]


@register
class LastSolver(BaseSolver):
    id = "last"
    name = "Last Candidate"
    version = "1.0.0"

    def _choose(self, dictionary, state, candidates):
        return candidates[-1]


@register
class RandomSolver(BaseSolver):
    id = "random"
    name = "Random Candidate"
    version = "1.0.0"

    def __init__(self, rng=None):
        if rng is None:
            raise ValueError("random solver needs an injected random.Random")
        super().__init__(rng=rng)

    def _choose(self, dictionary, state, candidates):
        return candidates[self.rng.randrange(len(candidates))]

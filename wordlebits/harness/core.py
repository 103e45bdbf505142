"""
Experiment harness core primitives.

- run_case:  play a single puzzle (one hidden secret) with a given solver.
- run_batch: play many puzzles in sequence (optionally a sample prefix).
- summarize: win rate and average turns over a batch.

Each game runs through a GameSession, so the turn limit and the
score -> update -> filter pipeline live in one place. These functions are
UI-agnostic so they can be reused by a CLI app, a notebook or tests.
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, List, Optional

from wordlebits.engine import Dictionary, GameSession, MAX_TURNS, Status


def run_case(
        solver,
        secret: str,
        *,
        dictionary: Dictionary,
        first_guess: Optional[str] = None,
        max_turns: int = MAX_TURNS,
) -> Dict:
    """
    Execute one game until the solver wins or the turn budget is exhausted.

    Args:
        solver:      a BaseSolver; its injected rng drives any randomness
        secret:      the hidden word for this case
        dictionary:  shared word index (with pattern table if the solver needs it)
        first_guess: fixed opening word; the solver picks it when None
        max_turns:   turn budget (Wordle: 6)

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float, solver time only),
            history (list[(guess, pattern)]), candidates (list[int], remaining
            after each turn), answer (str)
    """
    session = GameSession(dictionary, secret, max_turns=max_turns)
    history = []
    remaining = []
    total_ms = 0.0

    guess = first_guess
    while not session.over:
        if guess is None:
            t0 = time.perf_counter_ns()
            guess = session.suggest(solver)
            total_ms += (time.perf_counter_ns() - t0) / 1_000_000.0

        result = session.play(guess)
        if result.status is Status.INVALID:
            raise ValueError(f"solver {solver.id!r} proposed unplayable guess {guess!r}")
        history.append((guess, str(result.pattern)))
        remaining.append(len(result.candidates))
        guess = None

    return {
        "success": session.status is Status.WIN,
        "guesses": session.turn,
        "time_ms": total_ms,
        "history": history,
        "candidates": remaining,
        "answer": secret,
    }


def run_batch(
        solver,
        dictionary: Dictionary,
        *,
        secrets: Optional[Iterable[str]] = None,
        first_guess: Optional[str] = None,
        max_turns: int = MAX_TURNS,
        sample: Optional[int] = None,
        progress=None,
) -> List[Dict]:
    """
    Run many cases back-to-back. Secrets default to every dictionary word;
    if `sample` is provided only the first K are played.

    `progress` wraps the iterable of secrets (e.g. tqdm) when given.
    """
    pool = list(secrets) if secrets is not None else list(dictionary.words)
    if sample is not None:
        pool = pool[:sample]

    it = progress(pool) if progress is not None else pool
    out: List[Dict] = []
    for secret in it:
        r = run_case(solver, secret, dictionary=dictionary,
                     first_guess=first_guess, max_turns=max_turns)
        r["solver_id"] = solver.id
        out.append(r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """Win rate in percent and average turns, losses counted at the budget."""
    n = len(results)
    if not n:
        return {"games": 0, "wins": 0, "win_rate": 0.0, "avg_turns": 0.0}
    wins = sum(1 for r in results if r["success"])
    turns = sum(r["guesses"] for r in results)
    return {
        "games": n,
        "wins": wins,
        "win_rate": 100.0 * wins / n,
        "avg_turns": turns / n,
    }

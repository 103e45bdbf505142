"""
One game of Wordle: a secret, its constraint state and a turn counter.

Two modes:
  - secret mode:  the session knows the secret and scores each guess.
  - unknown mode: secret is None; the caller reports the feedback the real
                  game showed (e.g. "xxgxy") alongside each guess.

Every accepted turn runs the same pipeline:
  score -> ConstraintState.apply_feedback -> recompute_candidates

A malformed guess yields Status.INVALID and leaves the turn counter and
the state untouched; feedback of the wrong length raises InvalidLength,
also before anything changes. WIN and LOSS are terminal; playing again
raises GameOver.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from .constraints import recompute_candidates
from .dictionary import Dictionary
from .errors import GameOver, InvalidLength, WordleError
from .rules import MAX_TURNS
from .scoring import Pattern, parse_feedback, score
from .state import ConstraintState
from .validation import validate_guess

log = logging.getLogger(__name__)


class Status(Enum):
    INVALID = "invalid"
    NEXT_TURN = "next_turn"
    WIN = "win"
    LOSS = "loss"

    @property
    def terminal(self) -> bool:
        return self in (Status.WIN, Status.LOSS)


@dataclass(frozen=True)
class TurnResult:
    guess: str
    status: Status
    turn: int                       # turns consumed after this call
    pattern: Optional[Pattern] = None
    candidates: tuple = ()          # remaining candidate indices


class GameSession:
    def __init__(self, dictionary: Dictionary, secret: Optional[str] = None, *,
                 max_turns: int = MAX_TURNS, strict: bool = False):
        """
        Args:
          dictionary : shared, read-only word index
          secret     : hidden word, or None for unknown-word mode
          max_turns  : turn budget (Wordle: 6)
          strict     : if True, guesses must be dictionary words
        """
        if secret is not None:
            secret = secret.strip().lower()
            if len(secret) != dictionary.length:
                raise InvalidLength(secret, dictionary.length)
        self.dictionary = dictionary
        self.secret = secret
        self.max_turns = max_turns
        self.strict = strict
        self.state = ConstraintState(length=dictionary.length)
        self.turn = 0
        self.status = Status.NEXT_TURN
        self.history: List[TurnResult] = []

    @property
    def over(self) -> bool:
        return self.status.terminal

    @property
    def candidates(self) -> List[int]:
        if self.state.candidates is None:
            recompute_candidates(self.dictionary, self.state)
        return self.state.candidates

    def candidate_words(self) -> List[str]:
        words = self.dictionary.words
        return [words[i] for i in self.candidates]

    def play(self, guess: str, feedback: Union[str, Pattern, None] = None) -> TurnResult:
        """
        Play one turn.

        In unknown-word mode `feedback` is required (text over G/Y/X in
        either case, or a Pattern); in secret mode it must be omitted.
        """
        if self.over:
            raise GameOver(f"game already ended with {self.status.value} after {self.turn} turns")

        guess = guess.strip().lower()
        dictionary = self.dictionary
        if not validate_guess(guess, dictionary.length, dictionary if self.strict else None):
            log.warning("invalid guess %r on turn %d", guess, self.turn + 1)
            return TurnResult(guess, Status.INVALID, self.turn,
                              candidates=tuple(self.state.candidates or ()))

        if self.secret is None:
            if feedback is None:
                raise WordleError("unknown-word mode needs the feedback for each guess")
            pattern = feedback
            if not isinstance(pattern, Pattern):
                pattern = parse_feedback(feedback, length=dictionary.length)
        else:
            if feedback is not None:
                raise WordleError("feedback is computed from the secret in secret mode")
            pattern = score(self.secret, guess, length=dictionary.length)

        if len(pattern) != dictionary.length:
            raise InvalidLength(str(pattern), dictionary.length)

        self.state.apply_feedback(guess, pattern)
        self.turn += 1
        cands = recompute_candidates(dictionary, self.state)

        if pattern.is_win:
            self.status = Status.WIN
        elif self.turn >= self.max_turns:
            self.status = Status.LOSS
        else:
            self.status = Status.NEXT_TURN

        result = TurnResult(guess, self.status, self.turn, pattern, tuple(cands))
        self.history.append(result)
        log.debug("turn %d: %s %s -> %d candidates (%s)",
                  self.turn, guess, pattern, len(cands), self.status.value)
        return result

    def suggest(self, solver) -> str:
        """Ask `solver` for the next guess given everything learned so far."""
        return self.dictionary.word(solver.select(self.dictionary, self.state))

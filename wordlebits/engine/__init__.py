from .scoring import Pattern, Tag, score, pattern_code, parse_feedback
from .dictionary import Dictionary
from .state import ConstraintState
from .constraints import recompute_candidates, intersect_sorted
from .validation import validate_guess
from .game import GameSession, Status, TurnResult
from .rules import WORD_LEN, MAX_TURNS

__all__ = [
    "Pattern", "Tag", "score", "pattern_code", "parse_feedback",
    "Dictionary", "ConstraintState", "recompute_candidates", "intersect_sorted",
    "validate_guess", "GameSession", "Status", "TurnResult", "WORD_LEN", "MAX_TURNS",
]

"""
Game constants shared by every layer.

Kept in one place so the harness, the session and the solvers agree on
the word length and the turn budget.
"""

import string

WORD_LEN = 5
MAX_TURNS = 6
ALPHABET = string.ascii_lowercase

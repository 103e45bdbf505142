"""
Typed errors raised by the engine and the solvers.

Every failure is deterministic for a given input, so nothing here is
retried; callers get the exception and decide what to do.
"""

from __future__ import annotations


class WordleError(Exception):
    """Base class for everything this package raises on purpose."""


class DictionaryError(WordleError):
    """A word list record could not be loaded."""

    def __init__(self, line: int, record: str, message: str):
        self.line = line
        self.record = record
        super().__init__(f"line {line}: {message}: {record!r}")


class MalformedEntry(DictionaryError):
    def __init__(self, line: int, record: str, expected_len: int):
        super().__init__(line, record, f"expected {expected_len} letters, got {len(record)}")


class InvalidCharacter(DictionaryError):
    def __init__(self, line: int, record: str, char: str):
        self.char = char
        super().__init__(line, record, f"invalid character {char!r}")


class InvalidLength(WordleError):
    """A guess (or secret) does not have the dictionary's word length."""

    def __init__(self, word: str, expected_len: int):
        self.word = word
        self.expected_len = expected_len
        super().__init__(f"{word!r} has length {len(word)}, expected {expected_len}")


class FeedbackFormatError(WordleError):
    """Externally supplied feedback text contains an unknown symbol."""


class EmptyCandidateSet(WordleError):
    """No dictionary word fits the accumulated feedback."""


class MissingPrecomputation(WordleError):
    """A strategy needs the pattern table but the dictionary has none."""


class GameOver(WordleError):
    """A turn was played on a session that already won or lost."""

import pytest

from wordlebits.engine import Dictionary

WORDS = [
    "salet", "crane", "trace", "least", "allow", "llama", "allot", "lilac", "eerie", "level",
    "belle", "lemon", "cools", "scoop", "raise", "stare", "cared", "racer", "adieu", "alone",
    "slate", "roate", "arise", "tread", "grate", "irate", "great", "react", "carte", "caret",
    "cater", "heart", "earth", "hater", "pound", "mound", "round", "sound", "wound", "bound",
    "found", "hound", "lumpy", "milky", "smile", "dumpy", "jumpy", "bumpy", "nymph", "vivid",
]


@pytest.fixture
def words():
    return list(WORDS)


@pytest.fixture
def dictionary():
    return Dictionary.load(WORDS)


@pytest.fixture
def table_dictionary():
    d = Dictionary.load(WORDS)
    d.precompute_entropy_table()
    return d


@pytest.fixture
def tiny():
    return Dictionary.load(["salet", "crane", "trace", "least"])

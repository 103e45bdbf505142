import pytest

from wordlebits.engine import Pattern, Tag, parse_feedback, pattern_code, score, validate_guess
from wordlebits.engine.errors import FeedbackFormatError, InvalidLength


# --- N=5 golden tests (duplicates + placements), score(secret, guess) ---
@pytest.mark.parametrize("secret,guess,expected", [
    ("level", "belle", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("level", "lemon", "GG---"),
    ("scoop", "cools", "YYG-Y"),
    ("scoop", "scoop", "GGGGG"),
    ("crane", "crane", "GGGGG"),
    ("crane", "raise", "YY--G"),
    ("crane", "stare", "--GYG"),
    # no repeated letters
    ("crane", "salet", "-Y-Y-"),
    # guess repeats a letter the secret has once
    ("crane", "eerie", "--Y-G"),
    # secret repeats a letter the guess has once... and the reverse
    ("allot", "lilac", "Y-GY-"),
    ("allow", "llama", "YGY--"),
])
def test_score_n5_golden(secret, guess, expected):
    assert str(score(secret, guess)) == expected


def test_score_n6_sample():
    assert str(score("letter", "settle", length=6)) == "-GGGYY"


def test_score_rejects_wrong_length():
    with pytest.raises(InvalidLength):
        score("crane", "cranes")
    with pytest.raises(InvalidLength):
        score("cran", "crane")


def test_guess_equal_to_secret_is_a_win():
    p = score("vivid", "vivid")
    assert p.is_win
    assert all(t is Tag.CORRECT for t in p)


def test_pattern_codes():
    assert score("crane", "crane").code == 242
    assert score("vivid", "crane").code == 0
    # Y G Y - -  ->  1*81 + 2*27 + 1*9
    assert score("allow", "llama").code == 144
    assert Pattern.from_code(144) == score("allow", "llama")
    assert pattern_code("llama", "allow") == 144


def test_pattern_coerces_plain_ints():
    p = Pattern((2, 1, 0, 2, 2))
    assert p.tags == (Tag.CORRECT, Tag.PRESENT, Tag.ABSENT, Tag.CORRECT, Tag.CORRECT)
    assert all(type(t) is Tag for t in p)
    assert Pattern((2,) * 5).is_win
    assert Pattern((2, 1, 0, 2, 2)) == parse_feedback("gyxgg")
    with pytest.raises(ValueError):
        Pattern((3, 0, 0, 0, 0))


def test_parse_feedback_accepts_both_cases():
    assert str(parse_feedback("xxgxy")) == "--G-Y"
    assert str(parse_feedback("GGGGX")) == "GGGG-"
    assert parse_feedback("yYgGx") == Pattern.from_tags([1, 1, 2, 2, 0])


@pytest.mark.parametrize("bad", ["xxgxz", "xxgx", "xx gxy", "-GYY-"])
def test_parse_feedback_rejects_unknown_symbols(bad):
    with pytest.raises(FeedbackFormatError):
        parse_feedback(bad)


def test_validate_guess(dictionary):
    assert validate_guess("crane") is True
    assert validate_guess("CRANE") is False
    assert validate_guess("cranes") is False
    assert validate_guess("cr4ne") is False
    assert validate_guess(12345) is False
    assert validate_guess("crane", dictionary=dictionary) is True
    assert validate_guess("zzzzz", dictionary=dictionary) is False

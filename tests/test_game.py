import pytest

from wordlebits.engine import GameSession, Pattern, Status, Tag
from wordlebits.engine.errors import FeedbackFormatError, GameOver, InvalidLength, WordleError


def test_scenario_win_on_second_turn(tiny):
    game = GameSession(tiny, "crane")

    r = game.play("salet")
    assert str(r.pattern) == "-Y-Y-"
    assert r.status is Status.NEXT_TURN
    assert [tiny.word(i) for i in r.candidates] == ["crane"]

    r = game.play("crane")
    assert r.status is Status.WIN
    assert game.turn == 2
    assert game.over


def test_invalid_guess_does_not_consume_a_turn(dictionary):
    game = GameSession(dictionary, "crane")
    for bad in ["cranes", "cr4ne", ""]:
        r = game.play(bad)
        assert r.status is Status.INVALID
        assert r.pattern is None
    assert game.turn == 0
    assert game.state.candidates is None
    assert game.play("salet").turn == 1


def test_strict_mode_requires_dictionary_words(dictionary):
    game = GameSession(dictionary, "crane", strict=True)
    assert game.play("zzzzz").status is Status.INVALID
    assert GameSession(dictionary, "crane").play("zzzzz").status is Status.NEXT_TURN


def test_guess_is_normalized(dictionary):
    game = GameSession(dictionary, "crane")
    assert game.play("  CRANE ").status is Status.WIN


def test_loss_after_six_turns(dictionary):
    game = GameSession(dictionary, "vivid")
    guesses = ["salet", "crane", "round", "lumpy", "milky", "nymph"]
    statuses = [game.play(g).status for g in guesses]
    assert statuses == [Status.NEXT_TURN] * 5 + [Status.LOSS]
    assert game.turn == 6
    assert game.candidate_words() == ["vivid"]
    with pytest.raises(GameOver):
        game.play("vivid")


def test_no_play_after_win(tiny):
    game = GameSession(tiny, "crane")
    game.play("crane")
    with pytest.raises(GameOver):
        game.play("salet")


def test_unknown_word_mode(dictionary):
    game = GameSession(dictionary)
    r = game.play("salet", "xYxYx")
    assert r.status is Status.NEXT_TURN
    assert game.candidate_words() == ["crane"]
    assert game.play("crane", "GGGGG").status is Status.WIN


def test_unknown_word_mode_errors(dictionary):
    game = GameSession(dictionary)
    with pytest.raises(WordleError):
        game.play("salet")
    with pytest.raises(FeedbackFormatError):
        game.play("salet", "xyxyq")
    assert game.turn == 0
    with pytest.raises(WordleError):
        GameSession(dictionary, "crane").play("salet", "xxxxx")


def test_short_pattern_leaves_session_untouched(dictionary):
    game = GameSession(dictionary)
    with pytest.raises(InvalidLength):
        game.play("salet", Pattern((Tag.ABSENT,) * 4))
    assert game.turn == 0
    assert game.state.candidates is None
    assert game.state.excluded_letters == set()
    assert game.play("salet", "xYxYx").turn == 1


def test_integer_tags_are_read_as_tags(dictionary):
    game = GameSession(dictionary)
    r = game.play("crane", Pattern((2, 2, 2, 2, 2)))
    assert r.status is Status.WIN
    assert game.state.excluded_letters == set()
    assert game.state.green == list("crane")


def test_secret_must_have_word_length(dictionary):
    with pytest.raises(InvalidLength):
        GameSession(dictionary, "cranes")

import random

import numpy as np
import pytest

from wordlebits.engine import (
    ConstraintState, Dictionary, intersect_sorted, parse_feedback, recompute_candidates, score,
)
from wordlebits.engine.constraints import _seed
from wordlebits.engine.errors import InvalidLength

from conftest import WORDS


def _names(dictionary, idxs):
    return [dictionary.word(i) for i in idxs]


def _turn(dictionary, state, secret, guess):
    state.apply_feedback(guess, score(secret, guess))
    return recompute_candidates(dictionary, state)


def test_apply_feedback_duplicate_letters():
    st = ConstraintState()
    st.apply_feedback("llama", score("allow", "llama"))  # YGY--

    assert st.green == [None, "l", None, None, None]
    assert st.required_letters == {"l", "a"}
    # 'a' is absent at position 4 but present at 2: not excluded, count pinned
    assert st.excluded_letters == {"m"}
    assert st.min_count == {"l": 2, "a": 1}
    assert st.max_count == {"a": 1}
    assert st.yellow_exclusion[0] == {"l"}
    assert st.yellow_exclusion[2] == {"a"}
    assert st.yellow_exclusion[4] == {"a"}
    assert st.solved == [False, True, False, False, False]


def test_apply_feedback_absent_before_correct():
    st = ConstraintState()
    st.apply_feedback("eerie", score("crane", "eerie"))  # --Y-G
    assert st.excluded_letters == {"i"}
    assert st.min_count == {"r": 1, "e": 1}
    assert st.max_count == {"e": 1}


def test_min_count_never_decreases():
    st = ConstraintState()
    st.apply_feedback("llama", score("allow", "llama"))
    st.apply_feedback("alone", score("allow", "alone"))  # only one 'l' observed this turn
    assert st.min_count["l"] == 2


def test_apply_feedback_rejects_wrong_length():
    st = ConstraintState()
    with pytest.raises(InvalidLength):
        st.apply_feedback("cranes", score("crane", "crane"))


def test_filter_duplicate_case(dictionary):
    st = ConstraintState()
    cands = _turn(dictionary, st, "allow", "llama")
    assert _names(dictionary, cands) == ["allow", "allot"]


def test_filter_unknown_word_feedback(dictionary):
    st = ConstraintState()
    st.apply_feedback("salet", parse_feedback("xyxyx"))
    assert _names(dictionary, recompute_candidates(dictionary, st)) == ["crane"]


def test_seed_without_required_letters(dictionary):
    st = ConstraintState()
    cands = _turn(dictionary, st, "mound", "salet")  # -----
    assert "mound" in _names(dictionary, cands)
    for w in _names(dictionary, cands):
        assert not set(w) & set("salet")


def test_fresh_state_keeps_everything(dictionary, words):
    st = ConstraintState()
    assert recompute_candidates(dictionary, st) == list(range(len(words)))


def test_filter_is_idempotent(dictionary):
    st = ConstraintState()
    first = list(_turn(dictionary, st, "hound", "salet"))
    second = recompute_candidates(dictionary, st)
    assert first == second


def test_positions_agreed_by_all_candidates_are_solved():
    d = Dictionary.load(["abcde", "fbcde", "xyzzy"])
    st = ConstraintState()
    st.apply_feedback("xyzzy", parse_feedback("xxxxx"))
    assert _names(d, recompute_candidates(d, st)) == ["abcde", "fbcde"]
    assert st.green == [None] * 5
    assert st.solved == [False, True, True, True, True]


GUESS_SEQUENCES = [
    ["salet", "round", "milky"],
    ["llama", "eerie", "cools"],
    ["crane", "hound", "jumpy", "level"],
]


@pytest.mark.parametrize("guesses", GUESS_SEQUENCES)
def test_secret_survives_and_candidates_shrink(dictionary, guesses):
    for secret in WORDS:
        st = ConstraintState()
        before = len(dictionary)
        for g in guesses:
            cands = _turn(dictionary, st, secret, g)
            assert dictionary.index_of(secret) in cands, (secret, g)
            assert len(cands) <= before
            assert cands == sorted(cands)
            before = len(cands)


def _consistent(dictionary, history):
    return [
        i for i, w in enumerate(dictionary.words)
        if all(score(w, g) == p for g, p in history)
    ]


@pytest.mark.parametrize("seed", [1, 7, 2024])
def test_candidates_equal_the_consistent_set(dictionary, seed):
    rng = random.Random(seed)
    for secret in WORDS:
        st = ConstraintState()
        history = []
        for g in rng.sample(WORDS, 3):
            p = score(secret, g)
            history.append((g, p))
            st.apply_feedback(g, p)
            assert recompute_candidates(dictionary, st) == _consistent(dictionary, history), (secret, history)


def test_seed_intersects_required_letters(dictionary):
    st = ConstraintState()
    st.apply_feedback("llama", score("allow", "llama"))
    expected = [i for i, w in enumerate(dictionary.words) if "a" in w and "l" in w]
    assert _seed(dictionary, st) == expected


def test_intersect_sorted():
    a = np.array([1, 3, 5, 7, 9])
    b = np.array([0, 3, 4, 9, 11])
    assert intersect_sorted(a, b).tolist() == [3, 9]
    assert intersect_sorted(b, a).tolist() == [3, 9]
    assert intersect_sorted(a, np.array([], dtype=int)).tolist() == []
    assert intersect_sorted(np.array([20, 30]), b).tolist() == []

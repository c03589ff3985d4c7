import numpy as np
import pytest

from wordle_advisor.scoring import letter_frequencies, score, score_words
from wordle_advisor.words import words_to_chars


def test_letter_frequencies():
    positional, total = letter_frequencies(words_to_chars(["crane", "react"]))
    assert positional.shape == (5, 26)
    assert positional[0, ord("c") - ord("a")] == 1
    assert positional[2, ord("a") - ord("a")] == 2
    assert total[ord("e") - ord("a")] == 2
    assert total.sum() == 10


def test_positional_plus_misplaced_bonus():
    # c, r and e each earn 1 in place plus (2 - 1) / 4 elsewhere
    assert score("crane", ["crane", "react"]) == pytest.approx(6.75)


def test_damping_is_tunable():
    assert score("crane", ["crane", "react"], damping=1.0) == pytest.approx(9.0)


def test_repeated_letters_get_no_bonus():
    assert score("geese", ["crane", "react"]) == pytest.approx(2.0)


def test_common_letters_score_nothing():
    assert score("crane", ["crane", "react"], common_letters="a") == pytest.approx(4.75)


def test_score_words_matches_score():
    pool = ["crane", "crate", "trace", "react"]
    words = ["salet", "crane", "geese", "fjord"]
    scores = score_words(words, pool)
    assert isinstance(scores, np.ndarray)
    assert list(scores) == pytest.approx([score(w, pool) for w in words])


def test_empty_inputs():
    assert len(score_words([], ["crane"])) == 0
    assert score("crane", []) == 0.0

import pytest

from wordle_advisor.advisor import (
    AdvisorConfig, common_letters, should_probe, suggest,
)
from wordle_advisor.feedback import evaluate
from wordle_advisor.filtering import filter_candidates

from conftest import ALLOWED, SOLUTIONS

PINNED = ["grace", "brace", "trace"]


def test_common_letters():
    assert common_letters(PINNED) == {1: "r", 2: "a", 3: "c", 4: "e"}
    assert common_letters(["crane", "slate"]) == {2: "a", 4: "e"}
    assert common_letters([]) == {}


def test_should_probe():
    assert should_probe(5, 2, 3)
    # rounds left not below candidate count
    assert not should_probe(3, 2, 3)
    assert not should_probe(10, 1, 2)
    assert not should_probe(10, 2, 6)
    assert not should_probe(2, 4, 1)
    assert not should_probe(5, 2, 3, AdvisorConfig(probe_min_common=3))


def test_no_candidates():
    assert suggest([], 3, ALLOWED) == []


def test_single_candidate():
    assert suggest(["jazzy"], 4, ALLOWED) == ["jazzy"]


def test_ties_in_pool_order():
    assert suggest(["crane", "crate"], 2, ALLOWED) == ["crane", "crate"]


def test_probe_word_avoids_pinned_letters():
    allowed = PINNED + ["bight", "fjord"]
    assert suggest(PINNED, 4, allowed) == ["bight"]


def test_probe_falls_back_to_candidates():
    assert suggest(PINNED, 4, ["fjord", "nymph"]) == PINNED


def test_no_probe_in_last_round():
    assert suggest(PINNED, 6, PINNED + ["bight"]) == PINNED


def test_suggestions_come_from_candidates_or_allowed():
    for solution in ["crane", "llama", "abbey", "tally"]:
        for guess in ["salet", "eerie", "kebab"]:
            candidates = filter_candidates(SOLUTIONS, guess, evaluate(solution, guess))
            words = suggest(candidates, 2, ALLOWED)
            assert words
            assert len(set(words)) == len(words)
            assert set(words) <= set(candidates) | set(ALLOWED)


def test_first_suggestion_is_cached(advisor):
    first = advisor.first_suggestion()
    assert first == suggest(SOLUTIONS, 1, ALLOWED)
    assert advisor.suggest(list(SOLUTIONS), 1) == first
    assert advisor.first_suggestion() is not advisor.first_suggestion()


def test_advisor_suggest(advisor):
    assert advisor.suggest(["crane", "crate"], 2) == ["crane", "crate"]
    assert advisor.best_guess(["crane", "crate"], 2) == "crane"
    assert advisor.best_guess([], 2) is None


def test_allowed_guesses_is_required():
    with pytest.raises(TypeError):
        suggest(PINNED, 4)


def test_turn_keyword():
    assert should_probe(5, 2, turn=3)
    assert suggest(PINNED, turn=6, allowed_guesses=PINNED + ["bight"]) == PINNED

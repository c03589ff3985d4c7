from collections import Counter

import pytest

from wordle_advisor.exceptions import MalformedFeedback
from wordle_advisor.feedback import CORRECT_PATTERN, Feedback, Mark, evaluate

from conftest import ALLOWED, SOLUTIONS

H, P, A = Mark.HIT, Mark.PRESENT, Mark.ABSENT


def test_close_against_crane():
    # c and e sit in the same slots in both words
    assert evaluate("crane", "close") == Feedback([H, A, A, A, H])


def test_slate_against_crane():
    assert evaluate("crane", "slate") == Feedback([A, A, H, A, H])


def test_present_letters():
    assert evaluate("crane", "react") == Feedback([P, P, H, P, A])


def test_hit_consumes_budget_before_present():
    # abbey has two b's: one is hit at index 2, the other makes the last b present
    assert evaluate("abbey", "kebab").to_string() == "-ygyy"


def test_leftmost_duplicate_claims_present():
    assert evaluate("abide", "speed").to_string() == "--y-y"


def test_duplicate_guess_letter_beyond_solution_count():
    # crane has one e, taken by the hit at the end
    assert evaluate("crane", "eerie").to_string() == "--y-g"


def test_solved():
    fb = evaluate("jazzy", "jazzy")
    assert fb.is_solved
    assert fb.pattern == CORRECT_PATTERN


def test_evaluate_is_case_insensitive():
    assert evaluate("CRANE", "Slate") == evaluate("crane", "slate")


def test_marks_never_exceed_letter_count():
    for solution in SOLUTIONS:
        counts = Counter(solution)
        for guess in ALLOWED:
            fb = evaluate(solution, guess)
            marked = Counter(g for g, m in zip(guess, fb) if m != Mark.ABSENT)
            for letter, n in marked.items():
                assert n <= counts[letter], (solution, guess, fb)


def test_feedback_from_string():
    assert Feedback.from_string("gY-.b") == Feedback([H, P, A, A, A])
    assert Feedback.from_string("21000") == Feedback([H, P, A, A, A])


def test_feedback_pattern():
    fb = Feedback.from_string("g---g")
    assert fb.pattern == 2 + 2 * 81
    assert Feedback.from_pattern(fb.pattern) == fb


def test_feedback_is_a_tuple_of_marks():
    fb = Feedback([2, 1, 0, 0, 0])
    assert isinstance(fb, tuple)
    assert fb[0] is Mark.HIT
    assert repr(fb) == "Feedback('gy---')"


@pytest.mark.parametrize("marks", [
    [H, H, H, H],
    [H, H, H, H, H, H],
    [0, 1, 2, 3, 0],
    ["green", 0, 0, 0, 0],
])
def test_malformed_feedback(marks):
    with pytest.raises(MalformedFeedback):
        Feedback(marks)


@pytest.mark.parametrize("text", ["gy", "gyzzz", "gggggg"])
def test_malformed_feedback_string(text):
    with pytest.raises(MalformedFeedback):
        Feedback.from_string(text)


def test_pattern_out_of_range():
    with pytest.raises(MalformedFeedback):
        Feedback.from_pattern(243)


def test_evaluate_rejects_bad_words():
    with pytest.raises(ValueError):
        evaluate("crane", "cranes")

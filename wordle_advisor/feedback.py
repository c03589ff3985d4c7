"""
Feedback Evaluation
===================

Feedback is one mark per guess letter:
- HIT: right letter, right position
- PRESENT: letter is in the solution, but elsewhere
- ABSENT: letter is not in the solution (beyond the occurrences already
  marked HIT or PRESENT)

Duplicate letters are resolved in two passes. Hits consume the solution's
letter budget first, then remaining letters are marked PRESENT left to right
while budget is left. Feedback also has a base-3 integer form:
pattern = m0 + 3*m1 + 9*m2 + 27*m3 + 81*m4, so 242 is all HIT.
"""

from enum import IntEnum
from typing import Iterable

import numpy as np
from numba import jit

from .exceptions import MalformedFeedback
from .words import WORD_LENGTH, N_LETTERS, normalize_word, words_to_chars


# ============================================================================
# CONSTANTS
# ============================================================================

N_PATTERNS = 3 ** WORD_LENGTH  # 243 possible feedback patterns
CORRECT_PATTERN = N_PATTERNS - 1  # 242 = all HIT


class Mark(IntEnum):
    ABSENT = 0
    PRESENT = 1
    HIT = 2


_CHAR_TO_MARK = {
    'g': Mark.HIT, '2': Mark.HIT,
    'y': Mark.PRESENT, '1': Mark.PRESENT,
    'b': Mark.ABSENT, 'x': Mark.ABSENT, '-': Mark.ABSENT, '.': Mark.ABSENT,
    '0': Mark.ABSENT,
}
_MARK_TO_CHAR = {Mark.HIT: 'g', Mark.PRESENT: 'y', Mark.ABSENT: '-'}


# ============================================================================
# FEEDBACK VALUE
# ============================================================================

class Feedback(tuple):
    """Immutable sequence of exactly 5 Marks, aligned to a guess."""

    def __new__(cls, marks: Iterable):
        marks = tuple(marks)
        if len(marks) != WORD_LENGTH:
            raise MalformedFeedback(
                f"Feedback needs {WORD_LENGTH} marks, got {len(marks)}")
        try:
            marks = tuple(Mark(m) for m in marks)
        except ValueError:
            raise MalformedFeedback(f"Invalid mark in {marks!r}") from None
        return super().__new__(cls, marks)

    @classmethod
    def from_pattern(cls, pattern: int) -> "Feedback":
        if not 0 <= pattern < N_PATTERNS:
            raise MalformedFeedback(f"Pattern out of range: {pattern}")
        marks = []
        for _ in range(WORD_LENGTH):
            marks.append(pattern % 3)
            pattern //= 3
        return cls(marks)

    @classmethod
    def from_string(cls, text: str) -> "Feedback":
        """
        Parse compact feedback such as "gy--g".

        g/2 = HIT, y/1 = PRESENT, -/b/x/./0 = ABSENT (case-insensitive).
        """
        try:
            return cls(_CHAR_TO_MARK[c] for c in text.strip().lower())
        except KeyError as e:
            raise MalformedFeedback(f"Unknown mark {e.args[0]!r} in {text!r}") from None

    @property
    def pattern(self) -> int:
        return sum(int(m) * 3 ** i for i, m in enumerate(self))

    @property
    def is_solved(self) -> bool:
        return all(m == Mark.HIT for m in self)

    def to_string(self) -> str:
        return "".join(_MARK_TO_CHAR[m] for m in self)

    def __repr__(self):
        return f"Feedback({self.to_string()!r})"


# ============================================================================
# NUMBA-ACCELERATED FEEDBACK COMPUTATION
# ============================================================================

@jit(nopython=True, cache=True)
def compute_feedback(guess: np.ndarray, answer: np.ndarray) -> int:
    """
    Compute Wordle feedback for a guess against an answer.

    Args:
        guess: shape (5,) array of char codes (0-25 for a-z)
        answer: shape (5,) array of char codes

    Returns:
        Integer feedback pattern (0-242)
    """
    feedback = np.zeros(5, dtype=np.int32)
    answer_counts = np.zeros(N_LETTERS, dtype=np.int32)

    # Count letters in answer
    for i in range(5):
        answer_counts[answer[i]] += 1

    # First pass: hits
    for i in range(5):
        if guess[i] == answer[i]:
            feedback[i] = 2
            answer_counts[guess[i]] -= 1

    # Second pass: present, leftmost duplicates first
    for i in range(5):
        if feedback[i] == 0:
            c = guess[i]
            if answer_counts[c] > 0:
                feedback[i] = 1
                answer_counts[c] -= 1

    return feedback[0] + 3*feedback[1] + 9*feedback[2] + 27*feedback[3] + 81*feedback[4]


def evaluate(solution: str, guess: str) -> Feedback:
    """Feedback the game gives for `guess` when the answer is `solution`."""
    chars = words_to_chars([normalize_word(guess), normalize_word(solution)])
    return Feedback.from_pattern(int(compute_feedback(chars[0], chars[1])))


def as_feedback(value) -> Feedback:
    """Accept a Feedback, a sequence of marks, or a compact string."""
    if isinstance(value, str):
        return Feedback.from_string(value)
    return Feedback(value)

"""
Constraint Filtering
====================

Narrow a candidate list using one (guess, feedback) observation.

Duplicate letters are handled by multiplicity, not position by position:
if a letter received k HIT/PRESENT marks, a candidate needs at least k
copies of it, and an ABSENT mark on the same letter caps the candidate at
exactly k copies (zero if the letter got no HIT/PRESENT marks at all).
"""

from typing import Iterable, List, Sequence, Tuple

import numpy as np
from numba import jit

from .feedback import Feedback, as_feedback
from .words import N_LETTERS, normalize_word, words_to_chars


@jit(nopython=True, cache=True)
def consistent_mask(candidate_chars: np.ndarray, guess: np.ndarray,
                    marks: np.ndarray) -> np.ndarray:
    """
    Boolean mask of candidates consistent with one observation.

    Args:
        candidate_chars: shape (n, 5) char codes
        guess: shape (5,) char codes of the guess
        marks: shape (5,) marks (0=absent, 1=present, 2=hit)
    """
    n = candidate_chars.shape[0]
    keep = np.ones(n, dtype=np.bool_)

    # HIT/PRESENT marks received by each letter
    marked = np.zeros(N_LETTERS, dtype=np.int32)
    for i in range(5):
        if marks[i] != 0:
            marked[guess[i]] += 1

    counts = np.zeros(N_LETTERS, dtype=np.int32)
    for j in range(n):
        w = candidate_chars[j]
        counts[:] = 0
        for i in range(5):
            counts[w[i]] += 1

        for i in range(5):
            c = guess[i]
            m = marks[i]
            if m == 2:
                if w[i] != c:
                    keep[j] = False
                    break
            elif m == 1:
                if w[i] == c or counts[c] < marked[c]:
                    keep[j] = False
                    break
            elif counts[c] > marked[c]:
                keep[j] = False
                break

    return keep


def _marks_array(feedback) -> np.ndarray:
    return np.array(as_feedback(feedback), dtype=np.int32)


def filter_chars(candidate_chars: np.ndarray, guess: str, feedback) -> np.ndarray:
    """Keep-mask over a char code array (see `consistent_mask`)."""
    guess_chars = words_to_chars([normalize_word(guess)])[0]
    return consistent_mask(candidate_chars, guess_chars, _marks_array(feedback))


def filter_candidates(candidates: Sequence[str], guess: str, feedback) -> List[str]:
    """
    Return the candidates consistent with `feedback` for `guess`.

    Order is preserved, and the result is never larger than the input.

    Raises:
        MalformedFeedback: if feedback is not 5 valid marks
    """
    candidates = list(candidates)
    mask = filter_chars(words_to_chars(candidates), guess, feedback)
    return [w for w, k in zip(candidates, mask) if k]


def is_consistent(word: str, guess: str, feedback) -> bool:
    return bool(filter_chars(words_to_chars([normalize_word(word)]), guess, feedback)[0])


def apply_observations(candidates: Sequence[str],
                       observations: Iterable[Tuple[str, Feedback]]) -> List[str]:
    """Filter by several observations in turn."""
    remaining = list(candidates)
    for guess, feedback in observations:
        remaining = filter_candidates(remaining, guess, feedback)
    return remaining

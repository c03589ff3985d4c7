"""
Letter Frequency Scoring
========================

Scores a word by how much it is expected to reveal about a pool of
candidates:

- Each letter earns its positional frequency in the pool (how many
  candidates have that letter in that slot, i.e. likely HIT).
- Letters used once in the word also earn (global frequency - positional
  frequency) / damping: candidates containing the letter elsewhere, i.e.
  likely PRESENT.
- Repeated letters earn no such bonus.
- Letters already known to be common to all candidates score nothing when
  probing, since guessing them again reveals nothing.

Scores are only comparable within one call.
"""

from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from .words import WORD_LENGTH, N_LETTERS, normalize_word, words_to_chars


DEFAULT_DAMPING = 4.0


def letter_frequencies(pool_chars: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Build frequency tables for a pool.

    Returns:
        (positional, total): shape (5, 26) counts per position and shape (26,)
        counts over all letters of all pool words
    """
    positional = np.stack([
        np.bincount(pool_chars[:, i], minlength=N_LETTERS)
        for i in range(WORD_LENGTH)
    ])
    return positional, positional.sum(axis=0)


def score_chars(word_chars: np.ndarray, pool_chars: np.ndarray,
                common_letters: Optional[Iterable[str]] = None,
                damping: float = DEFAULT_DAMPING) -> np.ndarray:
    """Vectorized scoring of a (m, 5) char array against a pool."""
    positional, total = letter_frequencies(pool_chars)
    if word_chars.shape[0] == 0:
        return np.zeros(0, dtype=np.float64)

    letter_score = positional[np.arange(WORD_LENGTH), word_chars]

    occurrences = (word_chars[:, :, None] == word_chars[:, None, :]).sum(axis=2)
    bonus = np.where(occurrences == 1, total[word_chars] - letter_score, 0) / damping

    contrib = letter_score + bonus
    if common_letters:
        codes = [ord(c) - ord('a') for c in common_letters]
        contrib[np.isin(word_chars, codes)] = 0.0

    return contrib.sum(axis=1)


def score_words(words: Sequence[str], pool: Sequence[str],
                common_letters: Optional[Iterable[str]] = None,
                damping: float = DEFAULT_DAMPING) -> np.ndarray:
    """Score every word in `words` using `pool` for letter statistics."""
    return score_chars(words_to_chars(list(words)), words_to_chars(list(pool)),
                       common_letters, damping)


def score(word: str, pool: Sequence[str],
          common_letters: Optional[Iterable[str]] = None,
          damping: float = DEFAULT_DAMPING) -> float:
    return float(score_words([normalize_word(word)], pool, common_letters, damping)[0])

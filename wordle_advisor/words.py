"""
Word Lists
==========

Wordle uses TWO word lists:
- Solutions: curated list of possible daily answers
- Allowed guesses: all valid 5-letter guesses (a superset of the solutions)

Both are loaded once and never change afterwards. The numeric code paths
work on char-code arrays (a=0 .. z=25) of shape (n_words, 5).
"""

import string
from typing import Iterable, List, Optional, Sequence

import numpy as np


# ============================================================================
# CONSTANTS
# ============================================================================

WORD_LENGTH = 5
MAX_ROUNDS = 6
N_LETTERS = 26

ALPHABET = frozenset(string.ascii_lowercase)


# ============================================================================
# WORDS
# ============================================================================

def normalize_word(word: str) -> str:
    """
    Lowercase and validate a word.

    Raises:
        ValueError: if the word is not exactly 5 letters a-z
    """
    w = word.strip().lower()
    if len(w) != WORD_LENGTH or not set(w) <= ALPHABET:
        raise ValueError(f"Not a {WORD_LENGTH}-letter word: {word!r}")
    return w


def words_to_chars(words: Sequence[str]) -> np.ndarray:
    """Convert words to a (n, 5) char code array."""
    if not words:
        return np.zeros((0, WORD_LENGTH), dtype=np.int32)
    if any(len(w) != WORD_LENGTH for w in words):
        raise ValueError(f"All words must have {WORD_LENGTH} letters")
    raw = np.frombuffer("".join(words).encode("ascii"), dtype=np.uint8)
    chars = raw.reshape(-1, WORD_LENGTH).astype(np.int32) - ord('a')
    if chars.min() < 0 or chars.max() >= N_LETTERS:
        raise ValueError("Words must be lowercase a-z")
    return chars


def load_words(filepath: str) -> List[str]:
    """Load word list from file, one word per line."""
    with open(filepath, 'r', encoding='utf-8') as f:
        return [normalize_word(line) for line in f if line.strip()]


def _dedupe(words: Iterable[str]) -> tuple:
    seen = set()
    out = []
    for w in words:
        w = normalize_word(w)
        if w not in seen:
            seen.add(w)
            out.append(w)
    return tuple(out)


# ============================================================================
# CORPUS
# ============================================================================

class Corpus:
    """
    The two immutable word lists the advisor works with.

    Solutions must be a subset of the allowed guesses. If no allowed guess
    list is given, the solutions double as allowed guesses.
    """

    def __init__(self, solutions: Sequence[str],
                 allowed_guesses: Optional[Sequence[str]] = None):
        self.solutions = _dedupe(solutions)
        self.allowed_guesses = _dedupe(allowed_guesses or solutions)

        self.allowed_set = frozenset(self.allowed_guesses)
        missing = [w for w in self.solutions if w not in self.allowed_set]
        if missing:
            raise ValueError(
                f"{len(missing)} solutions are not allowed guesses, e.g. {missing[:5]}")

        self.solution_chars = words_to_chars(self.solutions)
        self.guess_chars = words_to_chars(self.allowed_guesses)

    @classmethod
    def from_files(cls, solutions_file: str,
                   guesses_file: Optional[str] = None) -> "Corpus":
        solutions = load_words(solutions_file)
        guesses = load_words(guesses_file) if guesses_file else None
        return cls(solutions, guesses)

    def is_allowed(self, word: str) -> bool:
        return word in self.allowed_set

    def __repr__(self):
        return (f"Corpus({len(self.solutions)} solutions, "
                f"{len(self.allowed_guesses)} allowed guesses)")

"""
Suggestion Engine
=================

Picks the next guess for a candidate list.

Usually the best guess is drawn from the candidates themselves. When several
letters are already pinned but more candidates remain than rounds left,
guessing a candidate mostly re-confirms known letters; a probe word from the
full allowed list that avoids the pinned letters reveals more.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np

from .scoring import DEFAULT_DAMPING, score_chars
from .words import MAX_ROUNDS, WORD_LENGTH, Corpus, words_to_chars

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdvisorConfig:
    """Tunable parameters of the advisor and the benchmark."""
    max_rounds: int = MAX_ROUNDS
    damping: float = DEFAULT_DAMPING
    probe_min_common: int = 2
    # simulations give up after this many guesses
    round_cap: int = 20


DEFAULT_CONFIG = AdvisorConfig()


def common_letters(candidates: Sequence[str]) -> Dict[int, str]:
    """Positions where every candidate has the same letter."""
    if not candidates:
        return {}
    first = candidates[0]
    return {
        i: first[i] for i in range(WORD_LENGTH)
        if all(w[i] == first[i] for w in candidates)
    }


def should_probe(n_candidates: int, n_common: int, turn: int,
                 config: AdvisorConfig = DEFAULT_CONFIG) -> bool:
    """
    Decide whether to guess a probe word instead of a candidate.

    Args:
        n_candidates: number of remaining candidates
        n_common: number of distinct letters common to all candidates
        turn: current turn, starting at 1
    """
    rounds_left = config.max_rounds - turn
    return (n_common >= config.probe_min_common
            and rounds_left < n_candidates
            and turn < config.max_rounds
            and n_candidates > 2)


def _best(words: Sequence[str], scores: np.ndarray):
    """Words tying for the top score, in pool order, and that score."""
    if len(words) == 0:
        return [], 0.0
    top = scores.max()
    return [words[i] for i in np.flatnonzero(scores == top)], float(top)


def _suggest(candidates: Sequence[str], candidate_chars: np.ndarray,
             guesses: Sequence[str], guess_chars: np.ndarray,
             turn: int, config: AdvisorConfig) -> List[str]:
    if len(candidates) == 0:
        return []

    pinned = sorted(set(common_letters(candidates).values()))
    use_probe = should_probe(len(candidates), len(pinned), turn, config)

    if use_probe:
        scores = score_chars(guess_chars, candidate_chars, pinned, config.damping)
        words, top = _best(guesses, scores)
        log.debug("round %d: probing (%d candidates, pinned %s), top score %.2f",
                  turn, len(candidates), "".join(pinned), top)
        if top:
            return words

    scores = score_chars(candidate_chars, candidate_chars, None, config.damping)
    words, _ = _best(candidates, scores)
    return words


def suggest(candidates: Sequence[str], turn: int,
            allowed_guesses: Sequence[str],
            config: AdvisorConfig = DEFAULT_CONFIG) -> List[str]:
    """
    Suggest the next guess(es).

    Args:
        candidates: words still consistent with all feedback
        turn: the round the suggestion is for, starting at 1
        allowed_guesses: every legal guess; probe words are drawn from here

    Returns:
        Unique words tying for the best score, in pool order. Empty only if
        there are no candidates.
    """
    candidates = list(candidates)
    guesses = list(allowed_guesses)
    return _suggest(candidates, words_to_chars(candidates),
                    guesses, words_to_chars(guesses), turn, config)


# ============================================================================
# ADVISOR CLASS
# ============================================================================

class WordleAdvisor:
    """
    Suggestion engine bound to a corpus.

    The advisor holds no game state: callers own the candidate list and the
    round counter (see `Session`).
    """

    def __init__(self, corpus: Corpus, config: AdvisorConfig = DEFAULT_CONFIG):
        self.corpus = corpus
        self.config = config
        self._first: Optional[List[str]] = None

    @property
    def solutions(self):
        return self.corpus.solutions

    def first_suggestion(self) -> List[str]:
        """Suggestion for round 1 with every solution still possible."""
        if self._first is None:
            self._first = _suggest(self.corpus.solutions, self.corpus.solution_chars,
                                   self.corpus.allowed_guesses, self.corpus.guess_chars,
                                   1, self.config)
            log.debug("first suggestion: %s", self._first)
        return list(self._first)

    def suggest(self, candidates: Sequence[str], turn: int) -> List[str]:
        candidates = list(candidates)
        if turn == 1 and tuple(candidates) == self.corpus.solutions:
            return self.first_suggestion()
        return _suggest(candidates, words_to_chars(candidates),
                        self.corpus.allowed_guesses, self.corpus.guess_chars,
                        turn, self.config)

    def best_guess(self, candidates: Sequence[str], turn: int) -> Optional[str]:
        """First of the suggested words, or None if nothing is left."""
        words = self.suggest(candidates, turn)
        return words[0] if words else None

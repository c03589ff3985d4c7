"""Caller-owned game state: the candidate list and the round counter."""

import logging
from typing import List, Tuple

from .advisor import WordleAdvisor
from .exceptions import GameOver, InvalidGuess, NoCandidatesRemaining
from .feedback import Feedback, as_feedback
from .filtering import filter_candidates
from .words import normalize_word

log = logging.getLogger(__name__)


class Session:
    """
    One game in progress.

    Starts with every solution possible at round 1. Each accepted guess
    narrows the candidates and advances the round. The game is over once it
    is solved or `max_rounds` guesses have been made.
    """

    def __init__(self, advisor: WordleAdvisor):
        self.advisor = advisor
        self.reset()

    def reset(self):
        self.candidates: List[str] = list(self.advisor.solutions)
        self.round = 1
        self.history: List[Tuple[str, Feedback]] = []

    @property
    def solved(self) -> bool:
        return bool(self.history) and self.history[-1][1].is_solved

    @property
    def out_of_rounds(self) -> bool:
        return not self.solved and len(self.history) >= self.advisor.config.max_rounds

    @property
    def over(self) -> bool:
        return self.solved or self.out_of_rounds

    def suggestions(self) -> List[str]:
        return self.advisor.suggest(self.candidates, self.round)

    def submit(self, guess: str, feedback) -> List[str]:
        """
        Record the feedback for a guess and return the narrowed candidates.

        Raises:
            GameOver: the game is already solved or out of rounds
            InvalidGuess: guess is not an allowed word (state unchanged)
            MalformedFeedback: feedback is not 5 valid marks
            NoCandidatesRemaining: the feedback contradicts every candidate
                (state unchanged)
        """
        if self.over:
            raise GameOver(f"Game over after {len(self.history)} guesses")
        try:
            guess = normalize_word(guess)
        except ValueError:
            raise InvalidGuess(guess) from None
        if not self.advisor.corpus.is_allowed(guess):
            raise InvalidGuess(guess)
        feedback = as_feedback(feedback)

        remaining = filter_candidates(self.candidates, guess, feedback)
        if not remaining:
            raise NoCandidatesRemaining(
                f"No solution matches {guess} {feedback.to_string()}")

        log.debug("round %d: %s %s -> %d candidates",
                  self.round, guess, feedback.to_string(), len(remaining))
        self.candidates = remaining
        self.history.append((guess, feedback))
        self.round += 1
        return remaining

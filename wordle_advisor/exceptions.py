"""Exceptions raised by the advisor."""


class WordleAdvisorError(Exception):
    """Base class for advisor errors."""


class NoCandidatesRemaining(WordleAdvisorError, RuntimeError):
    """The accumulated feedback rules out every solution word."""


class InvalidGuess(WordleAdvisorError, ValueError):
    """A submitted guess is not in the allowed guess list."""

    def __init__(self, guess: str):
        super().__init__(f"Not in word list: {guess!r}")
        self.guess = guess


class MalformedFeedback(WordleAdvisorError, ValueError):
    """Feedback of the wrong length or with an unknown mark."""


class GameOver(WordleAdvisorError, RuntimeError):
    """A guess was submitted after the game was solved or ran out of rounds."""

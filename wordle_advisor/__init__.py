"""
Wordle Advisor
==============

Narrows the possible answers from accumulated feedback and suggests the
next guess by letter-frequency scoring, probing with an outside word when
several letters are already pinned.
"""

__version__ = "1.0.0"

from .advisor import AdvisorConfig, WordleAdvisor, common_letters, should_probe, suggest
from .benchmark import BenchmarkResult, SimulationResult, iter_simulations, run_benchmark, simulate
from .exceptions import (
    GameOver, InvalidGuess, MalformedFeedback, NoCandidatesRemaining, WordleAdvisorError,
)
from .feedback import Feedback, Mark, evaluate
from .filtering import apply_observations, filter_candidates, is_consistent
from .scoring import score, score_words
from .session import Session
from .words import Corpus, load_words, normalize_word

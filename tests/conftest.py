import pytest

from wordle_advisor.advisor import AdvisorConfig, WordleAdvisor
from wordle_advisor.words import Corpus

SOLUTIONS = [
    "crane", "close", "slate", "trace", "crate", "react", "caret", "cater",
    "brace", "grace", "place", "spade", "shade", "stare", "share", "sweet",
    "eerie", "geese", "llama", "allot", "total", "atoll", "tally", "jazzy",
    "mamma", "abide", "bride", "elder", "abbey",
]

ALLOWED = SOLUTIONS + ["salet", "tarse", "fjord", "nymph", "bight", "kebab", "speed"]


@pytest.fixture
def corpus():
    return Corpus(SOLUTIONS, ALLOWED)


@pytest.fixture
def advisor(corpus):
    return WordleAdvisor(corpus, AdvisorConfig(round_cap=40))

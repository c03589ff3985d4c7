"""
Benchmark Harness
=================

Replays the advisor against every solution word and collects guess counts.

Each simulation starts from the full solution list at round 1, always plays
the first suggested word, and filters on the feedback it gets back. A word
fails if the candidates run out or the round cap is exceeded; failures are
recorded and the batch carries on.

Simulations are independent, so they can run in a process pool. Results are
always yielded in corpus order.
"""

import logging
import time
from collections import Counter
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from .advisor import DEFAULT_CONFIG, AdvisorConfig, WordleAdvisor
from .feedback import evaluate
from .filtering import filter_candidates
from .words import Corpus

log = logging.getLogger(__name__)

# guess count recorded for words the advisor failed to solve
FAILED = -1

NO_CANDIDATES = "no candidates"
ROUND_CAP = "round cap"


@dataclass
class SimulationResult:
    word: str
    guesses: List[str]
    failure: Optional[str] = None

    @property
    def solved(self) -> bool:
        return self.failure is None

    @property
    def n_guesses(self) -> int:
        return len(self.guesses) if self.solved else FAILED


def simulate(advisor: WordleAdvisor, solution: str) -> SimulationResult:
    """Play one game against `solution`, always taking the first suggestion."""
    candidates = list(advisor.solutions)
    guesses: List[str] = []
    turn = 1

    while turn <= advisor.config.round_cap:
        guess = advisor.best_guess(candidates, turn)
        guesses.append(guess)
        if guess == solution:
            return SimulationResult(solution, guesses)

        candidates = filter_candidates(candidates, guess, evaluate(solution, guess))
        if not candidates:
            log.debug("%s: no candidates after %s", solution, guesses)
            return SimulationResult(solution, guesses, NO_CANDIDATES)
        turn += 1

    log.debug("%s: round cap hit after %s", solution, guesses)
    return SimulationResult(solution, guesses, ROUND_CAP)


# ============================================================================
# PROCESS POOL
# ============================================================================

_worker_advisor: Optional[WordleAdvisor] = None  # set once per worker process


def _init_worker(solutions, allowed_guesses, config):
    global _worker_advisor
    _worker_advisor = WordleAdvisor(Corpus(solutions, allowed_guesses), config)


def _simulate_worker(word: str) -> SimulationResult:
    return simulate(_worker_advisor, word)


def iter_simulations(corpus: Corpus, config: AdvisorConfig = DEFAULT_CONFIG,
                     words: Optional[Sequence[str]] = None,
                     workers: int = 1) -> Iterator[SimulationResult]:
    """
    Simulate each word (default: every solution), yielding results in order.

    Stopping the iteration early leaves the results already yielded valid.
    """
    words = list(corpus.solutions if words is None else words)

    if workers <= 1:
        advisor = WordleAdvisor(corpus, config)
        for word in words:
            yield simulate(advisor, word)
        return

    ex = ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                             initargs=(corpus.solutions, corpus.allowed_guesses, config))
    try:
        chunksize = max(1, len(words) // (workers * 8))
        yield from ex.map(_simulate_worker, words, chunksize=chunksize)
    finally:
        ex.shutdown(wait=True, cancel_futures=True)


# ============================================================================
# RESULTS
# ============================================================================

@dataclass
class BenchmarkResult:
    total_guesses: int
    per_word_guess_counts: Dict[str, int]
    histogram: Dict[int, int]
    failures: Dict[str, str] = field(default_factory=dict)
    elapsed: float = 0.0

    @classmethod
    def from_simulations(cls, simulations: Iterable[SimulationResult],
                         elapsed: float = 0.0) -> "BenchmarkResult":
        per_word: Dict[str, int] = {}
        dist: Counter = Counter()
        failures: Dict[str, str] = {}
        for sim in simulations:
            per_word[sim.word] = sim.n_guesses
            if sim.solved:
                dist[sim.n_guesses] += 1
            else:
                failures[sim.word] = sim.failure
        return cls(
            total_guesses=sum(n * c for n, c in dist.items()),
            per_word_guess_counts=per_word,
            histogram=dict(sorted(dist.items())),
            failures=failures,
            elapsed=elapsed,
        )

    @property
    def total(self) -> int:
        return len(self.per_word_guess_counts)

    @property
    def solved(self) -> int:
        return self.total - len(self.failures)

    @property
    def average(self) -> float:
        return self.total_guesses / self.solved if self.solved else 0.0

    def to_dict(self) -> Dict:
        return {
            'total': self.total,
            'solved': self.solved,
            'total_guesses': self.total_guesses,
            'average': self.average,
            'histogram': dict(self.histogram),
            'failures': dict(self.failures),
            'per_word_guess_counts': dict(self.per_word_guess_counts),
            'time': self.elapsed,
        }


def run_benchmark(solutions: Sequence[str], allowed_guesses: Optional[Sequence[str]] = None,
                  config: AdvisorConfig = DEFAULT_CONFIG,
                  workers: int = 1) -> BenchmarkResult:
    """
    Benchmark the advisor on every solution word.

    Args:
        solutions: solution corpus, also the words simulated
        allowed_guesses: allowed guess corpus (superset of solutions)
        workers: number of worker processes (1 = run in-process)
    """
    corpus = Corpus(solutions, allowed_guesses)
    start = time.time()
    sims = list(iter_simulations(corpus, config, workers=workers))
    return BenchmarkResult.from_simulations(sims, time.time() - start)

"""
Command Line Front End
======================

    python -m wordle_advisor suggest crane .y..g slate ..g.g
    python -m wordle_advisor suggest -- crane -y--g
    python -m wordle_advisor play
    python -m wordle_advisor benchmark --workers 8 --json results.json

Word lists are read from --answers / --guesses, defaulting to
answers.txt and allowed_guesses.txt in $WORDLE_ADVISOR_WORDS (or ./words).

On the command line a feedback starting with "-" reads as an option, so
write absent letters as "." or "b", or put "--" before the observations.
"""

import argparse
import json
import logging
import os
import sys
import time
from typing import List, Optional

from .advisor import AdvisorConfig, WordleAdvisor
from .benchmark import BenchmarkResult, iter_simulations
from .exceptions import InvalidGuess, MalformedFeedback, NoCandidatesRemaining
from .feedback import Feedback, Mark
from .filtering import apply_observations
from .session import Session
from .words import Corpus, load_words, normalize_word

log = logging.getLogger(__name__)


# ============================================================================
# DISPLAY
# ============================================================================

MARK_COLORS = {
    Mark.HIT: "#6aaa64",
    Mark.PRESENT: "#d1b036",
    Mark.ABSENT: "#cccccc",
}
MARK_EMOJI = {Mark.HIT: '🟩', Mark.PRESENT: '🟨', Mark.ABSENT: '⬛'}


def feedback_to_emoji(feedback: Feedback) -> str:
    return ''.join(MARK_EMOJI[m] for m in feedback)


def format_suggestions(words: List[str]) -> str:
    return " or ".join(w.upper() for w in words) if words else "None"


def print_candidates(candidates: List[str], limit: int = 20):
    print(f"Possible solutions: {len(candidates)}")
    if len(candidates) <= limit:
        print("  " + " ".join(candidates))


def print_results(results: BenchmarkResult):
    """Pretty print benchmark results."""
    print("\n" + "=" * 60)
    print("BENCHMARK RESULTS")
    print("=" * 60)
    print(f"Words tested: {results.total}")
    print(f"Total guesses: {results.total_guesses}")
    print(f"Average: {results.average:.4f}")
    print(f"Failures: {len(results.failures)}")
    rate = results.total / results.elapsed if results.elapsed > 0 else 0
    print(f"Time: {results.elapsed:.1f}s ({rate:.1f} words/sec)")
    print("\nDistribution:")
    for n, count in results.histogram.items():
        pct = 100 * count / results.total
        bar = "█" * int(pct / 2)
        print(f"  {n}: {count:5d} ({pct:5.2f}%) {bar}")
    if results.failures:
        print(f"\nFailed words: {list(results.failures)[:20]}")
    print("=" * 60)


# ============================================================================
# COMMANDS
# ============================================================================

def load_corpus(args) -> Corpus:
    answers = load_words(args.answers)
    guesses = load_words(args.guesses) if os.path.exists(args.guesses) else []
    log.info("Loaded %d answers, %d allowed guesses", len(answers), len(guesses))
    # some published guess lists leave the answers out
    return Corpus(answers, answers + guesses)


def _config(args) -> AdvisorConfig:
    return AdvisorConfig(damping=args.damping, round_cap=args.round_cap)


def _allowed_guess(corpus: Corpus, guess: str) -> str:
    try:
        word = normalize_word(guess)
    except ValueError:
        raise InvalidGuess(guess) from None
    if not corpus.is_allowed(word):
        raise InvalidGuess(guess)
    return word


def cmd_suggest(args) -> int:
    if len(args.observations) % 2:
        print("Observations come in pairs: GUESS FEEDBACK", file=sys.stderr)
        return 2
    corpus = load_corpus(args)
    advisor = WordleAdvisor(corpus, _config(args))

    pairs = list(zip(args.observations[::2], args.observations[1::2]))
    try:
        observations = [(_allowed_guess(corpus, g), Feedback.from_string(f)) for g, f in pairs]
        candidates = apply_observations(corpus.solutions, observations)
    except InvalidGuess as e:
        print(f"Not in word list: {e.guess}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"Bad observation: {e}", file=sys.stderr)
        return 2

    print_candidates(candidates)
    print(f"Suggested word: {format_suggestions(advisor.suggest(candidates, len(pairs) + 1))}")
    return 0 if candidates else 1


def cmd_play(args) -> int:
    advisor = WordleAdvisor(load_corpus(args), _config(args))
    session = Session(advisor)

    print("Enter '<guess> <feedback>' (g=hit, y=present, -=absent), 'reset' or 'quit'.")
    while True:
        print(f"\nRound: {session.round}")
        print(f"Suggested word: {format_suggestions(session.suggestions())}")
        try:
            line = input("> ").strip()
        except EOFError:
            return 0

        if line in ("quit", "exit"):
            return 0
        if line == "reset":
            session.reset()
            continue
        parts = line.split()
        if len(parts) != 2:
            print("Expected a guess and its feedback, e.g. 'crane .y..g'")
            continue

        try:
            session.submit(parts[0], Feedback.from_string(parts[1]))
        except InvalidGuess:
            print("Not in word list!")
            continue
        except MalformedFeedback as e:
            print(f"Bad feedback: {e}")
            continue
        except NoCandidatesRemaining:
            print("No solution found. Check the feedback, or 'reset'.")
            continue

        guess, feedback = session.history[-1]
        print(f"{guess.upper()} {feedback_to_emoji(feedback)}")
        if session.solved:
            print(f"Solved in {session.round - 1} guesses!")
            session.reset()
        elif session.out_of_rounds:
            print("Out of rounds. Possible solutions were:")
            print_candidates(session.candidates)
            session.reset()
        else:
            print_candidates(session.candidates)


def cmd_benchmark(args) -> int:
    corpus = load_corpus(args)
    words = corpus.solutions[:args.limit] if args.limit else corpus.solutions

    sims = []
    t0 = time.time()
    try:
        for i, sim in enumerate(iter_simulations(corpus, _config(args), words, args.workers)):
            sims.append(sim)
            if (i + 1) % 500 == 0:
                elapsed = time.time() - t0
                solved = [s.n_guesses for s in sims if s.solved]
                avg = sum(solved) / len(solved) if solved else 0
                print(f"[{i + 1}/{len(words)}] {(i + 1) / elapsed:.1f} w/s, avg={avg:.4f}")
    except KeyboardInterrupt:
        print(f"\nInterrupted, reporting {len(sims)} of {len(words)} words", file=sys.stderr)

    results = BenchmarkResult.from_simulations(sims, time.time() - t0)
    print_results(results)

    if args.json:
        with open(args.json, 'w', encoding='utf-8') as f:
            json.dump(results.to_dict(), f, indent=2)
        log.info("Wrote %s", args.json)
    return 0


# ============================================================================
# MAIN
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    words_dir = os.environ.get("WORDLE_ADVISOR_WORDS", "words")
    defaults = AdvisorConfig()

    parser = argparse.ArgumentParser(
        prog="wordle-advisor",
        description="Suggest Wordle guesses and benchmark the advisor.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument("--answers", default=os.path.join(words_dir, "answers.txt"),
                        help="solution word list, one word per line")
    parser.add_argument("--guesses", default=os.path.join(words_dir, "allowed_guesses.txt"),
                        help="allowed guess word list (optional)")
    parser.add_argument("--damping", type=float, default=defaults.damping,
                        help="divisor for the misplaced-letter bonus")
    parser.add_argument("--round-cap", type=int, default=defaults.round_cap,
                        help="give up a simulation after this many guesses")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("suggest", help="suggest a guess given past feedback")
    p.add_argument("observations", nargs="*", metavar="OBS",
                   help="guess/feedback pairs, e.g. crane .y..g (write absent as . or b, "
                        "or put -- before a feedback starting with -)")
    p.set_defaults(func=cmd_suggest)

    p = sub.add_parser("play", help="interactive advisor")
    p.set_defaults(func=cmd_play)

    p = sub.add_parser("benchmark", help="replay the advisor on every answer")
    p.add_argument("--workers", type=int, default=1, help="worker processes")
    p.add_argument("--limit", type=int, default=0, help="only the first N answers (0 = all)")
    p.add_argument("--json", help="write results to this JSON file")
    p.set_defaults(func=cmd_benchmark)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    return args.func(args)

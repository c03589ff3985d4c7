"""Debug script for tracing advisor behavior."""

import sys

from wordle_advisor.advisor import WordleAdvisor, common_letters, should_probe
from wordle_advisor.feedback import evaluate
from wordle_advisor.filtering import filter_candidates
from wordle_advisor.scoring import score_words
from wordle_advisor.words import Corpus, load_words


def trace_solve(advisor, answer, max_guesses=6):
    print(f"\n=== Tracing solve for: {answer} ===\n")

    cands = list(advisor.solutions)
    for i in range(max_guesses):
        turn = i + 1
        pinned = sorted(set(common_letters(cands).values()))
        probe = should_probe(len(cands), len(pinned), turn, advisor.config)
        print(f"Turn {turn}: {len(cands)} candidates, pinned={''.join(pinned) or '-'}, probe={probe}")
        if len(cands) <= 10:
            print(f"  Candidates: {cands}")
            for c, s in zip(cands, score_words(cands, cands)):
                print(f"    score({c}) = {s:.2f}")

        suggestions = advisor.suggest(cands, turn)
        guess = suggestions[0]
        fb = evaluate(answer, guess)
        print(f"  Guess: {guess} (of {len(suggestions)} tied) -> {fb.to_string()}")

        if fb.is_solved:
            print(f"\n✓ Solved in {turn} guesses!")
            return turn

        cands = filter_candidates(cands, guess, fb)
        if answer not in cands:
            print(f"  ERROR: {answer} not in remaining candidates!")
            print(f"  Remaining: {cands[:20]}")
            break

    print(f"\n✗ Failed to solve in {max_guesses} guesses")
    return max_guesses + 1


if __name__ == "__main__":
    answers = load_words("words/answers.txt")
    guesses = load_words("words/allowed_guesses.txt")
    advisor = WordleAdvisor(Corpus(answers, answers + guesses))

    for word in sys.argv[1:] or ["jazzy"]:
        trace_solve(advisor, word)

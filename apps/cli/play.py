# apps/cli/play.py
"""
Interactive terminal game.

Each line typed is one guess:
  - a valid word is scored and its verdict printed
    (UPPER = right place, lower = elsewhere in the word, * = not in the word)
  - an empty line lists the words still possible given the verdicts so far
  - a word of the wrong length, or one not in the dictionary, is rejected
    without using up a turn

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --chooser uniform --seed 7
    python -m apps.cli.play --N 6 --dictionary path/to/words_6.txt
"""

from __future__ import annotations

import argparse
import logging

from wordhint.datasets import default_dictionary_path, load_dictionary
from wordhint.engine import GameOver, LengthMismatch, UnknownWord
from wordhint.game import GameConfig, GameSession, MAX_TURNS, create_chooser, get_chooser_ids


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordhint — guess the secret word")
    ap.add_argument("--N", type=int, default=5, help="word length (e.g., 5 or 6)")
    ap.add_argument("--dictionary",
                    help="path to word list (default: bundled words_N.txt)")
    ap.add_argument("--max-turns", type=int, default=MAX_TURNS, help="guesses per game")
    ap.add_argument("--chooser", default="plural_skip",
                    help=f"secret selection policy (one of: {', '.join(get_chooser_ids())})")
    ap.add_argument("--seed", type=int, help="RNG seed for secret selection")
    ap.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    return ap


def play(session: GameSession) -> bool:
    """Run one game on `session` reading guesses from stdin. Returns True on a win."""
    N = session.config.N
    print(f"Guess the {N}-letter word. Empty line lists possible words.")
    while not session.is_over:
        try:
            line = input(f"[{session.turn + 1}/{session.config.max_turns}] > ")
        except EOFError:
            print()
            break

        if not line.strip():
            words = session.candidates()
            print(f"Possible words ({len(words)}): {' '.join(words)}")
            continue

        try:
            verdict = session.submit(line)
        except LengthMismatch:
            print(f"Enter a {N}-letter word.")
            continue
        except UnknownWord:
            print("Word doesn't exist.")
            continue
        except GameOver:
            break
        print(f"        {verdict}")

    if session.is_won:
        print("Congratulations! You've guessed the word!")
    elif session.is_lost:
        print(f"The word was: '{session.secret}'! Better luck next time!")
    return session.is_won


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    path = args.dictionary or default_dictionary_path(args.N)
    words = load_dictionary(path, args.N)
    session = GameSession(
        words,
        config=GameConfig(N=args.N, max_turns=args.max_turns),
        chooser=create_chooser(args.chooser, seed=args.seed),
    )
    play(session)


if __name__ == "__main__":
    main()

# apps/cli/suggest.py
"""
List dictionary words consistent with verdicts you already have.

Each positional argument is GUESS=VERDICT, with the verdict written the way
the game prints it (UPPER = right place, lower = elsewhere, * = absent).

Usage:
    python -m apps.cli.suggest CRANE=***** HOIST=*o*st
    python -m apps.cli.suggest --sort --workers 4 CRANE=cr***
"""

from __future__ import annotations

import argparse
import logging
from typing import Dict, List

from wordhint.datasets import default_dictionary_path, load_dictionary
from wordhint.engine import filter_candidates, parse_verdict


def parse_history(items: List[str], N: int) -> Dict[str, str]:
    """
    Turn ["GUESS=VERDICT", ...] into a history mapping.
    Raises ValueError for malformed items.
    """
    history: Dict[str, str] = {}
    for item in items:
        guess, sep, verdict = item.partition("=")
        if not sep:
            raise ValueError(f"expected GUESS=VERDICT, got {item!r}")
        if len(guess) != N or len(verdict) != N:
            raise ValueError(f"{item!r}: guess and verdict must both be {N} characters")
        parse_verdict(verdict)
        for ch, v in zip(guess, verdict):
            # A letter shown in the verdict has to be the guessed letter.
            if v != "*" and v.lower() != ch.lower():
                raise ValueError(f"{item!r}: verdict letter {v!r} does not match guess letter {ch!r}")
        history[guess.upper()] = verdict
    return history


def main(argv=None):
    ap = argparse.ArgumentParser(description="wordhint — list words consistent with past verdicts")
    ap.add_argument("pairs", nargs="*", metavar="GUESS=VERDICT")
    ap.add_argument("--N", type=int, default=5, help="word length (e.g., 5 or 6)")
    ap.add_argument("--dictionary",
                    help="path to word list (default: bundled words_N.txt)")
    ap.add_argument("--workers", type=int, help="processes to shard the scan across")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically (default: dictionary order)")
    ap.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        history = parse_history(args.pairs, args.N)
    except ValueError as e:
        ap.error(str(e))

    words = load_dictionary(args.dictionary or default_dictionary_path(args.N), args.N)
    found = filter_candidates(history, words, args.N, workers=args.workers)
    if args.sort:
        found = sorted(found)

    print(f"{len(found)} possible word(s)")
    for w in found:
        print(w)
    return found


if __name__ == "__main__":
    main()

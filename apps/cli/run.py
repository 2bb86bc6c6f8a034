# apps/cli/run.py
"""
Batch self-play over the dictionary.

This script:
  1) Validates the dictionary (prints count + SHA).
  2) Plays one game per secret, always guessing a random word from the
     current candidate list, with a tqdm progress bar.
  3) Writes:
       - CSV:  per-game results + guess/verdict history columns
       - JSON: manifest with config, dictionary hash, git commit, win rate

A game can only be lost on turns, never on an empty candidate list; the
harness raises if the filter ever rules out the real secret.

Usage:
    python -m apps.cli.run --sample 200 --seed 123
"""

from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path

from tqdm import tqdm

from wordhint.datasets import default_dictionary_path, load_dictionary, pretty_summary, validate_dictionary
from wordhint.game import GameConfig, GameSession, MAX_TURNS
from wordhint.harness import git_commit_or_unknown, run_case, timestamp_id, write_csv, write_manifest


def main(argv=None):
    ap = argparse.ArgumentParser(description="wordhint — batch self-play")
    ap.add_argument("--N", type=int, default=5, help="word length (e.g., 5 or 6)")
    ap.add_argument("--dictionary",
                    help="path to word list (default: bundled words_N.txt)")
    ap.add_argument("--max-turns", type=int, default=MAX_TURNS, help="guesses per game")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of secrets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    path = str(args.dictionary or default_dictionary_path(args.N))

    # 1) Validate and summarise the dictionary
    rep = validate_dictionary(args.N, path)
    print(pretty_summary(rep))

    # 2) Load and build one shared session
    words = load_dictionary(path, args.N)
    config = GameConfig(N=args.N, max_turns=args.max_turns)
    session = GameSession(words, config=config)

    # 3) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    cases = list(session.dictionary)
    if args.sample and args.sample < len(cases):
        rng.shuffle(cases)
        cases = cases[: args.sample]

    # 4) Play
    results = []
    for idx, secret in enumerate(tqdm(cases, ncols=80, desc="Playing", unit="game",
                                      disable=args.no_progress), 1):
        per_seed = args.seed + idx * 1013904223  # LCG-ish stride to avoid collisions
        results.append(run_case(session, secret, seed=per_seed))

    wins = sum(1 for r in results if r["success"])
    print(f"Won {wins}/{len(results)}")

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns, N=args.N)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "num_cases": len(results),
        "wins": wins,
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return results


if __name__ == "__main__":
    main()

"""
Self-play harness.

- run_case:  play one game against a known secret by always guessing a
             random word from the current candidate list.
- run_batch: run many secrets in sequence (optionally a sample prefix).

Every guess goes through GameSession.submit() and every candidate list
through GameSession.candidates(), so a batch exercises the same path an
interactive player does. A guess drawn from the candidates is consistent by
construction; a game that ever runs out of candidates means the scorer and
the filter disagree, and is reported as a RuntimeError.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Dict, Iterable, List, Optional

from wordhint.game import GameConfig, GameSession

log = logging.getLogger(__name__)


def run_case(session: GameSession, secret: str, *, seed: Optional[int] = None) -> Dict:
    """
    Play one game to completion (win or turn budget exhausted).

    Args:
        session: the session to drive; new_game(secret) is called on it
        secret:  the hidden word for this case
        seed:    RNG seed for reproducible candidate picks

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, verdict)]), secret (str)
    """
    rng = random.Random(seed)
    session.new_game(secret)

    t0 = time.perf_counter()
    while not session.is_over:
        candidates = session.candidates()
        if not candidates:
            raise RuntimeError(
                f"no candidates left for secret {session.secret!r} after {session.history}")
        session.submit(candidates[rng.randrange(len(candidates))])
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "success": session.is_won,
        "guesses": session.turn,
        "time_ms": dt,
        "history": list(session.rows),
        "secret": session.secret,
    }


def run_batch(
        dictionary: Iterable[str],
        secrets: Iterable[str],
        *,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        sample: Optional[int] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back with one shared session. If `sample` is
    given, only the first K secrets are played.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases.
    """
    session = GameSession(dictionary, config=config)
    pool = list(secrets)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, secret in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(session, secret, seed=case_seed))

    wins = sum(1 for r in out if r["success"])
    log.info("played %d game(s), %d won", len(out), wins)
    return out

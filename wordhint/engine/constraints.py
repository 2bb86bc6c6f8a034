"""
Candidate filtering given game history.

Given:
  - a history of (guess, verdict) pairs (a mapping or a sequence of pairs)
  - a dictionary of words
  - target word length N

Return:
  - dictionary words that would have produced exactly the recorded verdict
    for EVERY guess, in dictionary order.

Consistency is decided by re-running the scorer against each candidate and
comparing verdict strings. Reading constraints straight out of the clue
characters would need its own duplicate-letter rules and can drift from the
scorer's tie-break, so it is never done here.
"""

from __future__ import annotations

import math
from concurrent.futures import ProcessPoolExecutor
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .errors import LengthMismatch
from .scoring import WORD_LENGTH, score

Pair = Tuple[str, str]  # (guess, verdict)
History = Union[Mapping[str, str], Iterable[Pair]]


def _pairs(history: History) -> List[Pair]:
    if isinstance(history, Mapping):
        return list(history.items())
    return [(g, v) for g, v in history]


def _consistent(word: str, pairs: Sequence[Pair], N: int) -> bool:
    for g, verdict in pairs:
        # First disagreement rules the candidate out.
        if score(g, word, N) != verdict:
            return False
    return True


def _survivors(job: Tuple[Sequence[Pair], Sequence[str], int]) -> List[str]:
    pairs, chunk, N = job
    return [w for w in chunk if len(w) == N and _consistent(w, pairs, N)]


def filter_candidates(
        history: History,
        dictionary: Iterable[str],
        N: int = WORD_LENGTH,
        *,
        workers: Optional[int] = None,
) -> List[str]:
    """
    Keep the dictionary words consistent with every (guess, verdict) seen so far.

    Args:
      history    : mapping guess -> verdict, or iterable of (guess, verdict)
      dictionary : candidate words; entries are returned exactly as given
      N          : word length
      workers    : if > 1, shard the scan across that many processes; the
                   result is still in dictionary order

    Returns:
      List[str] of consistent candidates. An empty history returns the whole
      dictionary unchanged. Entries whose length isn't N are dropped once
      there is any history, since they can't reproduce an N-symbol verdict.

    Raises:
      LengthMismatch if a history guess isn't N long.
    """
    pairs = _pairs(history)
    words = list(dictionary)
    if not pairs:
        return words
    for g, _ in pairs:
        if len(g) != N:
            raise LengthMismatch(g, None, N)

    if workers is None or workers <= 1 or len(words) < 2:
        return _survivors((pairs, words, N))

    # Several chunks per worker keeps the pool busy when some chunks finish early.
    size = max(1, math.ceil(len(words) / (workers * 4)))
    jobs = [(pairs, words[i:i + size], N) for i in range(0, len(words), size)]
    out: List[str] = []
    with ProcessPoolExecutor(max_workers=workers) as ex:
        # map() yields in submission order, so dictionary order is preserved.
        for part in ex.map(_survivors, jobs):
            out.extend(part)
    return out

"""
One player's game: the secret, the turn budget and the accumulated history.

The session is an explicit object owned by the front end; nothing here is
module-level state, so several sessions can coexist (tests, self-play,
an interactive CLI) and the engine functions stay pure.

Flow per accepted guess (mirrors an enter-key handler):
  1) strip/normalise the input
  2) check_guess(): length, then dictionary membership
  3) score against the secret and record (GUESS, verdict)
  4) the caller renders the verdict and inspects is_won / is_over
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from wordhint.engine import (
    WORD_LENGTH, GameOver, LengthMismatch, UnknownWord,
    check_guess, filter_candidates, score,
)
from .selection import UniformChooser

log = logging.getLogger(__name__)

# Classic turn budget.
MAX_TURNS = 6

Chooser = Callable[[Sequence[str]], str]


@dataclass
class GameConfig:
    """Per-session knobs. N is the word length used everywhere."""
    N: int = WORD_LENGTH
    max_turns: int = MAX_TURNS

    def __post_init__(self):
        if self.N < 1:
            raise ValueError(f"N must be positive; got {self.N}")
        if self.max_turns < 1:
            raise ValueError(f"max_turns must be positive; got {self.max_turns}")


def normalise_dictionary(words: Iterable[str], N: int) -> List[str]:
    """Lowercase, strip, drop blanks and wrong-length entries, dedupe in order."""
    seen = set()
    out: List[str] = []
    for w in words:
        w = w.strip().lower()
        if len(w) != N or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out


class GameSession:
    def __init__(
            self,
            dictionary: Iterable[str],
            *,
            config: Optional[GameConfig] = None,
            chooser: Optional[Chooser] = None,
            secret: Optional[str] = None,
    ):
        self.config = config or GameConfig()
        self.dictionary: List[str] = normalise_dictionary(dictionary, self.config.N)
        if not self.dictionary:
            raise ValueError(f"dictionary has no {self.config.N}-letter words")
        self._lookup = frozenset(self.dictionary)
        self.chooser: Chooser = chooser or UniformChooser()
        self.secret: str = ""
        self._won = False
        self.rows: List[Tuple[str, str]] = []
        self.new_game(secret)

    # ---- lifecycle ----

    def new_game(self, secret: Optional[str] = None) -> None:
        """Pick (or accept) a new secret and forget the previous history."""
        N = self.config.N
        if secret is None:
            secret = self.chooser(self.dictionary)
        secret = secret.strip().lower()
        if len(secret) != N:
            raise LengthMismatch(secret, None, N)
        if secret not in self._lookup:
            raise UnknownWord(secret)
        self.secret = secret
        self.rows = []
        self._won = False
        log.debug("new game: N=%d, %d dictionary words", N, len(self.dictionary))

    def submit(self, guess: str) -> str:
        """
        Score one guess and record it.

        Raises:
          GameOver       : the game already ended
          LengthMismatch : wrong number of letters
          UnknownWord    : not in the dictionary
        """
        if self.is_over:
            raise GameOver("the game is over; start a new one")
        g = check_guess(guess, self._lookup, self.config.N)
        verdict = score(g, self.secret, self.config.N)
        self.rows.append((g.upper(), verdict))
        # Decided on the words, not the rendered verdict: non-letter symbols
        # render the same for exact and present.
        self._won = g == self.secret
        log.debug("turn %d: %s -> %s", self.turn, g.upper(), verdict)
        return verdict

    # ---- state ----

    @property
    def history(self) -> Dict[str, str]:
        """Guess -> verdict, in submission order."""
        return dict(self.rows)

    @property
    def turn(self) -> int:
        return len(self.rows)

    @property
    def remaining_turns(self) -> int:
        return max(0, self.config.max_turns - self.turn)

    @property
    def is_won(self) -> bool:
        return self._won

    @property
    def is_lost(self) -> bool:
        return not self.is_won and self.turn >= self.config.max_turns

    @property
    def is_over(self) -> bool:
        return self.is_won or self.is_lost

    def candidates(self, workers: Optional[int] = None) -> List[str]:
        """Dictionary words still consistent with every verdict so far."""
        out = filter_candidates(self.history, self.dictionary, self.config.N, workers=workers)
        log.debug("%d candidate(s) after %d guess(es)", len(out), self.turn)
        return out

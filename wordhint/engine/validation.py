"""
Caller-side guess validation.

The scorer accepts any symbols of the right length; deciding whether a guess
is a real word belongs to whoever owns the dictionary. This module answers
"is this guess acceptable right now?":
  - it has exact length N
  - it exists in the provided `allowed` collection (case-insensitive)

validate_guess() returns a bool; check_guess() raises the matching error so
a front end can pick the message.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable, Union

from .errors import LengthMismatch, UnknownWord
from .scoring import WORD_LENGTH

Allowed = Union[AbstractSet[str], Iterable[str]]


def _as_lookup(allowed: Allowed) -> AbstractSet[str]:
    # Sets are assumed to be normalised already (GameSession keeps one).
    if isinstance(allowed, AbstractSet):
        return allowed
    return {a.strip().lower() for a in allowed}


def check_guess(word: str, allowed: Allowed, N: int = WORD_LENGTH) -> str:
    """
    Return the normalised (lowercase) guess, or raise.

    Raises:
      LengthMismatch : the guess isn't N symbols long
      UnknownWord    : the guess isn't in `allowed`

    Notes:
      - Pass a pre-built lowercase set when calling in a loop; any other
        iterable is turned into a set on every call.
    """
    w = word.strip().lower()
    if len(w) != N:
        raise LengthMismatch(w, None, N)
    if w not in _as_lookup(allowed):
        raise UnknownWord(word)
    return w


def validate_guess(word: str, allowed: Allowed, N: int = WORD_LENGTH) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.
    """
    if not isinstance(word, str):
        return False
    try:
        check_guess(word, allowed, N)
    except (LengthMismatch, UnknownWord):
        return False
    return True

"""
Verdict scoring for a single (guess, secret) pair.

Serialized verdict conventions (one symbol per guess position):
  - 'A'..'Z' : exact   = guessed letter in the correct position (upper case)
  - 'a'..'z' : present = guessed letter elsewhere in the secret (lower case)
  - '*'      : absent  = no unconsumed occurrence left in the secret

Examples (secret, guess -> verdict):
  CLASS, SASSY -> "sa*S*"
  FLUFF, OFFER -> "*ff**"
  STACK, TASTE -> "tas**"
  MYTHS, HITCH -> "h*T**"

Algorithm (two-pass with explicit consumption flags):
  1) First pass marks exact matches and consumes both positions.
  2) Second pass walks the remaining guess positions left to right; each one
     takes the lowest-indexed unconsumed secret position holding the same
     letter. That tie-break decides WHICH copy of a repeated guess letter is
     credited, so the scan order is part of the observable output.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from .errors import LengthMismatch

# Default word length; every function takes N to override it.
WORD_LENGTH = 5

# Sentinel used for absent positions in a serialized verdict.
ABSENT = "*"

Mark = Literal["exact", "present", "absent"]
EXACT: Mark = "exact"
PRESENT: Mark = "present"
MISS: Mark = "absent"


def grade(guess: str, secret: str, N: Optional[int] = None) -> List[Mark]:
    """
    Structured verdict for `guess` against `secret`.

    Raises LengthMismatch if the two lengths differ, or if `N` is given and
    either word is not exactly N long. Nothing is ever truncated or padded.
    """
    n = len(secret) if N is None else N
    if len(guess) != n or len(secret) != n:
        raise LengthMismatch(guess, secret, n)

    # Compare case-insensitively; the rendered verdict re-applies case.
    g = guess.lower()
    s = secret.lower()
    # Some code points lower-case to more than one (e.g. "\u0130").
    if len(g) != n or len(s) != n:
        raise LengthMismatch(guess, secret, n)

    marks: List[Mark] = [MISS] * n
    secret_used = [False] * n
    guess_used = [False] * n

    # Pass 1: exact matches.
    for i in range(n):
        if g[i] == s[i]:
            marks[i] = EXACT
            secret_used[i] = True
            guess_used[i] = True

    # Pass 2: misplaced matches, first unconsumed occurrence wins.
    for i in range(n):
        if guess_used[i]:
            continue
        for j in range(n):
            if not secret_used[j] and s[j] == g[i]:
                marks[i] = PRESENT
                secret_used[j] = True
                break

    return marks


def render(guess: str, marks: List[Mark]) -> str:
    """Serialize marks against the guessed letters."""
    out = []
    for ch, m in zip(guess, marks):
        if m == EXACT:
            out.append(ch.upper())
        elif m == PRESENT:
            out.append(ch.lower())
        else:
            out.append(ABSENT)
    return "".join(out)


def score(guess: str, secret: str, N: Optional[int] = None) -> str:
    """
    Compute the serialized verdict for `guess` against `secret`.

    Preconditions:
      - len(guess) == len(secret) (== N when N is given)

    Examples:
      score("SASSY", "CLASS") -> "sa*S*"
      score("hitch", "myths") -> "h*T**"
    """
    return render(guess, grade(guess, secret, N))


def parse_verdict(verdict: str) -> List[Mark]:
    """
    Inverse of render(): recover marks from a serialized verdict.

    Only cased letters and the ABSENT sentinel are meaningful; anything else
    raises ValueError.
    """
    marks: List[Mark] = []
    for ch in verdict:
        if ch == ABSENT:
            marks.append(MISS)
        elif ch.isupper():
            marks.append(EXACT)
        elif ch.islower():
            marks.append(PRESENT)
        else:
            raise ValueError(f"unrecognised verdict symbol {ch!r} in {verdict!r}")
    return marks


def is_solved(verdict: str) -> bool:
    """True if every position of the verdict is an exact match."""
    return bool(verdict) and all(ch != ABSENT and not ch.islower() for ch in verdict)

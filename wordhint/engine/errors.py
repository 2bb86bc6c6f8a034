"""
Exceptions raised by the engine and the game session.

Everything derives from WordhintError so a front end can catch the whole
family in one place. The concrete classes also derive from the closest
builtin (ValueError, LookupError) so plain callers don't need to know about
this module.
"""

from __future__ import annotations


class WordhintError(Exception):
    """Base class for all wordhint errors."""


class LengthMismatch(WordhintError, ValueError):
    """A guess or secret does not have the required word length."""

    def __init__(self, guess: str, secret: str | None, expected: int):
        self.guess = guess
        self.secret = secret
        self.expected = expected
        if secret is None:
            msg = f"{guess!r} has length {len(guess)}, expected {expected}"
        else:
            msg = (f"guess {guess!r} (length {len(guess)}) and secret {secret!r} "
                   f"(length {len(secret)}) must both have length {expected}")
        super().__init__(msg)


class UnknownWord(WordhintError, LookupError):
    """The guess is not in the session dictionary."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"{word!r} is not in the dictionary")


class GameOver(WordhintError):
    """A guess was submitted after the game already finished."""

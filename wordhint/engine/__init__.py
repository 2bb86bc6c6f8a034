from .errors import WordhintError, LengthMismatch, UnknownWord, GameOver
from .scoring import WORD_LENGTH, ABSENT, score, grade, render, parse_verdict, is_solved
from .constraints import filter_candidates
from .validation import validate_guess, check_guess

__all__ = [
    "WORD_LENGTH", "ABSENT",
    "score", "grade", "render", "parse_verdict", "is_solved",
    "filter_candidates",
    "validate_guess", "check_guess",
    "WordhintError", "LengthMismatch", "UnknownWord", "GameOver",
]

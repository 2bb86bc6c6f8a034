"""Verdict scoring and candidate filtering for word-guessing games."""

__version__ = "0.1.0"

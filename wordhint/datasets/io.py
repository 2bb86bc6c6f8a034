from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from wordhint.engine import WORD_LENGTH
from wordhint.game.session import normalise_dictionary

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"


def default_dictionary_path(N: int = WORD_LENGTH) -> Path:
    """Path of the bundled word list for length N (words_N.txt)."""
    return DATA_DIR / f"words_{N}.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_dictionary(p: Path | str, N: int = WORD_LENGTH) -> List[str]:
    """
    Load a newline-separated word list: lowercase, drop blanks and words that
    aren't N long, dedupe keeping first occurrence.
    """
    lines = read_lines(p)
    words = normalise_dictionary(lines, N)
    skipped = sum(1 for ln in lines if ln.strip() and len(ln.strip()) != N)
    if skipped:
        log.warning("%s: skipped %d line(s) that are not %d letters", p, skipped, N)
    log.info("loaded %d words from %s", len(words), p)
    return words

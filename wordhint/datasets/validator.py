"""
Dictionary validator for wordhint.

What this module does:
- Validate a word list file (one word per line) for word length N.
- Enforce formatting rules (lowercase, a–z only, exact length N).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordhint.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary(5, "wordhint/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple


@dataclass
class DictionaryReport:
    """Diagnostics for one word list."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    unique_count: int    # unique valid words
    invalid_lines: int   # lines that are blank, non-alphabetic, wrong case or length
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words and count invalid lines.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have exact length N
      - empty/whitespace-only lines are INVALID
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isalpha() and w.isascii() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_dictionary(N: int, path: str) -> Dict:
    """
    Validate a dictionary file for word length N.

    Returns
    -------
    Dict
        JSON-serializable DictionaryReport; `passed` is strict: the file
        exists, holds at least one word, and has no invalid or duplicate lines.
    """
    p = Path(path)
    if not p.exists():
        rep = DictionaryReport(N, path, False, 0, 0, 0, "", False,
                               [f"dictionary file not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    unique = len(set(words))

    issues: List[str] = []
    if not words:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s)")
    if unique != len(words):
        issues.append(f"dictionary contains {len(words) - unique} duplicate line(s)")

    rep = DictionaryReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=2315 (uniq=2315, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) | {status}"
    )

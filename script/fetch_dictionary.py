"""
Download a word list and write a clean N-letter dictionary.

What it does:
- Downloads the URL (a plain-text word list or an HTML page listing words).
- HTML is reduced to its visible text first.
- Keeps alphabetic tokens of exactly N letters, lowercased.
- De-duplicates while preserving source order (or sorts with --sort).

Usage:
    python -m script.fetch_dictionary --url https://example.org/words.txt \
        --out wordhint/datasets/data/words_5.txt
    python -m script.fetch_dictionary --N 6 --sort --url ... --out words_6.txt
"""

import argparse
import re
from pathlib import Path

import requests
from bs4 import BeautifulSoup

from wordhint.datasets import write_lines

TOKEN_RE = re.compile(r"[A-Za-z]+")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(text: str, N: int, html: bool = False) -> list[str]:
    if html:
        text = BeautifulSoup(text, "html.parser").get_text("\n", strip=True)
    words = [t.lower() for t in TOKEN_RE.findall(text) if len(t) == N]
    return unique_preserve_order(words)


def fetch_words(url: str, N: int) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    html = "html" in r.headers.get("Content-Type", "")
    return extract_words(r.text, N, html=html)


def main():
    ap = argparse.ArgumentParser(description="Fetch an N-letter dictionary")
    ap.add_argument("--url", required=True)
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--out", default="wordhint/datasets/data/words_5.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = fetch_words(args.url, args.N)
    if args.sort:
        words = sorted(words)

    write_lines(words, Path(args.out))
    print(f"Wrote {len(words)} unique {args.N}-letter words -> {args.out}")


if __name__ == "__main__":
    main()

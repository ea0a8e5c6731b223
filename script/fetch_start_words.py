"""
Collect candidate start words from a web page and write a clean list.

What it does:
- Downloads the page and extracts its visible text.
- Keeps alphabetic tokens of exactly --length letters, lowercased.
- Optionally keeps only tokens present in a dictionary file.
- De-duplicates while preserving page order, and writes to file.

Usage:
    python -m script.fetch_start_words --url https://example.org/word-list \
        --dictionary wordscramble/datasets/data/dictionary_en.txt \
        --out wordscramble/datasets/data/start.txt
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup

from wordscramble.config import MIN_START_LENGTH
from wordscramble.datasets import load_words, write_lines

TOKEN_RE = re.compile(r"[A-Za-z]+")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(html: str, length: int) -> list[str]:
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    text = soup.get_text("\n", strip=True)
    words = [t.lower() for t in TOKEN_RE.findall(text) if len(t) == length]
    return unique_preserve_order(words)


def fetch_words(url: str, length: int) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_words(r.text, length)


def main():
    ap = argparse.ArgumentParser(description="Extract candidate start words from a page")
    ap.add_argument("--url", required=True)
    ap.add_argument("--length", type=int, default=MIN_START_LENGTH)
    ap.add_argument("--dictionary", help="keep only words listed in this file")
    ap.add_argument("--out", default="wordscramble/datasets/data/start.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "page order")
    args = ap.parse_args()

    words = fetch_words(args.url, args.length)
    if args.dictionary:
        known = set(load_words(args.dictionary))
        words = [w for w in words if w in known]
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")

if __name__ == "__main__":
    main()

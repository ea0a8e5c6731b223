"""
Project-wide defaults.

The CLIs expose each of these as an argparse option; library code takes them
as keyword arguments so nothing reads global state at call time.
"""

from __future__ import annotations

from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent / "datasets" / "data"

# Bundled lists (one lowercase word per line)
START_WORDS_PATH = DATA_DIR / "start.txt"
DICTIONARY_PATHS = {"en": DATA_DIR / "dictionary_en.txt"}

DEFAULT_LANGUAGE = "en"

# Substituted by callers when the start list cannot be read.
FALLBACK_WORD = "silkworm"

# Start words shorter than this are flagged by the dataset validator.
MIN_START_LENGTH = 8

# Each start word must spell at least this many other dictionary words.
MIN_SPELLABLE = 5

# Harness turn budget per round.
DEFAULT_MAX_TURNS = 25

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)


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


def load_words(p: Path | str) -> List[str]:
    """Newline-separated word list, lowercased, blanks dropped."""
    return [w.strip().lower() for w in read_lines(p) if w.strip()]


def load_start_words(p: Path | str, *, fallback: str | None = None) -> List[str]:
    """
    Load the start-word list for new rounds.

    With a `fallback`, a missing or empty file yields [fallback] instead of
    failing; without one, a missing file raises FileNotFoundError and an
    empty file returns [] (which the engine refuses to start a round with).
    """
    try:
        words = load_words(p)
    except FileNotFoundError:
        if fallback is None:
            raise
        logger.warning("start word list %s not found; using fallback %r", p, fallback)
        return [fallback]

    if not words and fallback is not None:
        logger.warning("start word list %s is empty; using fallback %r", p, fallback)
        return [fallback]
    return words

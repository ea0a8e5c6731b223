"""
Letter-level helpers for the scramble rules.

A guess is "spellable" from a target when every character of the guess can be
matched to a distinct character of the target. Repeated letters in the guess
must not exceed the repeats available in the target:

  can_spell("silk", "silkworm")    -> True
  can_spell("silkworms", "silkworm") -> False   (only one 's' available)
  can_spell("mom", "silkworm")     -> False   (only one 'm' available)
"""

from __future__ import annotations

from typing import Iterable, List


def normalize(raw: str) -> str:
    """Lowercase and strip surrounding whitespace/newlines."""
    return raw.lower().strip()


def can_spell(word: str, target: str) -> bool:
    """
    Return True if `word` can be built from the letters of `target`, each
    target letter being consumed at most once.

    Walks the guess left to right and removes one matching occurrence from a
    mutable copy of the target; the first letter with no match fails.
    """
    remaining = list(target)
    for ch in word:
        try:
            remaining.remove(ch)
        except ValueError:
            return False
    return True


def spellable_words(lexicon: Iterable[str], target: str) -> List[str]:
    """
    All lexicon words that can be spelled from `target`.

    Words are normalized first; blanks and repeats are dropped and the
    lexicon's order is preserved.
    """
    out: List[str] = []
    seen = set()
    for w in lexicon:
        w = normalize(w)
        if not w or w in seen:
            continue
        seen.add(w)
        if can_spell(w, target):
            out.append(w)
    return out

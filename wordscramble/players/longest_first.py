"""
Longest-First player.

Plays the longest unused spellable word each turn; ties between words of the
same length are broken with the seeded RNG.
"""

from __future__ import annotations

from typing import List
from .base import BasePlayer, register


@register
class LongestFirstPlayer(BasePlayer):
    id = "longest_first"
    name = "Longest First"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str | None:
        used = set(state["used"])

        best_len = 0
        best_words: List[str] = []
        for w in state["spellable"]:
            if w in used:
                continue
            if len(w) > best_len:
                best_len = len(w)
                best_words = [w]
            elif len(w) == best_len:
                best_words.append(w)

        if not best_words:
            return None
        return best_words[self.rng.randrange(len(best_words))]

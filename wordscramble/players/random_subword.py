"""
Random Subword player.

Strategy:
  - Pick uniformly at random among lexicon words spellable from the target
    that haven't been accepted yet.
  - Give up once nothing is left.

A baseline: every guess it makes should be accepted.
"""

from __future__ import annotations

from typing import List
from .base import BasePlayer, register


@register
class RandomSubwordPlayer(BasePlayer):
    id = "random_subword"
    name = "Random Subword"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str | None:
        used = set(state["used"])
        pool: List[str] = [w for w in state["spellable"] if w not in used]
        if not pool:
            return None
        return pool[self.rng.randrange(len(pool))]

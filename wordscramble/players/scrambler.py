"""
Scrambler player.

Strategy:
  - Shuffle a random slice (3..len(target) letters) of the target and submit
    it. These are always possible but usually not real words.
  - Every few turns resubmit the previous accepted word, to probe the
    originality rule.
  - After MAX_MISSES rejections, switch to known spellable words so the
    round still makes progress.

Mostly useful for exercising the rejection paths end to end.
"""

from __future__ import annotations

from .base import BasePlayer, register


@register
class ScramblerPlayer(BasePlayer):
    id = "scrambler"
    name = "Scrambler"
    version = "1.0.0"

    MAX_MISSES = 8
    REPEAT_EVERY = 5
    MIN_LETTERS = 3

    def __init__(self):
        super().__init__()
        self.misses = 0

    def reset(self, *, seed=None) -> None:
        super().reset(seed=seed)
        self.misses = 0

    def next_guess(self, state: dict) -> str | None:
        target: str = state["target"]
        used = state["used"]
        last = state.get("last")
        if last is not None and last[1] is not None and not last[1].accepted:
            self.misses += 1

        if used and state["turn"] % self.REPEAT_EVERY == 0:
            return used[0]

        if self.misses < self.MAX_MISSES and len(target) >= self.MIN_LETTERS:
            letters = list(target)
            self.rng.shuffle(letters)
            k = self.rng.randint(self.MIN_LETTERS, len(letters))
            return "".join(letters[:k])

        remaining = [w for w in state["spellable"] if w not in set(used)]
        if not remaining:
            return None
        return remaining[self.rng.randrange(len(remaining))]

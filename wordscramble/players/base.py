from __future__ import annotations
import random
from typing import Dict, Type

# ---- Global player registry ----
REGISTRY: Dict[str, Type["BasePlayer"]] = {}


def register(cls: Type["BasePlayer"]) -> Type["BasePlayer"]:
    """
    Decorator: @register on a player class adds it to REGISTRY by its `id`.
    """
    pid = getattr(cls, "id", None)
    if not pid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if pid in REGISTRY:
        raise ValueError(f"Duplicate player id: {pid}")
    REGISTRY[pid] = cls
    return cls


# ---- Base class that players inherit ----
class BasePlayer:
    """
    An automated guesser. Each turn the harness passes a state dict:

      - "turn":      1-based turn number
      - "target":    the round's target word
      - "used":      accepted guesses so far (most recent first)
      - "spellable": lexicon words spellable from the target
      - "last":      (guess, outcome) of the previous turn, or None

    next_guess() returns the next raw guess, or None to end the round.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.rng = random.Random()

    def reset(self, *, seed: int | None = None) -> None:
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str | None:
        raise NotImplementedError("Override in subclass")

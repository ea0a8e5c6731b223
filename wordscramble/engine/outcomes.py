"""
Validation outcomes and the text shown to a player for each of them.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class ValidationOutcome(str, Enum):
    ACCEPTED = "accepted"
    REJECTED_NOT_ORIGINAL = "not_original"
    REJECTED_NOT_POSSIBLE = "not_possible"
    REJECTED_NOT_REAL = "not_real"

    @property
    def accepted(self) -> bool:
        return self is ValidationOutcome.ACCEPTED


def describe(outcome: ValidationOutcome, target: str) -> Tuple[str, str]:
    """
    Return a (title, message) pair suitable for an alert or a console line.
    """
    if outcome is ValidationOutcome.REJECTED_NOT_ORIGINAL:
        return "Word already used", "be more original"
    if outcome is ValidationOutcome.REJECTED_NOT_POSSIBLE:
        return "Word not possible", f"can't spell that word from '{target}'"
    if outcome is ValidationOutcome.REJECTED_NOT_REAL:
        return "Word is not real", "Do you know english?"
    return "Word accepted", "Nice one"

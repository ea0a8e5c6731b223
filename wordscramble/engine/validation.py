"""
Guess validation rules.

This module answers the question: "Is this guess acceptable right now?"
A normalized guess is accepted iff, checked in this order:
  - it has not been accepted before in this round      (originality)
  - it can be spelled from the target's letters         (possibility)
  - the dictionary knows it in the configured language  (reality)

The first failing rule decides the outcome. There is no exemption for the
target word itself: it is accepted only if the dictionary knows it.

Everything here is pure; the engine owns the round state and decides what to
do with the outcome.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from .letters import can_spell
from .outcomes import ValidationOutcome

if TYPE_CHECKING:
    from wordscramble.dictionary import Dictionary


def is_original(word: str, used: Iterable[str]) -> bool:
    """True if `word` is not among the already-accepted guesses."""
    return word not in used


def is_possible(word: str, target: str) -> bool:
    """True if `word` is a letter-multiset subset of `target`."""
    return can_spell(word, target)


def is_real(word: str, dictionary: Dictionary, language: str) -> bool:
    """
    Ask the dictionary oracle whether `word` is a known word.

    `dictionary` is anything with `is_known_word(word, language) -> bool`.
    """
    return bool(dictionary.is_known_word(word, language))


def validate_guess(
        word: str,
        *,
        target: str,
        used: Iterable[str],
        dictionary: Dictionary,
        language: str,
) -> ValidationOutcome:
    """
    Run the three rules on an already-normalized, non-empty `word`.

    Args:
      word       : normalized guess
      target     : the round's target word
      used       : accepted guesses so far (membership only)
      dictionary : oracle with is_known_word(word, language)
      language   : language code passed to the oracle

    Returns:
      The first rejection that applies, or ValidationOutcome.ACCEPTED.
    """
    if not is_original(word, used):
        return ValidationOutcome.REJECTED_NOT_ORIGINAL
    if not is_possible(word, target):
        return ValidationOutcome.REJECTED_NOT_POSSIBLE
    if not is_real(word, dictionary, language):
        return ValidationOutcome.REJECTED_NOT_REAL
    return ValidationOutcome.ACCEPTED

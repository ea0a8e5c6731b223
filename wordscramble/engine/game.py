"""
Round state for the word-scramble game.

A round is one target word plus the guesses accepted against it. The engine
is synchronous and holds no locks; callers that share an engine across
threads must serialize access themselves.

Outcomes are both returned from submit_guess() and pushed to subscribed
listeners, so a presentation layer can react to results without watching
the engine's fields.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Callable, Iterable, List, Optional, Tuple

from wordscramble.config import DEFAULT_LANGUAGE
from wordscramble.store.records import RoundRecord, utc_now_iso

from .letters import normalize
from .outcomes import ValidationOutcome
from .validation import validate_guess

if TYPE_CHECKING:
    from wordscramble.dictionary import Dictionary

logger = logging.getLogger(__name__)

Listener = Callable[[str, ValidationOutcome], None]


class EmptyWordListError(ValueError):
    """Raised when a round is started without any usable candidate word."""


class RoundNotStartedError(RuntimeError):
    """Raised when a guess is submitted before any round has started."""


class WordGameEngine:
    """
    Owns the current target word and the accepted guesses for that round.

    Args:
      dictionary : oracle with is_known_word(word, language) -> bool
      language   : language code used for dictionary lookups
      seed       : optional seed for the target-word RNG
    """

    def __init__(self, dictionary: Dictionary, *, language: str = DEFAULT_LANGUAGE,
                 seed: int | None = None):
        self.dictionary = dictionary
        self.language = language
        self.rng = random.Random(seed)

        self._target: Optional[str] = None
        self._used: List[str] = []  # most recent first
        self._started_at: Optional[str] = None
        self._listeners: List[Listener] = []

    # ---- read-only state ----

    @property
    def target_word(self) -> Optional[str]:
        return self._target

    @property
    def used_words(self) -> Tuple[str, ...]:
        return tuple(self._used)

    # ---- round lifecycle ----

    def start_round(self, word_list: Iterable[str]) -> str:
        """
        Pick a new target uniformly at random and clear the guess history.

        Entries are normalized and blanks dropped before drawing. Raises
        EmptyWordListError if nothing usable is left; the current round, if
        any, is left untouched in that case.
        """
        pool = [w for w in (normalize(x) for x in word_list) if w]
        if not pool:
            raise EmptyWordListError("cannot start a round: word list is empty")

        self._target = self.rng.choice(pool)
        self._used = []
        self._started_at = utc_now_iso()
        logger.debug("round started with %d candidates, target=%s", len(pool), self._target)
        return self._target

    def restore_round(self, target: str, used_words: Iterable[str] = (),
                      started_at: str | None = None) -> None:
        """
        Resume a previously saved round.

        `used_words` is expected most-recent-first; repeats after
        normalization are dropped so the history stays duplicate-free.
        """
        t = normalize(target)
        if not t:
            raise EmptyWordListError("cannot restore a round without a target word")

        used: List[str] = []
        for w in used_words:
            w = normalize(w)
            if w and w not in used:
                used.append(w)

        self._target = t
        self._used = used
        self._started_at = started_at
        logger.debug("round restored: target=%s, %d used words", t, len(used))

    def snapshot(self) -> RoundRecord:
        """Current round as a store record (finished_at is left unset)."""
        if self._target is None:
            raise RoundNotStartedError("no round in progress")
        return RoundRecord(
            target=self._target,
            language=self.language,
            used_words=list(self._used),
            started_at=self._started_at,
        )

    # ---- guesses ----

    def submit_guess(self, raw: str) -> Optional[ValidationOutcome]:
        """
        Normalize and evaluate a guess.

        Returns None (and changes nothing) when the normalized guess is empty;
        otherwise the ValidationOutcome. Accepted guesses are inserted at the
        front of the history.
        """
        if self._target is None:
            raise RoundNotStartedError("start a round before submitting guesses")

        guess = normalize(raw)
        if not guess:
            return None

        outcome = validate_guess(
            guess,
            target=self._target,
            used=self._used,
            dictionary=self.dictionary,
            language=self.language,
        )
        if outcome is ValidationOutcome.ACCEPTED:
            self._used.insert(0, guess)

        logger.debug("guess %r -> %s", guess, outcome.value)
        self._emit(guess, outcome)
        return outcome

    # ---- event channel ----

    def subscribe(self, listener: Listener) -> None:
        """Call `listener(guess, outcome)` after every evaluated guess."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _emit(self, guess: str, outcome: ValidationOutcome) -> None:
        for listener in list(self._listeners):
            listener(guess, outcome)

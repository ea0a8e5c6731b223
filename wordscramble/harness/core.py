"""
Experiment harness core primitives.

- run_round: play one round (one target word) with a given player.
- run_batch: run many rounds in sequence.

Rounds go through a real WordGameEngine, so outcomes are exactly what an
interactive player would see. These functions are UI-agnostic and reused by
the CLI apps and the tests.
"""

from __future__ import annotations
import time
from typing import Dict, List, Iterable, Tuple

from wordscramble.config import DEFAULT_LANGUAGE, DEFAULT_MAX_TURNS
from wordscramble.engine import ValidationOutcome, WordGameEngine, spellable_words

OUTCOME_KEYS = [o.value for o in ValidationOutcome]


def _assert_turns(max_turns: int) -> None:
    """Guardrail: a round needs at least one turn."""
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")


def run_round(
        player,
        target: str,
        *,
        dictionary,
        language: str = DEFAULT_LANGUAGE,
        max_turns: int = DEFAULT_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Play one round until the player gives up or the turn budget is spent.

    Args:
        player:     a BasePlayer with reset()/next_guess(state)
        target:     the round's target word
        dictionary: oracle with is_known_word() and words(language)
        language:   dictionary language code
        max_turns:  maximum number of guesses submitted
        seed:       RNG seed for the player's choices

    Returns:
        dict with keys:
            target, turns, accepted, possible, coverage, time_ms,
            one count per outcome value, noop,
            history (list[(guess, outcome value or None)])
    """
    _assert_turns(max_turns)

    lexicon = dictionary.words(language)
    player.reset(seed=seed)

    engine = WordGameEngine(dictionary, language=language)
    engine.restore_round(target)
    target = engine.target_word

    # Words that could be accepted this round (the coverage denominator)
    spellable = [w for w in spellable_words(lexicon, target)
                 if dictionary.is_known_word(w, language)]

    counts = {k: 0 for k in OUTCOME_KEYS}
    noop = 0
    history: List[Tuple[str, str | None]] = []
    last = None

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        state = {
            "turn": turn,
            "target": target,
            "used": list(engine.used_words),
            "spellable": spellable,
            "last": last,
        }
        guess = player.next_guess(state)
        if guess is None:
            break

        outcome = engine.submit_guess(guess)
        if outcome is None:
            noop += 1
        else:
            counts[outcome.value] += 1
        history.append((guess, outcome.value if outcome is not None else None))
        last = (guess, outcome)

    dt = (time.perf_counter() - t0) * 1000.0
    accepted = counts[ValidationOutcome.ACCEPTED.value]
    possible = len(spellable)
    return {
        "target": target,
        "turns": len(history),
        "accepted": accepted,
        "possible": possible,
        "coverage": (accepted / possible) if possible else 0.0,
        "time_ms": dt,
        **counts,
        "noop": noop,
        "history": history,
        "used_words": list(engine.used_words),
    }


def run_batch(
        player,
        targets: Iterable[str],
        *,
        dictionary,
        language: str = DEFAULT_LANGUAGE,
        max_turns: int = DEFAULT_MAX_TURNS,
        seed: int | None = None,
) -> List[Dict]:
    """
    Run many rounds back-to-back.

    Each round's seed is derived from the base seed (seed + index) so runs
    are reproducible but not identical across rounds.
    """
    _assert_turns(max_turns)

    out: List[Dict] = []
    for idx, target in enumerate(targets, start=1):
        round_seed = None if seed is None else (seed + idx)
        r = run_round(
            player, target, dictionary=dictionary, language=language,
            max_turns=max_turns, seed=round_seed,
        )
        out.append(r)
    return out

# apps/cli/play.py
"""
Interactive word-scramble in the terminal.

Type words made from the target's letters. Commands:
  :new   finish this round and start another
  :list  show the words accepted so far
  :quit  save and exit

With --history, finished rounds are appended to a JSON store when a round
ends and on exit; an unfinished round from a previous session is resumed.
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordscramble.config import DEFAULT_LANGUAGE, DICTIONARY_PATHS, FALLBACK_WORD, START_WORDS_PATH
from wordscramble.datasets import load_start_words
from wordscramble.dictionary import WordListDictionary
from wordscramble.engine import ValidationOutcome, WordGameEngine, describe
from wordscramble.store import JsonRoundStore, pop_unfinished, utc_now_iso

logger = logging.getLogger(__name__)


def _print_outcome(engine: WordGameEngine):
    def listener(guess: str, outcome: ValidationOutcome) -> None:
        title, message = describe(outcome, engine.target_word)
        if outcome.accepted:
            print(f"  + {guess} ({len(guess)})  [{len(engine.used_words)} found]")
        else:
            print(f"  ! {title}: {message}")
    return listener


def main():
    ap = argparse.ArgumentParser(description="wordscramble — play in the terminal")
    ap.add_argument("--start", default=str(START_WORDS_PATH), help="path to start-word list")
    ap.add_argument("--dictionary", default=None,
                    help="path to dictionary word list (default: bundled list for --language)")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="dictionary language code")
    ap.add_argument("--seed", type=int, help="RNG seed for target selection")
    ap.add_argument("--history", help="JSON file to load/save rounds")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    dict_path = args.dictionary or DICTIONARY_PATHS.get(args.language)
    if dict_path is None:
        raise SystemExit(f"No bundled dictionary for language {args.language!r}; pass --dictionary")
    dictionary = WordListDictionary.from_files({args.language: dict_path})

    start_words = load_start_words(args.start, fallback=FALLBACK_WORD)

    store = JsonRoundStore(args.history) if args.history else None
    records = store.load() if store else []

    engine = WordGameEngine(dictionary, language=args.language, seed=args.seed)
    engine.subscribe(_print_outcome(engine))

    # Resume the latest unfinished round in this language, if any
    last = pop_unfinished(records, args.language)
    if last is not None:
        engine.restore_round(last.target, last.used_words, started_at=last.started_at)
        print(f"Resuming round started {last.started_label}")
    else:
        engine.start_round(start_words)

    def finish_round() -> None:
        rec = engine.snapshot()
        rec.finished_at = utc_now_iso()
        records.append(rec)
        if store:
            store.save(records)

    print(f"Target: {engine.target_word}   (:new, :list, :quit)")
    for line in sys.stdin:
        cmd = line.strip()
        if cmd == ":quit":
            break
        if cmd == ":new":
            finish_round()
            engine.start_round(start_words)
            print(f"Target: {engine.target_word}")
            continue
        if cmd == ":list":
            for w in engine.used_words:
                print(f"  {len(w)}  {w}")
            continue
        engine.submit_guess(line)

    # Exit keeps the current round open so it can be resumed
    if store:
        store.save(records + [engine.snapshot()])
    logger.info("session ended with %d accepted word(s)", len(engine.used_words))


if __name__ == "__main__":
    main()

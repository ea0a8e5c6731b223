# apps/cli/run.py
"""
CLI entry point for running wordscramble experiments.

This script:
  1) Validates the word lists (prints counts + SHA, ensures start ⊆ dictionary).
  2) Loads the lists and instantiates the requested player.
  3) Plays a batch of rounds with a live progress indicator and writes:
       - CSV:  per-round results + guess/outcome history columns
       - JSON: manifest with config, wordlist hashes, summary stats, git commit
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordscramble.config import (
    DEFAULT_LANGUAGE, DEFAULT_MAX_TURNS, DICTIONARY_PATHS, MIN_SPELLABLE, MIN_START_LENGTH,
    START_WORDS_PATH,
)
from wordscramble.datasets import validate_wordlists, pretty_summary, load_start_words
from wordscramble.dictionary import WordListDictionary
from wordscramble.harness import run_round, summarize, pretty_stats
from wordscramble.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordscramble.players import create_player, get_player_ids


def main():
    """
    Parse CLI args, validate datasets, run the batch with progress, and write outputs.
    """
    player_choices = ", ".join(get_player_ids())

    ap = argparse.ArgumentParser(description="wordscramble — run player experiments")
    ap.add_argument("--player", default="random_subword",
                    help=f"player id (one of: {player_choices})")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="dictionary language code")
    ap.add_argument("--start", default=str(START_WORDS_PATH),
                    help="path to start-word list (round targets)")
    ap.add_argument("--dictionary", default=str(DICTIONARY_PATHS[DEFAULT_LANGUAGE]),
                    help="path to dictionary word list for --language")
    ap.add_argument("--min-length", type=int, default=MIN_START_LENGTH,
                    help="minimum start-word length for validation")
    ap.add_argument("--min-spellable", type=int, default=MIN_SPELLABLE,
                    help="minimum number of words each start word must spell (0 = skip)")
    ap.add_argument("--rounds", type=int,
                    help="play only this many targets (deterministic by seed)")
    ap.add_argument("--max-turns", type=int, default=DEFAULT_MAX_TURNS,
                    help="guess budget per round")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate word lists and print a one-liner summary
    rep = validate_wordlists(args.start, args.dictionary, min_length=args.min_length,
                             min_spellable=args.min_spellable)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")

    # 2) Load lists into memory
    targets = load_start_words(args.start)
    if not targets:
        raise SystemExit(f"No start words in {args.start}")
    dictionary = WordListDictionary.from_files({args.language: args.dictionary})

    # 3) Instantiate player by id
    player = create_player(args.player)

    # 4) Choose rounds (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.rounds and args.rounds < len(targets):
        pool = list(targets)
        rng.shuffle(pool)
        cases = pool[: args.rounds]
    else:
        cases = list(targets)

    total = len(cases)

    # 5) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Playing", unit="round") if mode == "bar" else cases

    # 6) Run batch with live progress
    for idx, target in enumerate(iterator, 1):
        r = run_round(
            player, target,
            dictionary=dictionary,
            language=args.language,
            max_turns=args.max_turns,
            seed=args.seed + idx,
        )
        r["player_id"] = player.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    summary = summarize(results)
    print(pretty_stats(summary))

    # 7) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns, language=args.language)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_rounds": len(results),
        "player_id": player.id,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()

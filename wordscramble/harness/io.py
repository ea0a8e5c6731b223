"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:     flatten per-round results into a tidy CSV (one row per round).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import logging
import subprocess
import datetime as dt

from wordscramble.engine import ValidationOutcome

logger = logging.getLogger(__name__)

OUTCOME_COLUMNS = [o.value for o in ValidationOutcome]


def write_csv(results: List[Dict], path: str, max_turns: int, language: str) -> str:
    """
    Serialize a batch of round results to CSV.

    Schema (columns):
      player, language, target, turns, accepted, not_original, not_possible,
      not_real, noop, possible, coverage, time_ms,
      guess_1, outcome_1, ..., guess_max_turns, outcome_max_turns

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["player", "language", "target", "turns"] + OUTCOME_COLUMNS
    fields += ["noop", "possible", "coverage", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"outcome_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "player": r.get("player_id", "?"),
                "language": language,
                "target": r["target"],
                "turns": r["turns"],
                "noop": r.get("noop", 0),
                "possible": r["possible"],
                "coverage": round(float(r["coverage"]), 4),
                "time_ms": round(float(r["time_ms"]), 3),
            }
            for k in OUTCOME_COLUMNS:
                row[k] = r.get(k, 0)

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, outcome = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"outcome_{i}"] = outcome or ""
                else:
                    row[f"guess_{i}"] = ""
                    row[f"outcome_{i}"] = ""

            w.writerow(row)

    logger.debug("wrote %d rows to %s", len(results), p)
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (player, language, paths, seed, rounds, outdir)
      - wordlists: output of datasets.validate_wordlists(...)
      - summary: output of harness.stats.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"

"""
Aggregate statistics over a batch of round results.
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np

from wordscramble.engine import ValidationOutcome

REJECTIONS = [o.value for o in ValidationOutcome if o is not ValidationOutcome.ACCEPTED]


def summarize(results: List[Dict]) -> Dict:
    """
    Mean/median/p90 of accepted words and coverage, plus rejection totals.
    Returns plain Python floats/ints so the dict stays JSON-serializable.
    """
    if not results:
        return {"rounds": 0}

    accepted = np.array([r["accepted"] for r in results], dtype=float)
    coverage = np.array([r["coverage"] for r in results], dtype=float)
    time_ms = np.array([r["time_ms"] for r in results], dtype=float)

    out = {
        "rounds": len(results),
        "accepted_mean": float(accepted.mean()),
        "accepted_median": float(np.median(accepted)),
        "accepted_p90": float(np.percentile(accepted, 90)),
        "coverage_mean": float(coverage.mean()),
        "coverage_median": float(np.median(coverage)),
        "time_ms_mean": float(time_ms.mean()),
    }
    for key in REJECTIONS:
        out[f"{key}_total"] = int(sum(r.get(key, 0) for r in results))
    return out


def pretty_stats(summary: Dict) -> str:
    """One-line console rendering of summarize() output."""
    if not summary.get("rounds"):
        return "rounds=0"
    rejected = " ".join(f"{k}={summary[f'{k}_total']}" for k in REJECTIONS)
    return (
        f"rounds={summary['rounds']} | accepted mean={summary['accepted_mean']:.2f} "
        f"median={summary['accepted_median']:.1f} p90={summary['accepted_p90']:.1f} "
        f"| coverage mean={summary['coverage_mean']:.3f} | {rejected}"
    )

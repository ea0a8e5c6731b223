"""
Dataset validator for wordscramble.

What this module does:
- Validate a pair of word lists: start.txt (target words drawn at round start)
  and dictionary_<lang>.txt (words the game accepts as real).
- Enforce formatting rules (lowercase, a–z only, one per line; start words
  must also be at least `min_length` letters long).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that start ⊆ dictionary (a target should itself be a real word).
- Check that every start word leaves the player something to find: it must
  spell at least `min_spellable` other dictionary words.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("wordscramble/datasets/data/start.txt",
                             "wordscramble/datasets/data/dictionary_en.txt",
                             min_length=8, min_spellable=5)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordscramble.engine.letters import spellable_words


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool
    count: int = 0           # valid words after cleaning
    unique_count: int = 0
    invalid_lines: int = 0
    sha256: str = ""         # empty if the file is missing


@dataclass
class ValidationReport:
    """Top-level validation result for the (start, dictionary) pair."""
    min_length: int
    min_spellable: int
    start: FileReport
    dictionary: FileReport
    start_subset_dictionary: bool = False
    # start word -> number of OTHER dictionary words it can spell, for those
    # below min_spellable
    sparse_start: Dict[str, int] = field(default_factory=dict)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _is_valid_line(w: str, min_length: int) -> bool:
    return bool(w) and w == w.lower() and w.isalpha() and len(w) >= min_length


def _scan(path: Path, min_length: int) -> Tuple[FileReport, List[str]]:
    """
    Read one list; blank, non-lowercase, non-alphabetic or too-short lines
    count as invalid. Returns the file report and the valid words in order.
    """
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if _is_valid_line(w, min_length):
                valid.append(w)
            else:
                invalid += 1

    report = FileReport(
        path=str(path),
        exists=True,
        count=len(valid),
        unique_count=len(set(valid)),
        invalid_lines=invalid,
        sha256=_sha256_file(path),
    )
    return report, valid


def sparse_start_words(start: List[str], words: List[str], min_spellable: int) -> Dict[str, int]:
    """
    Start words that can spell fewer than `min_spellable` dictionary words,
    not counting the start word itself, mapped to how many they do spell.
    """
    out: Dict[str, int] = {}
    if min_spellable <= 0:
        return out
    for target in dict.fromkeys(start):
        n = sum(1 for w in spellable_words(words, target) if w != target)
        if n < min_spellable:
            out[target] = n
    return out


def _collect_issues(rep: ValidationReport, missing: List[str]) -> List[str]:
    issues: List[str] = []
    a, b = rep.start, rep.dictionary

    if missing:
        issues.append(f"start words not in dictionary (e.g., {missing[:5]})")
    for label, r in (("start", a), ("dictionary", b)):
        if r.count == 0:
            issues.append(f"{label} file contains 0 valid words")
        if r.invalid_lines:
            issues.append(f"{label} has {r.invalid_lines} invalid line(s)")
        # Duplicates are reported but don't fail validation
        if r.count != r.unique_count:
            issues.append(f"{label} contains duplicate lines")
    if rep.sparse_start:
        worst = sorted(rep.sparse_start.items(), key=lambda kv: (kv[1], kv[0]))[:5]
        issues.append(
            f"{len(rep.sparse_start)} start word(s) spell fewer than "
            f"{rep.min_spellable} dictionary words (e.g., {worst})"
        )
    return issues


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(start_path: str, dictionary_path: str, *, min_length: int = 1,
                       min_spellable: int = 0) -> Dict:
    """
    Validate the start/dictionary word lists.

    Parameters
    ----------
    start_path : str
        Path to the start-word list (round targets).
    dictionary_path : str
        Path to the dictionary list (should be a superset of start words).
    min_length : int
        Minimum length of a valid start word.
    min_spellable : int
        Minimum number of other dictionary words each start word must be
        able to spell; 0 disables the check.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema).
        `passed` is strict: both files non-empty, no invalid lines,
        start ⊆ dictionary, no sparse start words.
    """
    start_p = Path(start_path)
    dict_p = Path(dictionary_path)

    if not start_p.exists() or not dict_p.exists():
        rep = ValidationReport(
            min_length=min_length,
            min_spellable=min_spellable,
            start=FileReport(start_path, start_p.exists()),
            dictionary=FileReport(dictionary_path, dict_p.exists()),
        )
        if not start_p.exists():
            rep.issues.append(f"start file not found: {start_path}")
        if not dict_p.exists():
            rep.issues.append(f"dictionary file not found: {dictionary_path}")
        return asdict(rep)

    start_report, start = _scan(start_p, min_length)
    dict_report, words = _scan(dict_p, 1)

    known = set(words)
    missing = sorted(set(start) - known)

    rep = ValidationReport(
        min_length=min_length,
        min_spellable=min_spellable,
        start=start_report,
        dictionary=dict_report,
        start_subset_dictionary=not missing,
        sparse_start=sparse_start_words(start, words, min_spellable),
    )
    rep.issues = _collect_issues(rep, missing)
    rep.passed = (
            rep.start_subset_dictionary
            and not rep.sparse_start
            and start_report.invalid_lines == 0
            and dict_report.invalid_lines == 0
            and start_report.count > 0
            and dict_report.count > 0
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for console/docs.

    Example:
        start=30 (uniq=30, sha=abc123...) min_len=8 | dictionary=647 (uniq=647, sha=def456...) | start⊆dictionary=True | sparse(<5)=0 | OK
    """
    def part(label: str, r: Dict) -> str:
        return f"{label}={r['count']} (uniq={r['unique_count']}, sha={(r.get('sha256') or '')[:12]})"

    status = "OK" if report["passed"] else "FAIL"
    return " | ".join([
        f"{part('start', report['start'])} min_len={report['min_length']}",
        part("dictionary", report["dictionary"]),
        f"start⊆dictionary={report['start_subset_dictionary']}",
        f"sparse(<{report['min_spellable']})={len(report['sparse_start'])}",
        status,
    ])

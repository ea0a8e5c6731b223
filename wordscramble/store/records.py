"""
Persisted round records.

Fields that may be missing from older files are modelled as Optional and
decode to None; the *_label properties give the rendering for "absent".
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional

ABSENT_LABEL = "-"


class StoreFormatError(ValueError):
    """Raised when a stored file or record cannot be decoded."""


def utc_now_iso() -> str:
    """Current UTC time as a second-resolution ISO-8601 string."""
    return dt.datetime.now(dt.timezone.utc).replace(microsecond=0).isoformat()


@dataclass
class RoundRecord:
    target: str
    language: str = "en"
    used_words: List[str] = field(default_factory=list)  # most recent first
    started_at: Optional[str] = None
    finished_at: Optional[str] = None

    @property
    def started_label(self) -> str:
        return self.started_at if self.started_at is not None else ABSENT_LABEL

    @property
    def finished_label(self) -> str:
        return self.finished_at if self.finished_at is not None else ABSENT_LABEL

    def to_dict(self) -> Dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict) -> "RoundRecord":
        if not isinstance(data, dict):
            raise StoreFormatError(f"round record must be an object, got {type(data).__name__}")
        target = data.get("target")
        if not isinstance(target, str) or not target:
            raise StoreFormatError("round record is missing 'target'")

        used = data.get("used_words") or []
        if not isinstance(used, list) or not all(isinstance(w, str) for w in used):
            raise StoreFormatError("'used_words' must be a list of strings")

        return cls(
            target=target,
            language=data.get("language") or "en",
            used_words=list(used),
            started_at=data.get("started_at"),
            finished_at=data.get("finished_at"),
        )


def pop_unfinished(records: List[RoundRecord], language: str) -> Optional[RoundRecord]:
    """
    Remove and return the most recent unfinished round for `language`.
    Unfinished rounds in other languages stay where they are.
    """
    for i in range(len(records) - 1, -1, -1):
        r = records[i]
        if r.finished_at is None and r.language == language:
            return records.pop(i)
    return None

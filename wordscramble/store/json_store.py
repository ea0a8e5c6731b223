"""
JSON file store for finished and in-progress rounds.

Nothing is written implicitly: callers decide when to load() and save().

File layout:
    {
      "version": 1,
      "rounds": [ {"target": "...", "language": "en", "used_words": [...],
                   "started_at": "...", "finished_at": null}, ... ]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List

from .records import RoundRecord, StoreFormatError

logger = logging.getLogger(__name__)

STORE_VERSION = 1


class JsonRoundStore:
    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> List[RoundRecord]:
        """
        Read all records. A missing file is an empty store; anything that
        doesn't decode raises StoreFormatError.
        """
        if not self.path.exists():
            logger.debug("no store at %s; starting empty", self.path)
            return []

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise StoreFormatError(f"{self.path}: invalid JSON ({e})") from e

        if not isinstance(data, dict) or not isinstance(data.get("rounds"), list):
            raise StoreFormatError(f"{self.path}: expected an object with a 'rounds' list")

        records = [RoundRecord.from_dict(r) for r in data["rounds"]]
        logger.info("loaded %d round(s) from %s", len(records), self.path)
        return records

    def save(self, records: Iterable[RoundRecord]) -> str:
        """Overwrite the store with `records`. Returns the path written."""
        payload = {
            "version": STORE_VERSION,
            "rounds": [r.to_dict() for r in records],
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
        logger.info("saved %d round(s) to %s", len(payload["rounds"]), self.path)
        return str(self.path)

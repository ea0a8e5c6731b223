import json
from pathlib import Path

import pytest
from wordscramble.store import JsonRoundStore, RoundRecord, StoreFormatError, pop_unfinished


def test_missing_file_loads_empty(tmp_path: Path):
    assert JsonRoundStore(tmp_path / "rounds.json").load() == []


def test_save_then_load(tmp_path: Path):
    store = JsonRoundStore(tmp_path / "nested" / "rounds.json")
    recs = [
        RoundRecord("silkworm", "en", ["worm", "silk"], "2024-07-25T10:00:00+00:00",
                    "2024-07-25T10:05:00+00:00"),
        RoundRecord("keyboard", used_words=["key"]),
    ]
    store.save(recs)
    assert store.load() == recs
    data = json.loads(store.path.read_text(encoding="utf-8"))
    assert data["version"] == 1 and len(data["rounds"]) == 2


def test_absent_optional_fields(tmp_path: Path):
    p = tmp_path / "rounds.json"
    p.write_text(json.dumps({"version": 1, "rounds": [{"target": "silkworm"}]}), encoding="utf-8")
    (rec,) = JsonRoundStore(p).load()
    assert rec.language == "en"
    assert rec.used_words == []
    assert rec.started_at is None and rec.started_label == "-"
    assert rec.finished_label == "-"


@pytest.mark.parametrize("payload", [
    "not json",
    json.dumps([1, 2]),
    json.dumps({"rounds": [{"language": "en"}]}),
    json.dumps({"rounds": [{"target": "silkworm", "used_words": "silk"}]}),
    json.dumps({"rounds": ["silkworm"]}),
])
def test_malformed_store_raises(tmp_path: Path, payload):
    p = tmp_path / "rounds.json"
    p.write_text(payload, encoding="utf-8")
    with pytest.raises(StoreFormatError):
        JsonRoundStore(p).load()


def test_pop_unfinished_picks_latest_in_language():
    records = [
        RoundRecord("keyboard", "en"),
        RoundRecord("umbrella", "en", finished_at="2024-07-25T10:05:00+00:00"),
        RoundRecord("calendar", "en"),
        RoundRecord("schmetterling", "de"),
    ]
    rec = pop_unfinished(records, "en")
    assert rec.target == "calendar"
    assert [r.target for r in records] == ["keyboard", "umbrella", "schmetterling"]

    assert pop_unfinished(records, "de").target == "schmetterling"
    assert pop_unfinished(records, "de") is None
    assert pop_unfinished(records, "en").target == "keyboard"
    assert pop_unfinished(records, "en") is None
    assert [r.target for r in records] == ["umbrella"]

"""Tests for CollectionStorage.load and CollectionStorage.save."""

from __future__ import annotations

import json
import logging
from datetime import date, datetime

import pytest

from conftest import FakeCoach, make_session
from grappleflow.models import Challenge, LabEntry, LabEntryType
from grappleflow.state import AppState
from grappleflow.storage import (
    CHALLENGES_KEY,
    LAB_ENTRIES_KEY,
    SESSIONS_KEY,
    CollectionStorage,
    get_data_dir,
)


def _sessions(n: int):
    return [
        make_session(f"s{i}", day=date(2026, 3, i + 1), duration=30 + i, intensity=i + 1)
        for i in range(n)
    ]


# ---- save ----


def test_save_creates_file(storage):
    storage.save(SESSIONS_KEY, _sessions(1))
    assert (storage.data_dir / f"{SESSIONS_KEY}.json").exists()


def test_save_writes_json_list(storage):
    storage.save(SESSIONS_KEY, _sessions(2))
    data = json.loads((storage.data_dir / f"{SESSIONS_KEY}.json").read_text())
    assert isinstance(data, list)
    assert [d["id"] for d in data] == ["s0", "s1"]
    assert data[0]["type"] == "Gi"
    assert data[0]["date"] == "2026-03-01"


def test_save_leaves_no_tmp_file(storage):
    storage.save(SESSIONS_KEY, _sessions(1))
    assert not list(storage.data_dir.glob("*.tmp"))


def test_save_overwrites_whole_collection(storage):
    storage.save(SESSIONS_KEY, _sessions(3))
    storage.save(SESSIONS_KEY, _sessions(1))
    assert len(storage.load(SESSIONS_KEY)) == 1


def test_unknown_key_raises(storage):
    with pytest.raises(KeyError):
        storage.save("grappleflow_unknown", [])


# ---- load ----


def test_load_missing_returns_empty(storage):
    assert storage.load(SESSIONS_KEY) == []


def test_load_empty_file_returns_empty(storage):
    (storage.data_dir / f"{SESSIONS_KEY}.json").write_text("", encoding="utf-8")
    assert storage.load(SESSIONS_KEY) == []


def test_roundtrip_five_sessions(storage):
    original = _sessions(5)
    storage.save(SESSIONS_KEY, original)
    loaded = storage.load(SESSIONS_KEY)
    assert len(loaded) == 5
    assert loaded == original


def test_roundtrip_challenges_and_entries(storage):
    now = datetime(2026, 3, 1, 9, 15)
    challenge = Challenge(id="c1", title="Closed guard", created_at=now, last_updated=now)
    entry = LabEntry(
        id="e1", challenge_id="c1", date=now, type=LabEntryType.OBSERVATION, content="Posture broken"
    )
    storage.save(CHALLENGES_KEY, [challenge])
    storage.save(LAB_ENTRIES_KEY, [entry])
    assert storage.load(CHALLENGES_KEY) == [challenge]
    assert storage.load(LAB_ENTRIES_KEY) == [entry]


def test_load_corrupt_returns_empty_and_backs_up(storage, caplog):
    path = storage.data_dir / f"{SESSIONS_KEY}.json"
    path.write_text("not valid json {{{{", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        assert storage.load(SESSIONS_KEY) == []
    assert "Discarding stored data" in caplog.text
    backups = list(storage.data_dir.glob("*.corrupt-*.json"))
    assert len(backups) == 1
    assert backups[0].read_text(encoding="utf-8") == "not valid json {{{{"


def test_load_non_list_returns_empty(storage):
    (storage.data_dir / f"{SESSIONS_KEY}.json").write_text(json.dumps({"a": 1}), encoding="utf-8")
    assert storage.load(SESSIONS_KEY) == []


def test_load_record_missing_field_returns_empty(storage):
    good = make_session().model_dump(mode="json")
    bad = dict(good, id="s2")
    del bad["intensity"]
    (storage.data_dir / f"{SESSIONS_KEY}.json").write_text(json.dumps([good, bad]), encoding="utf-8")
    assert storage.load(SESSIONS_KEY) == []


def test_load_record_with_bad_enum_returns_empty(storage):
    record = dict(make_session().model_dump(mode="json"), mood="Ecstatic")
    (storage.data_dir / f"{SESSIONS_KEY}.json").write_text(json.dumps([record]), encoding="utf-8")
    assert storage.load(SESSIONS_KEY) == []


def test_load_timestamp_with_utc_offset_returns_empty(storage, caplog):
    records = [
        {"id": "c1", "title": "Closed guard", "category": "Guard", "status": "Active",
         "created_at": "2026-03-01T10:00:00Z", "last_updated": "2026-03-01T10:00:00Z"},
        {"id": "c2", "title": "Half guard", "category": "Guard", "status": "Active",
         "created_at": "2026-03-01T11:00:00", "last_updated": "2026-03-01T11:00:00"},
    ]
    path = storage.data_dir / f"{CHALLENGES_KEY}.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        assert storage.load(CHALLENGES_KEY) == []
    assert "Discarding stored data" in caplog.text
    assert len(list(storage.data_dir.glob("*.corrupt-*.json"))) == 1


def test_state_usable_after_offset_timestamps_discarded(storage, clock):
    record = {
        "id": "e1", "challenge_id": "c1", "date": "2026-03-01T10:00:00+02:00",
        "type": "Observation", "content": "Posture broken",
    }
    (storage.data_dir / f"{LAB_ENTRIES_KEY}.json").write_text(json.dumps([record]), encoding="utf-8")
    state = AppState.load(storage, coach=FakeCoach(), clock=clock)
    assert state.lab_entries == []
    challenge = state.create_challenge("Closed guard")
    state.add_entry(challenge.id, LabEntryType.OBSERVATION, "note")
    assert [c.id for c in state.list_challenges()] == [challenge.id]


# ---- data dir ----


def test_data_dir_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("GRAPPLEFLOW_DATA_DIR", str(tmp_path / "custom"))
    assert get_data_dir() == tmp_path / "custom"
    assert CollectionStorage().data_dir.exists()


def test_data_dir_default(monkeypatch):
    monkeypatch.delenv("GRAPPLEFLOW_DATA_DIR", raising=False)
    assert get_data_dir().parts[-2:] == (".config", "grappleflow")

"""Tests for the snapshot store."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from policysync.core.models import RunStatus
from policysync.storage.snapshots import SnapshotStore


if TYPE_CHECKING:
    from pathlib import Path


def test_ensure_directory_is_idempotent(tmp_path: Path) -> None:
    store = SnapshotStore(tmp_path / "nested" / "output")
    store.ensure_directory()
    store.ensure_directory()
    assert (tmp_path / "nested" / "output").is_dir()


def test_read_existing_absent(store: SnapshotStore) -> None:
    assert store.read_existing("abbvie") is None


def test_write_then_read(store: SnapshotStore) -> None:
    path = store.write("abbvie", "a,b\n1,2")
    assert path.name == "abbvie_340b_rules.csv"
    assert store.read_existing("abbvie") == "a,b\n1,2"


def test_empty_file_is_not_absent(store: SnapshotStore) -> None:
    store.write("abbvie", "")
    assert store.read_existing("abbvie") == ""


def test_write_overwrites(store: SnapshotStore) -> None:
    store.write("abbvie", "old")
    store.write("abbvie", "new")
    assert store.read_existing("abbvie") == "new"


def test_newlines_are_not_translated(store: SnapshotStore) -> None:
    content = 'a,"x\r\ny"\nb,c'
    store.write("amgen", content)
    assert store.read_existing("amgen") == content
    assert store.snapshot_path("amgen").read_bytes() == content.encode("utf-8")


def test_write_status(store: SnapshotStore) -> None:
    store.write_status(RunStatus(last_run="2026-10-18T09:30:00.000Z", updates=["abbvie", "teva"]))
    raw = store.status_path.read_text(encoding="utf-8")
    assert json.loads(raw) == {"last_run": "2026-10-18T09:30:00.000Z", "updates": ["abbvie", "teva"]}
    assert raw.startswith('{\n  "last_run"')


def test_read_status(store: SnapshotStore) -> None:
    assert store.read_status() is None
    store.write_status(RunStatus(updates=["pfizer"]))
    status = store.read_status()
    assert status is not None
    assert status.updates == ["pfizer"]


def test_list_snapshots(store: SnapshotStore) -> None:
    store.write("teva", "x")
    store.write("abbvie", "y")
    store.write_status(RunStatus())
    assert store.list_snapshots() == ["abbvie", "teva"]


def test_list_snapshots_missing_directory(tmp_path: Path) -> None:
    assert SnapshotStore(tmp_path / "missing").list_snapshots() == []


def test_read_existing_tolerates_invalid_utf8(store: SnapshotStore) -> None:
    store.ensure_directory()
    store.snapshot_path("amgen").write_bytes(b"old \xff snapshot")
    assert store.read_existing("amgen") == "old \ufffd snapshot"

"""File-based snapshot store for rule CSVs and the run status."""

from __future__ import annotations

import json
from pathlib import Path

from policysync.core.models import RunStatus


SNAPSHOT_SUFFIX = "_340b_rules.csv"
STATUS_FILENAME = "last_run_status.json"


class SnapshotStore:
    """Stores one CSV snapshot per manufacturer plus the last run status.

    Files are read and written as UTF-8 without newline translation, so a
    snapshot compares byte-for-byte with freshly serialized CSV text.
    """

    def __init__(self, output_dir: str | Path = "output") -> None:
        self.output_dir = Path(output_dir)

    @property
    def status_path(self) -> Path:
        return self.output_dir / STATUS_FILENAME

    def snapshot_path(self, manufacturer_id: str) -> Path:
        return self.output_dir / f"{manufacturer_id}{SNAPSHOT_SUFFIX}"

    def ensure_directory(self) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        return self.output_dir

    def read_existing(self, manufacturer_id: str) -> str | None:
        """Return the stored CSV for a manufacturer, or None if there is none yet."""
        try:
            path = self.snapshot_path(manufacturer_id)
            with path.open(encoding="utf-8", errors="replace", newline="") as fh:
                return fh.read()
        except FileNotFoundError:
            return None

    def write(self, manufacturer_id: str, csv_text: str) -> Path:
        path = self.snapshot_path(manufacturer_id)
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(csv_text)
        return path

    def write_status(self, status: RunStatus) -> Path:
        self.status_path.write_text(json.dumps(status.model_dump(), indent=2), encoding="utf-8")
        return self.status_path

    def read_status(self) -> RunStatus | None:
        if not self.status_path.exists():
            return None
        return RunStatus.model_validate_json(self.status_path.read_text(encoding="utf-8"))

    def list_snapshots(self) -> list[str]:
        """Return the manufacturer ids that have a stored snapshot."""
        if not self.output_dir.is_dir():
            return []
        return sorted(p.name[: -len(SNAPSHOT_SUFFIX)] for p in self.output_dir.glob(f"*{SNAPSHOT_SUFFIX}"))

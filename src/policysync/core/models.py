"""Data models for the policy sync system."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utc_timestamp(moment: datetime | None = None) -> str:
    """Format a moment as an ISO 8601 UTC string with millisecond precision."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ManufacturerEntry(BaseModel):
    """A tracked manufacturer and the URL of its policy document."""
    id: str
    source_url: str

    model_config = ConfigDict(frozen=True)


class SyncDetail(BaseModel):
    """Outcome of syncing a single manufacturer."""
    id: str
    updated: bool = False
    rules_count: int | None = None
    error: str | None = None

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    @property
    def failed(self) -> bool:
        return self.error is not None


class SyncResult(BaseModel):
    """Aggregate result of one sync run."""
    total_manufacturers: int
    updated: int = 0
    unchanged: int = 0
    details: list[SyncDetail] = Field(default_factory=list)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @property
    def failed(self) -> list[SyncDetail]:
        return [d for d in self.details if d.failed]

    def to_output(self) -> dict[str, Any]:
        """Convert to the camelCase result payload returned to callers."""
        return self.model_dump(by_alias=True, exclude_none=True)


class RunStatus(BaseModel):
    """Summary of the most recent run, persisted as last_run_status.json."""
    last_run: str = Field(default_factory=utc_timestamp)
    updates: list[str] = Field(default_factory=list)

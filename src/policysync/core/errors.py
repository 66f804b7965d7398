"""Error types raised by the sync pipeline stages."""

from __future__ import annotations


class SyncError(Exception):
    """Base class for per-manufacturer pipeline failures."""


class FetchError(SyncError):
    """A policy document could not be downloaded."""

    def __init__(self, url: str, reason: str, status_code: int | None = None) -> None:
        super().__init__(f"Failed to download PDF from {url}: {reason}")
        self.url = url
        self.reason = reason
        self.status_code = status_code


class ExtractionError(SyncError):
    """A downloaded document could not be decoded into text."""


class GenerationError(SyncError):
    """The language model call failed."""


class EmptyTableError(SyncError):
    """The model reply contained no markdown table rows."""

    def __init__(self, message: str = "No rows extracted from markdown table") -> None:
        super().__init__(message)

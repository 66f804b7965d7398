"""policysync - 340B manufacturer policy rule sync.

This package provides a sequential batch job that:
- Downloads manufacturer policy PDFs
- Extracts their text
- Asks an LLM for a structured eligibility-rule table
- Diffs the table against the stored CSV snapshot
- Writes changed snapshots and a run-status record
"""

from __future__ import annotations

from policysync.config.registry import MANUFACTURER_POLICIES, load_registry
from policysync.config.settings import Settings
from policysync.core.models import ManufacturerEntry, RunStatus, SyncDetail, SyncResult
from policysync.orchestrator.sync import PolicySync


__version__ = "0.1.0"

__all__ = [
    "MANUFACTURER_POLICIES",
    "ManufacturerEntry",
    "PolicySync",
    "RunStatus",
    "Settings",
    "SyncDetail",
    "SyncResult",
    "load_registry",
]

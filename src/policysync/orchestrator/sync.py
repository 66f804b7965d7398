"""Sync orchestrator for manufacturer policy snapshots."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from policysync.agents.extractor import RuleExtractorAgent
from policysync.config.registry import load_registry
from policysync.config.settings import Settings
from policysync.core.errors import EmptyTableError
from policysync.core.llm import LLMClient
from policysync.core.models import RunStatus, SyncDetail, SyncResult
from policysync.storage.snapshots import SnapshotStore
from policysync.tools.fetch import DocumentFetcher
from policysync.tools.pdf import PDFTextExtractor
from policysync.tools.table import parse_markdown_table, rows_to_csv


if TYPE_CHECKING:
    from collections.abc import Callable

    from policysync.core.models import ManufacturerEntry

logger = logging.getLogger(__name__)


class PolicySync:
    """Runs the download -> extract -> generate -> diff -> persist loop.

    Manufacturers are processed one at a time in registry order. A failure
    for one manufacturer is recorded on its detail and never stops the run.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        mock: bool = False,
        *,
        registry: list[ManufacturerEntry] | None = None,
        fetcher: DocumentFetcher | None = None,
        pdf: PDFTextExtractor | None = None,
        extractor: RuleExtractorAgent | None = None,
        store: SnapshotStore | None = None,
    ) -> None:
        if settings is None:
            settings = Settings()
        self.settings = settings
        self.registry = registry if registry is not None else load_registry(settings.sync.registry_file)
        self._fetcher = fetcher or DocumentFetcher(settings)
        self._pdf = pdf or PDFTextExtractor()
        self._extractor = extractor or RuleExtractorAgent(LLMClient.create(settings, mock=mock))
        self._store = store or SnapshotStore(settings.sync.output_dir)

    @property
    def store(self) -> SnapshotStore:
        return self._store

    async def run(self, on_detail: Callable[[SyncDetail], None] | None = None) -> SyncResult:
        """Sync every registered manufacturer and write the run status.

        Args:
            on_detail: Optional hook called with each manufacturer's outcome.

        Returns:
            SyncResult with counts and per-manufacturer details.
        """
        start_time = time.time()
        self._store.ensure_directory()
        logger.info("Starting sync of %d manufacturers", len(self.registry))

        details: list[SyncDetail] = []
        updated_ids: list[str] = []
        updated_count = unchanged_count = 0

        for entry in self.registry:
            try:
                detail = await self._sync_entry(entry)
            except EmptyTableError as e:
                # Counted in neither bucket
                logger.warning("%s: %s", entry.id, e)
                detail = SyncDetail(id=entry.id, error=str(e))
            except Exception as e:
                # Failures are reported as unchanged
                logger.warning("%s: sync failed: %s", entry.id, e)
                detail = SyncDetail(id=entry.id, error=str(e) or type(e).__name__)
                unchanged_count += 1
            else:
                if detail.updated:
                    updated_count += 1
                    updated_ids.append(entry.id)
                else:
                    unchanged_count += 1
            details.append(detail)
            if on_detail is not None:
                on_detail(detail)

        self._store.write_status(RunStatus(updates=updated_ids))
        logger.info(
            "Sync complete in %.1fs: %d updated, %d unchanged",
            time.time() - start_time, updated_count, unchanged_count,
        )
        return SyncResult(
            total_manufacturers=len(self.registry),
            updated=updated_count,
            unchanged=unchanged_count,
            details=details,
        )

    async def _sync_entry(self, entry: ManufacturerEntry) -> SyncDetail:
        logger.info("Syncing %s", entry.id)
        pdf_bytes = await self._fetcher.fetch(entry.source_url)
        policy_text = self._pdf.extract(pdf_bytes)
        markdown = await self._extractor.extract(policy_text)

        rows = parse_markdown_table(markdown)
        if not rows:
            raise EmptyTableError
        rules_count = len(rows) - 1

        csv_content = rows_to_csv(rows)
        existing = self._store.read_existing(entry.id)
        if existing is not None and existing == csv_content:
            logger.info("%s: unchanged (%d rules)", entry.id, rules_count)
            return SyncDetail(id=entry.id, updated=False, rules_count=rules_count)

        self._store.write(entry.id, csv_content)
        logger.info("%s: updated (%d rules)", entry.id, rules_count)
        return SyncDetail(id=entry.id, updated=True, rules_count=rules_count)
